"""
Control-flow combinators over effectful computations.

Loops driven by effectful predicates, short-circuiting boolean logic,
effectful list transforms and search.

Architecture:
- Generic combinators (*M functions) work with any effect via extract + wrap pattern
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for LazyCoroResultWriter (*_w suffix)
"""

# Core types
from ._types import LCR, Continue, Done, NoError, Predicate, Step

# Internal helpers (for custom effects)
from . import _helpers

# Lift helpers
from . import lift
from .lift import call, fail, from_result, predicate, pure

# Writer effect
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult, writer_error, writer_ok

# Basic helpers and loops
from .control import (
    # LazyCoroResult
    loop,
    unit,
    when_just,
    while_,
    # LazyCoroResultWriter
    loop_w,
    when_just_w,
    while_w,
    # Generic
    loopM,
    when_justM,
    whileM,
)

# Collection operations
from .collection import (
    # LazyCoroResult
    concat_map,
    map_maybe,
    partition,
    traverse,
    # LazyCoroResultWriter
    concat_map_w,
    map_maybe_w,
    partition_w,
    traverse_w,
    # Generic
    concat_mapM,
    map_maybeM,
    partitionM,
    traverseM,
)

# Booleans and search
from .logic import (
    # LazyCoroResult
    all_,
    and2,
    and_,
    any_,
    find,
    first_just,
    if_,
    not_,
    or2,
    or_,
    unless,
    when,
    # LazyCoroResultWriter
    all_w,
    and2_w,
    and_w,
    any_w,
    find_w,
    first_just_w,
    if_w,
    not_w,
    or2_w,
    or_w,
    unless_w,
    when_w,
    # Generic
    allM,
    and2M,
    andM,
    anyM,
    findM,
    first_justM,
    ifM,
    notM,
    or2M,
    orM,
    unlessM,
    whenM,
)

__all__ = (
    # Types
    "LCR",
    "NoError",
    "Predicate",
    "Step",
    "Continue",
    "Done",
    # Internal helpers (for custom effects)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "call",
    "fail",
    "from_result",
    "predicate",
    "pure",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
    # Control - LazyCoroResult
    "loop",
    "unit",
    "when_just",
    "while_",
    # Control - LazyCoroResultWriter
    "loop_w",
    "when_just_w",
    "while_w",
    # Control - Generic
    "loopM",
    "when_justM",
    "whileM",
    # Collection - LazyCoroResult
    "concat_map",
    "map_maybe",
    "partition",
    "traverse",
    # Collection - LazyCoroResultWriter
    "concat_map_w",
    "map_maybe_w",
    "partition_w",
    "traverse_w",
    # Collection - Generic
    "concat_mapM",
    "map_maybeM",
    "partitionM",
    "traverseM",
    # Logic - LazyCoroResult
    "all_",
    "and2",
    "and_",
    "any_",
    "find",
    "first_just",
    "if_",
    "not_",
    "or2",
    "or_",
    "unless",
    "when",
    # Logic - LazyCoroResultWriter
    "all_w",
    "and2_w",
    "and_w",
    "any_w",
    "find_w",
    "first_just_w",
    "if_w",
    "not_w",
    "or2_w",
    "or_w",
    "unless_w",
    "when_w",
    # Logic - Generic
    "allM",
    "and2M",
    "andM",
    "anyM",
    "findM",
    "first_justM",
    "ifM",
    "notM",
    "or2M",
    "orM",
    "unlessM",
    "whenM",
)
