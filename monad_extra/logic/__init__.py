from .boolean import (
    all_,
    all_w,
    allM,
    and2,
    and2_w,
    and2M,
    and_,
    and_w,
    andM,
    any_,
    any_w,
    anyM,
    or2,
    or2_w,
    or2M,
    or_,
    or_w,
    orM,
)
from .branch import (
    if_,
    if_w,
    ifM,
    not_,
    not_w,
    notM,
    unless,
    unless_w,
    unlessM,
    when,
    when_w,
    whenM,
)
from .search import find, find_w, findM, first_just, first_just_w, first_justM

__all__ = (
    # Branch
    "if_",
    "if_w",
    "ifM",
    "when",
    "when_w",
    "whenM",
    "unless",
    "unless_w",
    "unlessM",
    "not_",
    "not_w",
    "notM",
    # Boolean
    "or2",
    "or2_w",
    "or2M",
    "and2",
    "and2_w",
    "and2M",
    "any_",
    "any_w",
    "anyM",
    "all_",
    "all_w",
    "allM",
    "or_",
    "or_w",
    "orM",
    "and_",
    "and_w",
    "andM",
    # Search
    "find",
    "find_w",
    "findM",
    "first_just",
    "first_just_w",
    "first_justM",
)
