"""
Core type definitions for monad_extra.

Aliases and loop tags shared by every combinator group.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = plain function that tests a value
type Predicate[T] = Callable[[T], bool]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) rather than None: no error value can be built.
type NoError = typing.Never

# ============================================================================
# Loop tags
# ============================================================================


@dataclass(frozen=True, slots=True)
class Continue[A]:
    """Loop again, feeding `seed` to the next step."""

    seed: A


@dataclass(frozen=True, slots=True)
class Done[B]:
    """Stop looping and yield `value`."""

    value: B


# Step = what a loop body yields on success
type Step[A, B] = Continue[A] | Done[B]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

# Interp = the effect most sugar functions consume and produce
type Interp[T, E] = LazyCoroResult[T, E]

__all__ = (
    # Type aliases
    "Predicate",
    "NoError",
    "Step",
    # Loop tags
    "Continue",
    "Done",
    # Concrete shortcuts
    "LCR",
    "Interp",
)
