"""
Lifting values into effects (LazyCoroResult).

Build the conditions, branches and predicates the combinators consume
from plain values, Results and plain predicates.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Interp, NoError, Predicate


def pure[T](value: T) -> Interp[T, Never]:
    """
    Lift a pure value into an always-succeeding effect.

    Example:
        from monad_extra import lift as L, if_

        if_(L.up.pure(True), fetch_fresh, fetch_cached)
    """
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> Interp[Never, E]:
    """
    Always-failing effect. Dual of pure().

    **When to use:** As a branch that must never be reached, to prove a
    combinator short-circuits:

        or2(L.up.pure(True), L.up.fail(Unreachable()))  # Ok(True)
    """
    async def run() -> Result[Never, E]:
        return Error(error)

    return LazyCoroResult(run)


def from_result[T, E](value: Result[T, E]) -> Interp[T, E]:
    """
    Lift an already-computed Result.

    NOTE: Not lazy in its argument: the Result exists before the effect runs.
    """
    async def run() -> Result[T, E]:
        return value

    return LazyCoroResult(run)


def predicate[A](test: Predicate[A]) -> Callable[[A], Interp[bool, NoError]]:
    """
    Turn a plain predicate into an effectful one.

    test runs when the returned effect runs, not when it is built, so a
    short-circuiting combinator never calls it for skipped items.

    Example:
        from monad_extra import any_, lift as L

        await any_(L.up.predicate(lambda n: n % 2 == 0), [1, 3, 4])  # Ok(True)
    """
    def check(item: A) -> Interp[bool, NoError]:
        async def run() -> Result[bool, NoError]:
            return Ok(test(item))

        return LazyCoroResult(run)

    return check


__all__ = (
    "pure",
    "fail",
    "from_result",
    "predicate",
)
