"""Traverse combinators

Sequential monadic map with extract + wrap pattern. The building block for
the other list transforms."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import (
    error_result,
    error_writer_result,
    writer_outcome,
    identity,
    ok_result,
    ok_writer_result,
)
from ..writer import LazyCoroResultWriter


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def traverseM[M, A, T, E, RawIn, RawOut](
    handler: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[T, E]],
    combine_ok: Callable[[list[T], list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic traverse combinator.

    Run handler on each item left to right, stop at the first Error.
    Items after the failing one are never handled.
    """

    async def run() -> RawOut:
        values: list[T] = []
        raws: list[RawIn] = []

        for item in items:
            raw = await handler(item)()
            raws.append(raw)
            match extract(raw):
                case Ok(v):
                    values.append(v)
                case Error(e):
                    return combine_err(e, raws)

        return combine_ok(values, raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def traverse[A, T, E](
    handler: Callable[[A], LazyCoroResult[T, E]],
    items: Sequence[A],
) -> LazyCoroResult[list[T], E]:
    """Monadic map: A -> Interp[T]. Sequential to preserve effect order."""
    return traverseM(
        handler,
        items,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def traverse_w[A, T, E, W](
    handler: Callable[[A], LazyCoroResultWriter[T, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[list[T], E, W]:
    """Monadic map with log merging."""
    return traverseM(
        handler,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("traverse", "traverse_w", "traverseM")
