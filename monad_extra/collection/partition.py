"""Partition combinators

Split items by an effectful predicate with extract + wrap pattern."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import (
    error_writer_result,
    writer_outcome,
    ok_writer_result,
)
from ..writer import LazyCoroResultWriter


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def partitionM[M, A, E, RawIn, RawOut](
    predicate: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[tuple[list[A], list[A]], list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic partition combinator.

    Predicate runs on every item, head first. The first Error aborts the
    whole partition; no partial split is produced.
    """

    async def run() -> RawOut:
        matched: list[A] = []
        unmatched: list[A] = []
        raws: list[RawIn] = []

        for item in items:
            raw = await predicate(item)()
            raws.append(raw)
            match extract(raw):
                case Ok(hit):
                    (matched if hit else unmatched).append(item)
                case Error(e):
                    return combine_err(e, raws)

        return combine_ok((matched, unmatched), raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def partition[A, E](
    predicate: Callable[[A], LazyCoroResult[bool, E]],
    items: Sequence[A],
) -> LazyCoroResult[tuple[list[A], list[A]], E]:
    """
    Split items into (matched, unmatched), both in input order.

        await partition(L.up.predicate(is_even), [1, 2, 3])  # Ok(([2], [1, 3]))
    """

    async def run() -> Result[tuple[list[A], list[A]], E]:
        matched: list[A] = []
        unmatched: list[A] = []

        for item in items:
            r = await predicate(item)()
            match r:
                case Ok(hit):
                    (matched if hit else unmatched).append(item)
                case Error(e):
                    return Error(e)

        return Ok((matched, unmatched))

    return LazyCoroResult(run)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def partition_w[A, E, W](
    predicate: Callable[[A], LazyCoroResultWriter[bool, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[tuple[list[A], list[A]], E, W]:
    """Split items into (matched, unmatched). Merges predicate logs."""
    return partitionM(
        predicate,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("partition", "partition_w", "partitionM")
