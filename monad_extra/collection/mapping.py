"""
Mapping combinators
===================

concat_map and map_maybe over effectful functions, both derived from
traverseM: run left to right, fail on the first Error, then reshape the
collected values.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult, Result

from .._helpers import (
    error_result,
    error_writer_result,
    writer_outcome,
    identity,
    ok_result,
    ok_writer_result,
)
from ..writer import LazyCoroResultWriter
from .traverse import traverseM


# ============================================================================
# Generic combinators (extract + wrap pattern)
# ============================================================================


def concat_mapM[M, A, B, E, RawIn, RawOut](
    f: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[Sequence[B], E]],
    combine_ok: Callable[[list[B], list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """Generic concat_map: f per item, then flatten in order."""

    def flatten(chunks: list[Sequence[B]], raws: list[RawIn]) -> RawOut:
        return combine_ok([x for chunk in chunks for x in chunk], raws)

    return traverseM(
        f,
        items,
        extract=extract,
        combine_ok=flatten,
        combine_err=combine_err,
        wrap=wrap,
    )


def map_maybeM[M, A, B, E, RawIn, RawOut](
    f: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[B | None, E]],
    combine_ok: Callable[[list[B], list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """Generic map_maybe: f per item, keep the non-None results in order."""

    def present(values: list[B | None], raws: list[RawIn]) -> RawOut:
        return combine_ok([v for v in values if v is not None], raws)

    return traverseM(
        f,
        items,
        extract=extract,
        combine_ok=present,
        combine_err=combine_err,
        wrap=wrap,
    )


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def concat_map[A, B, E](
    f: Callable[[A], LazyCoroResult[Sequence[B], E]],
    items: Sequence[A],
) -> LazyCoroResult[list[B], E]:
    """Effectful concatMap: one list per item, concatenated."""
    return concat_mapM(
        f,
        items,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


def map_maybe[A, B, E](
    f: Callable[[A], LazyCoroResult[B | None, E]],
    items: Sequence[A],
) -> LazyCoroResult[list[B], E]:
    """
    Effectful mapMaybe: drop None results.

        await map_maybe(lambda x: L.up.pure(x if x % 2 == 0 else None), [1, 2, 3, 4])
        # Ok([2, 4])
    """
    return map_maybeM(
        f,
        items,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def concat_map_w[A, B, E, W](
    f: Callable[[A], LazyCoroResultWriter[Sequence[B], E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[list[B], E, W]:
    """Effectful concatMap with log merging."""
    return concat_mapM(
        f,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def map_maybe_w[A, B, E, W](
    f: Callable[[A], LazyCoroResultWriter[B | None, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[list[B], E, W]:
    """Effectful mapMaybe with log merging."""
    return map_maybeM(
        f,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = (
    "concat_map",
    "concat_map_w",
    "concat_mapM",
    "map_maybe",
    "map_maybe_w",
    "map_maybeM",
)
