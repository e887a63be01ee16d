"""Search combinators

First-match search over items with extract + wrap pattern. `None` stands
for "not found"."""

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
# Generic combinators (extract + wrap pattern)
# ============================================================================


def findM[M, A, E, RawIn, RawOut](
    predicate: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[A | None, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic find combinator.

    First item whose predicate yields True, or None. Items after the
    match are never checked.
    """

    async def run() -> RawOut:
        raws: list[RawIn] = []
        for item in items:
            raw = await predicate(item)()
            raws.append(raw)
            match extract(raw):
                case Ok(hit):
                    if hit:
                        return combine_ok(item, raws)
                case Error(e):
                    return combine_err(e, raws)
        return combine_ok(None, raws)

    return wrap(run)


def first_justM[M, A, B, E, RawIn, RawOut](
    f: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[B | None, E]],
    combine_ok: Callable[[B | None, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic first_just combinator.

    First non-None result of f, or None. f is not called past it.
    """

    async def run() -> RawOut:
        raws: list[RawIn] = []
        for item in items:
            raw = await f(item)()
            raws.append(raw)
            match extract(raw):
                case Ok(found):
                    if found is not None:
                        return combine_ok(found, raws)
                case Error(e):
                    return combine_err(e, raws)
        return combine_ok(None, raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def find[A, E](
    predicate: Callable[[A], LazyCoroResult[bool, E]],
    items: Sequence[A],
) -> LazyCoroResult[A | None, E]:
    """
    First item satisfying an effectful predicate.

        await find(L.up.predicate(lambda _: True), [1, 2, 3])  # Ok(1)
        await find(is_cached, [])                               # Ok(None)
    """
    return findM(
        predicate,
        items,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


def first_just[A, B, E](
    f: Callable[[A], LazyCoroResult[B | None, E]],
    items: Sequence[A],
) -> LazyCoroResult[B | None, E]:
    """
    First non-None result, trying items in order.

        # first mirror that has the file
        await first_just(lambda mirror: mirror.lookup(path), mirrors)
    """
    return first_justM(
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


def find_w[A, E, W](
    predicate: Callable[[A], LazyCoroResultWriter[bool, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[A | None, E, W]:
    """First item satisfying predicate. Logs of checked items only."""
    return findM(
        predicate,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def first_just_w[A, B, E, W](
    f: Callable[[A], LazyCoroResultWriter[B | None, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[B | None, E, W]:
    """First non-None result. Logs of tried items only."""
    return first_justM(
        f,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("find", "find_w", "findM", "first_just", "first_just_w", "first_justM")
