"""Boolean combinators

Short-circuiting or / and over effects with extract + wrap pattern.
Once the answer is known no further effect is called."""

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
    pure_thunk,
)
from ..writer import LazyCoroResultWriter
from .branch import if_, ifM


# ============================================================================
# Generic combinators (extract + wrap pattern)
# ============================================================================


def or2M[M, E, Raw](
    first: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    second: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    extract: Callable[[Raw], Result[bool, E]],
    combine_ok: Callable[[bool, list[Raw]], Raw],
    combine_err: Callable[[E, list[Raw]], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Generic effectful or: second runs only if first yields False."""
    return ifM(
        first,
        pure_thunk(True, combine_ok),
        second,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def and2M[M, E, Raw](
    first: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    second: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    extract: Callable[[Raw], Result[bool, E]],
    combine_ok: Callable[[bool, list[Raw]], Raw],
    combine_err: Callable[[E, list[Raw]], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Generic effectful and: second runs only if first yields True."""
    return ifM(
        first,
        second,
        pure_thunk(False, combine_ok),
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def _scanM[M, A, E, RawIn, RawOut](
    predicate: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    stop_on: bool,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[bool, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    # Yields stop_on at the first item whose predicate yields stop_on,
    # `not stop_on` once every item has been checked.
    async def run() -> RawOut:
        raws: list[RawIn] = []
        for item in items:
            raw = await predicate(item)()
            raws.append(raw)
            match extract(raw):
                case Ok(flag):
                    if bool(flag) is stop_on:
                        return combine_ok(stop_on, raws)
                case Error(e):
                    return combine_err(e, raws)
        return combine_ok(not stop_on, raws)

    return wrap(run)


def anyM[M, A, E, RawIn, RawOut](
    predicate: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[bool, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic any combinator.

    Predicate runs left to right; the first True stops the scan.
    """
    return _scanM(
        predicate,
        items,
        stop_on=True,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def allM[M, A, E, RawIn, RawOut](
    predicate: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    items: Sequence[A],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[bool, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic all combinator.

    Predicate runs left to right; the first False stops the scan.
    """
    return _scanM(
        predicate,
        items,
        stop_on=False,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def orM[M, E, RawIn, RawOut](
    actions: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[bool, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """Generic or over a list of boolean effects."""
    return anyM(
        identity,
        actions,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def andM[M, E, RawIn, RawOut](
    actions: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[bool, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """Generic and over a list of boolean effects."""
    return allM(
        identity,
        actions,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def or2[E](
    first: LazyCoroResult[bool, E],
    second: LazyCoroResult[bool, E],
) -> LazyCoroResult[bool, E]:
    """
    Effectful `or` (||^).

        await or2(L.up.pure(True), L.up.fail(boom))   # Ok(True), boom never runs
        await or2(L.up.pure(False), L.up.fail(boom))  # Error(boom)
    """
    return if_(first, LazyCoroResult.pure(True), second)


def and2[E](
    first: LazyCoroResult[bool, E],
    second: LazyCoroResult[bool, E],
) -> LazyCoroResult[bool, E]:
    """Effectful `and` (&&^). second never runs if first yields False."""
    return if_(first, second, LazyCoroResult.pure(False))


def any_[A, E](
    predicate: Callable[[A], LazyCoroResult[bool, E]],
    items: Sequence[A],
) -> LazyCoroResult[bool, E]:
    """True at the first item satisfying predicate; later items are not checked."""
    return anyM(
        predicate,
        items,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


def all_[A, E](
    predicate: Callable[[A], LazyCoroResult[bool, E]],
    items: Sequence[A],
) -> LazyCoroResult[bool, E]:
    """False at the first item failing predicate; later items are not checked."""
    return allM(
        predicate,
        items,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


def or_[E](actions: Sequence[LazyCoroResult[bool, E]]) -> LazyCoroResult[bool, E]:
    """Run boolean effects in order until one yields True."""
    return orM(
        actions,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


def and_[E](actions: Sequence[LazyCoroResult[bool, E]]) -> LazyCoroResult[bool, E]:
    """Run boolean effects in order until one yields False."""
    return andM(
        actions,
        extract=identity,
        combine_ok=ok_result,
        combine_err=error_result,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def or2_w[E, W](
    first: LazyCoroResultWriter[bool, E, W],
    second: LazyCoroResultWriter[bool, E, W],
) -> LazyCoroResultWriter[bool, E, W]:
    """Effectful `or`. second's log appears only if second ran."""
    return or2M(
        first,
        second,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def and2_w[E, W](
    first: LazyCoroResultWriter[bool, E, W],
    second: LazyCoroResultWriter[bool, E, W],
) -> LazyCoroResultWriter[bool, E, W]:
    """Effectful `and`. second's log appears only if second ran."""
    return and2M(
        first,
        second,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def any_w[A, E, W](
    predicate: Callable[[A], LazyCoroResultWriter[bool, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[bool, E, W]:
    """Short-circuit any. Logs of checked items only."""
    return anyM(
        predicate,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def all_w[A, E, W](
    predicate: Callable[[A], LazyCoroResultWriter[bool, E, W]],
    items: Sequence[A],
) -> LazyCoroResultWriter[bool, E, W]:
    """Short-circuit all. Logs of checked items only."""
    return allM(
        predicate,
        items,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def or_w[E, W](actions: Sequence[LazyCoroResultWriter[bool, E, W]]) -> LazyCoroResultWriter[bool, E, W]:
    """Run boolean writers in order until one yields True."""
    return orM(
        actions,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def and_w[E, W](actions: Sequence[LazyCoroResultWriter[bool, E, W]]) -> LazyCoroResultWriter[bool, E, W]:
    """Run boolean writers in order until one yields False."""
    return andM(
        actions,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = (
    # LazyCoroResult
    "or2",
    "and2",
    "any_",
    "all_",
    "or_",
    "and_",
    # LazyCoroResultWriter
    "or2_w",
    "and2_w",
    "any_w",
    "all_w",
    "or_w",
    "and_w",
    # Generic
    "or2M",
    "and2M",
    "anyM",
    "allM",
    "orM",
    "andM",
)
