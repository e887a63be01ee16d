"""
Branch combinators
==================

Effectful if / when / unless / not with extract + wrap pattern.

The branch that is not taken is never called, so it can never fail the
combined effect.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import (
    error_writer_result,
    writer_outcome,
    ok_writer_result,
    pure_thunk,
)
from ..writer import LazyCoroResultWriter


# ============================================================================
# Generic combinators (extract + wrap pattern)
# ============================================================================


def ifM[M, T, E, Raw](
    condition: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    then: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    otherwise: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    extract: Callable[[Raw], Result[typing.Any, E]],
    combine_ok: Callable[[T, list[Raw]], Raw],
    combine_err: Callable[[E, list[Raw]], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic if combinator.

    Run condition, then exactly one of then / otherwise.

    Args:
        condition: Effect yielding bool
        then: Run when condition yields True
        otherwise: Run when condition yields False
        extract: Function to extract Result from Raw
        combine_ok: Build a successful Raw from value and evaluated raws
        combine_err: Build a failed Raw from error and evaluated raws
        wrap: Constructor to wrap thunk back into effect M
    """

    async def run() -> Raw:
        cond_raw = await condition()
        match extract(cond_raw):
            case Ok(flag):
                branch_raw = await (then if flag else otherwise)()
            case Error(e):
                return combine_err(e, [cond_raw])

        raws = [cond_raw, branch_raw]
        match extract(branch_raw):
            case Ok(value):
                return combine_ok(value, raws)
            case Error(e):
                return combine_err(e, raws)

    return wrap(run)


def whenM[M, E, Raw](
    condition: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    action: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    extract: Callable[[Raw], Result[typing.Any, E]],
    combine_ok: Callable[[typing.Any, list[Raw]], Raw],
    combine_err: Callable[[E, list[Raw]], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Generic when: run action only if condition yields True."""
    return ifM(
        condition,
        action,
        pure_thunk(None, combine_ok),
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def unlessM[M, E, Raw](
    condition: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    action: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    extract: Callable[[Raw], Result[typing.Any, E]],
    combine_ok: Callable[[typing.Any, list[Raw]], Raw],
    combine_err: Callable[[E, list[Raw]], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Generic unless: run action only if condition yields False."""
    return ifM(
        condition,
        pure_thunk(None, combine_ok),
        action,
        extract=extract,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap,
    )


def notM[M, E, RawIn, RawOut](
    condition: Callable[[], Coroutine[typing.Any, typing.Any, RawIn]],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[bool, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """Generic not: negate condition, evaluating it exactly once."""

    async def run() -> RawOut:
        raw = await condition()
        match extract(raw):
            case Ok(flag):
                return combine_ok(not flag, [raw])
            case Error(e):
                return combine_err(e, [raw])

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def if_[T, E](
    condition: LazyCoroResult[bool, E],
    then: LazyCoroResult[T, E],
    otherwise: LazyCoroResult[T, E],
) -> LazyCoroResult[T, E]:
    """
    Effectful if.

        if_(cache.has(key), cache.get(key), api.fetch(key))
    """

    async def run() -> Result[T, E]:
        r = await condition()
        match r:
            case Ok(flag):
                return await (then if flag else otherwise)()
            case Error(e):
                return Error(e)

    return LazyCoroResult(run)


def when[E](
    condition: LazyCoroResult[bool, E],
    action: LazyCoroResult[None, E],
) -> LazyCoroResult[None, E]:
    """Run action only if condition yields True."""
    return if_(condition, action, LazyCoroResult.pure(None))


def unless[E](
    condition: LazyCoroResult[bool, E],
    action: LazyCoroResult[None, E],
) -> LazyCoroResult[None, E]:
    """Run action only if condition yields False."""
    return if_(condition, LazyCoroResult.pure(None), action)


def not_[E](condition: LazyCoroResult[bool, E]) -> LazyCoroResult[bool, E]:
    """Negate an effectful condition."""
    return condition.map(lambda flag: not flag)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def if_w[T, E, W](
    condition: LazyCoroResultWriter[bool, E, W],
    then: LazyCoroResultWriter[T, E, W],
    otherwise: LazyCoroResultWriter[T, E, W],
) -> LazyCoroResultWriter[T, E, W]:
    """Effectful if. Log holds the condition's log then the taken branch's."""
    return ifM(
        condition,
        then,
        otherwise,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def when_w[E, W](
    condition: LazyCoroResultWriter[bool, E, W],
    action: LazyCoroResultWriter[None, E, W],
) -> LazyCoroResultWriter[None, E, W]:
    """Run action only if condition yields True."""
    return whenM(
        condition,
        action,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def unless_w[E, W](
    condition: LazyCoroResultWriter[bool, E, W],
    action: LazyCoroResultWriter[None, E, W],
) -> LazyCoroResultWriter[None, E, W]:
    """Run action only if condition yields False."""
    return unlessM(
        condition,
        action,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def not_w[E, W](condition: LazyCoroResultWriter[bool, E, W]) -> LazyCoroResultWriter[bool, E, W]:
    """Negate an effectful condition. Log is the condition's."""
    return notM(
        condition,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = (
    "if_",
    "when",
    "unless",
    "not_",
    "if_w",
    "when_w",
    "unless_w",
    "not_w",
    "ifM",
    "whenM",
    "unlessM",
    "notM",
)
