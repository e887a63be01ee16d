"""Basic helpers

Optional-driven effects and the unit marker."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import LazyCoroResult

from .._helpers import ok_result, ok_writer_result
from ..writer import LazyCoroResultWriter


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def when_justM[M, A, Raw](
    value: A | None,
    action: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, Raw]]],
    *,
    combine_ok: Callable[[None, list[Raw]], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic when_just combinator.

    Run action(value) if value is present, else a no-op yielding None.
    action is not called at all for None.
    """

    async def run() -> Raw:
        if value is None:
            return combine_ok(None, [])
        return await action(value)()

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def when_just[A, E](
    value: A | None,
    action: Callable[[A], LazyCoroResult[None, E]],
) -> LazyCoroResult[None, E]:
    """
    Perform action on a present value.

        when_just(None, notify)  # no-op, Ok(None)
        when_just(user, notify)  # notify(user) once awaited
    """
    return when_justM(
        value,
        action,
        combine_ok=ok_result,
        wrap=LazyCoroResult,
    )


def unit[E](action: LazyCoroResult[None, E]) -> LazyCoroResult[None, E]:
    """
    Identity restricted to effects yielding None.

    Marks at a call site that the effect's value is meaningless.
    """
    return action


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def when_just_w[A, E, W](
    value: A | None,
    action: Callable[[A], LazyCoroResultWriter[None, E, W]],
) -> LazyCoroResultWriter[None, E, W]:
    """Perform action on a present value. Empty log when absent."""
    return when_justM(
        value,
        action,
        combine_ok=ok_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("when_just", "when_just_w", "when_justM", "unit")
