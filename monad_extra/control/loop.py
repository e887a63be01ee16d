"""Loop combinators

Effect-driven loops with extract + wrap pattern. Both loops are plain
`while` loops: iteration count is bounded only by the caller's step."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import (
    error_writer_result,
    writer_outcome,
    ok_writer_result,
)
from .._types import Continue, Done, Step
from ..writer import LazyCoroResultWriter


def _not_a_step(value: object) -> TypeError:
    return TypeError(f"loop step must yield Continue or Done, got {value!r}")


# ============================================================================
# Generic combinators (extract + wrap pattern)
# ============================================================================


def loopM[M, A, B, E, RawIn, RawOut](
    step: Callable[[A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    seed: A,
    *,
    extract: Callable[[RawIn], Result[Step[A, B], E]],
    combine_ok: Callable[[B, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic loop combinator.

    Run step(seed); Continue(next) runs step again with next, Done(value)
    stops with value. Each step starts after the previous one finished.
    """

    async def run() -> RawOut:
        raws: list[RawIn] = []
        current = seed
        while True:
            raw = await step(current)()
            raws.append(raw)
            match extract(raw):
                case Ok(Continue(next_seed)):
                    current = next_seed
                case Ok(Done(value)):
                    return combine_ok(value, raws)
                case Ok(other):
                    raise _not_a_step(other)
                case Error(e):
                    return combine_err(e, raws)

    return wrap(run)


def whileM[M, E, RawIn, RawOut](
    action: Callable[[], Coroutine[typing.Any, typing.Any, RawIn]],
    *,
    extract: Callable[[RawIn], Result[bool, E]],
    combine_ok: Callable[[None, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic while combinator.

    Run action until it yields False. The False-yielding run is the last.
    """

    async def run() -> RawOut:
        raws: list[RawIn] = []
        while True:
            raw = await action()
            raws.append(raw)
            match extract(raw):
                case Ok(again):
                    if not again:
                        return combine_ok(None, raws)
                case Error(e):
                    return combine_err(e, raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def loop[A, B, E](
    step: Callable[[A], LazyCoroResult[Step[A, B], E]],
    seed: A,
) -> LazyCoroResult[B, E]:
    """
    Loop from seed until step yields Done.

        def count(n: int) -> LCR[Step[int, int], NoError]:
            return L.up.pure(Continue(n + 1) if n < 3 else Done(n))

        await loop(count, 0)  # Ok(3)
    """

    async def run() -> Result[B, E]:
        current = seed
        while True:
            r = await step(current)()
            match r:
                case Ok(Continue(next_seed)):
                    current = next_seed
                case Ok(Done(value)):
                    return Ok(value)
                case Ok(other):
                    raise _not_a_step(other)
                case Error(e):
                    return Error(e)

    return LazyCoroResult(run)


def while_[E](action: LazyCoroResult[bool, E]) -> LazyCoroResult[None, E]:
    """Keep running action until it yields False."""

    async def run() -> Result[None, E]:
        while True:
            r = await action()
            match r:
                case Ok(again):
                    if not again:
                        return Ok(None)
                case Error(e):
                    return Error(e)

    return LazyCoroResult(run)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def loop_w[A, B, E, W](
    step: Callable[[A], LazyCoroResultWriter[Step[A, B], E, W]],
    seed: A,
) -> LazyCoroResultWriter[B, E, W]:
    """Loop from seed until step yields Done. Logs of every step are merged."""
    return loopM(
        step,
        seed,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


def while_w[E, W](action: LazyCoroResultWriter[bool, E, W]) -> LazyCoroResultWriter[None, E, W]:
    """Keep running action until it yields False. Logs of every run are merged."""
    return whileM(
        action,
        extract=writer_outcome,
        combine_ok=ok_writer_result,
        combine_err=error_writer_result,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("loop", "loop_w", "loopM", "while_", "while_w", "whileM")
