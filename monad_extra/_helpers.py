"""Internal helpers for combinators.

Stock interpretations handed to the generic *M combinators by the sugar
functions. Each interpretation is the (extract, combine_ok, combine_err)
triple for one raw type; `wrap` is the effect class itself
(LazyCoroResult or LazyCoroResultWriter).

combine_ok / combine_err receive the raws of every effect evaluated so far,
in evaluation order. Plain Results carry nothing in them; WriterResults
carry the logs the combined effect must keep."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, Ok, Result

from .writer import Log, WriterResult


type _Evaluated = Sequence[Result[typing.Any, typing.Any]]
type _EvaluatedWriters[W] = Sequence[WriterResult[typing.Any, typing.Any, Log[W]]]


def identity[T](x: T) -> T:
    """Extract for Result raws; also the predicate of or / and over actions."""
    return x


# ============================================================================
# Result raws (LazyCoroResult)
# ============================================================================


def ok_result[T](value: T, raws: _Evaluated) -> Result[T, typing.Any]:
    _ = raws
    return Ok(value)


def error_result[E](error: E, raws: _Evaluated) -> Result[typing.Any, E]:
    _ = raws
    return Error(error)


# ============================================================================
# WriterResult raws (LazyCoroResultWriter)
# ============================================================================


def writer_outcome[T, E](wr: WriterResult[T, E, typing.Any]) -> Result[T, E]:
    """The Result a combinator branches on; the log rides along untouched."""
    return wr.result


def ok_writer_result[T, W](value: T, raws: _EvaluatedWriters[W]) -> WriterResult[T, typing.Any, Log[W]]:
    """Value plus the logs of the evaluated effects, in evaluation order."""
    return WriterResult(Ok(value), Log.concat(wr.log for wr in raws))


def error_writer_result[E, W](error: E, raws: _EvaluatedWriters[W]) -> WriterResult[typing.Any, E, Log[W]]:
    """Error plus the logs up to and including the failing effect."""
    return WriterResult(Error(error), Log.concat(wr.log for wr in raws))


# ============================================================================
# Pure injection for any interpretation
# ============================================================================


def pure_thunk[T, Raw](
    value: T,
    combine_ok: Callable[[T, list[typing.Any]], Raw],
) -> Callable[[], Coroutine[typing.Any, typing.Any, Raw]]:
    """Effect yielding value with nothing evaluated: combine_ok(value, [])."""

    async def run() -> Raw:
        return combine_ok(value, [])

    return run


__all__ = (
    "identity",
    # Result raws
    "ok_result",
    "error_result",
    # WriterResult raws
    "writer_outcome",
    "ok_writer_result",
    "error_writer_result",
    # Pure injection
    "pure_thunk",
)
