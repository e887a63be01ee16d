"""LazyCoroResultWriter effect

Lazy async Result that also accumulates a Log[W]. It is the second
concrete effect every combinator is specialised for (the `_w` sugar):
the log shows which effects a combinator actually evaluated."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, Ok

from .log import Log
from .result import WriterResult


class LazyCoroResultWriter[T, E, W]:
    """Lazy Coroutine Result Writer.

    Nothing runs until the writer is called or awaited; it can be run any
    number of times, each run producing a fresh WriterResult.

    Laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_run",)

    def __init__(
        self,
        run: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._run = run

    @staticmethod
    def pure[V](value: V) -> LazyCoroResultWriter[V, typing.Never, typing.Any]:
        """Lift a value with an empty log."""

        async def run() -> WriterResult[V, typing.Never, Log[typing.Any]]:
            return WriterResult(Ok(value), Log())

        return LazyCoroResultWriter(run)

    @staticmethod
    def tell[Entry](*entries: Entry) -> LazyCoroResultWriter[None, typing.Never, Entry]:
        """Write entries without producing a value."""

        async def run() -> WriterResult[None, typing.Never, Log[Entry]]:
            return WriterResult(Ok(None), Log.of(*entries))

        return LazyCoroResultWriter(run)

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        """Apply f to the success value; the log is kept as is."""

        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(run)

    def then[U](
        self,
        f: Callable[[T], LazyCoroResultWriter[U, E, W]],
        /,
    ) -> LazyCoroResultWriter[U, E, W]:
        """
        Monadic bind.

        On Ok the writer built by f runs next and both logs are combined.
        On Error f is never called and the current log is kept.
        """

        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    next_wr = await f(value)()
                    return WriterResult(next_wr.result, wr.log.combine(next_wr.log))
                case Error(err):
                    return WriterResult(Error(err), wr.log)

        return LazyCoroResultWriter(run)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after the computation's own log."""

        async def run() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(run)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        """Run the computation, returning a coroutine."""
        return self._run()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


def writer_ok[T, W](value: T, *entries: W) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Successful writer yielding value and logging entries."""

    async def run() -> WriterResult[T, typing.Never, Log[W]]:
        return WriterResult(Ok(value), Log.of(*entries))

    return LazyCoroResultWriter(run)


def writer_error[E, W](error: E, *entries: W) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Failed writer carrying error and logging entries."""

    async def run() -> WriterResult[typing.Never, E, Log[W]]:
        return WriterResult(Error(error), Log.of(*entries))

    return LazyCoroResultWriter(run)


__all__ = (
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
