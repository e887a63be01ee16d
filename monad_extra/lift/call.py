"""
Async Result functions as effects.

Effectful predicates are usually async functions returning Result: a
mirror lookup, a permission check, a job status poll. `call` defers such
a call into the lazy effect the combinators take.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

from .._types import Interp


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Interp[T, E]:
    """
    Defer func(*args, **kwargs) until the effect runs.

    func is called afresh on every run, so a loop may re-run the effect:

        while_(L.call(job.is_running))
        any_(lambda user_id: L.call(is_banned, user_id), team)
    """

    async def run() -> Result[T, E]:
        return await func(*args, **kwargs)

    return LazyCoroResult(run)


__all__ = ("call",)
