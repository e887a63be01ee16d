"""
Log - monoid accumulator for the Writer effect
==============================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](list[A]):
    """
    Ordered record of entries written by evaluated effects.

    Monoid over list concatenation with `Log()` as identity. Operations
    return new logs and never mutate their operands, so the log of an
    effect that is re-run stays untouched.
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        return Log[T](entries)

    @staticmethod
    def concat[T](logs: Iterable[Log[T]]) -> Log[T]:
        """
        Flatten logs into one, in order, in a single pass.

        Loop combinators concatenate one log per iteration, so this stays
        linear in the total number of entries.
        """
        return Log[T](entry for log in logs for entry in log)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Self's entries followed by other's.

            Log.of("checked 1").combine(Log.of("checked 2"))
            # Log(["checked 1", "checked 2"])
        """
        return Log.concat((self, other))


__all__ = ("Log",)
