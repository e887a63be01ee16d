"""
WriterResult - outcome of a Writer effect
=========================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result


@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """
    Raw value of LazyCoroResultWriter: a Result plus the log written while
    producing it.

    Matchable positionally:
        match wr:
            case WriterResult(Ok(value), log): ...
    """

    result: Result[T, E]
    log: W


__all__ = ("WriterResult",)
