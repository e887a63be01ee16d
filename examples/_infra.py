from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


def _empty_files() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class FakeMirror:
    name: str
    files: dict[str, str] = field(default_factory=_empty_files)
    delay_seconds: float = 0.0
    online: bool = True
    lookups: int = 0

    async def lookup(self, path: str) -> Result[str | None, Failure]:
        await asyncio.sleep(self.delay_seconds)
        self.lookups += 1
        if not self.online:
            return Error(Failure(f"{self.name}: offline"))
        content = self.files.get(path)
        return Ok(None if content is None else f"{self.name}:{content}")


@dataclass(slots=True)
class FakeJob:
    name: str
    polls_until_done: int = 0
    polls: int = 0

    async def is_running(self) -> Result[bool, Failure]:
        self.polls += 1
        return Ok(self.polls <= self.polls_until_done)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
