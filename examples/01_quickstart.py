from __future__ import annotations

from _infra import FakeMirror, banner, run

from monad_extra import any_, first_just, if_, lift as L, partition
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: search + short-circuit over mirrors")

    mirrors = [
        FakeMirror(name="eu", delay_seconds=0.01),
        FakeMirror(name="us", delay_seconds=0.01, files={"readme": "hello"}),
        FakeMirror(name="asia", online=False),
    ]

    # asia is offline, but the search stops at us and never asks it.
    found = first_just(lambda m: L.call(m.lookup, "readme"), mirrors)
    match await found:
        case Ok(content):
            print(f"found: {content}")
        case Error(err):
            print(f"error: {err!r}")
    print(f"lookups: {[m.lookups for m in mirrors]}")

    has_readme = any_(
        lambda m: L.call(m.lookup, "readme").map(lambda c: c is not None),
        mirrors,
    )
    message = if_(has_readme, L.up.pure("mirrored"), L.up.pure("missing"))
    match await message:
        case Ok(status):
            print(f"status: {status}")
        case Error(_):
            print("status: unknown")

    match await partition(L.up.predicate(lambda m: m.online), mirrors):
        case Ok((online, offline)):
            print(f"online: {[m.name for m in online]}, offline: {[m.name for m in offline]}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
