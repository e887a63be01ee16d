from __future__ import annotations

from _infra import FakeJob, Failure, banner, run

from monad_extra import LCR, Continue, Done, NoError, Step, lift as L, loop, when, while_
from kungfu import Error, Ok, Result


async def main() -> None:
    banner("02_polling_loop: while_ + loop")

    job = FakeJob(name="reindex", polls_until_done=3)

    # Poll until the job stops running; each poll starts after the last one.
    match await while_(L.call(job.is_running)):
        case Ok(_):
            print(f"{job.name} finished after {job.polls} polls")
        case Error(err):
            print(f"error: {err!r}")

    def halve(n: int) -> LCR[Step[int, int], NoError]:
        return L.up.pure(Continue(n // 2) if n > 1 else Done(n))

    match await loop(halve, 1000):
        case Ok(n):
            print(f"halved to: {n}")

    # The last poll is the one that saw the job stopped.
    expected = job.polls_until_done + 1
    await when(L.up.pure(job.polls > expected), L.call(_report, job.name, expected))


async def _report(name: str, expected: int) -> Result[None, Failure]:
    print(f"{name}: more than {expected} polls")
    return Ok(None)


if __name__ == "__main__":
    run(main)
