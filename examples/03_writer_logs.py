from __future__ import annotations

from _infra import banner, run

from monad_extra import all_w, find_w, writer_ok
from kungfu import Error, Ok


def checked(limit: int):
    def check(n: int):
        return writer_ok(n < limit, f"check {n} < {limit}")

    return check


async def main() -> None:
    banner("03_writer_logs: the log shows exactly what was evaluated")

    wr = await all_w(checked(10), [1, 5, 12, 3])
    print(f"all below 10: {wr.result!r}")
    print(f"log: {list(wr.log)!r}")  # 3 is never checked

    wr = await find_w(checked(2), [4, 1, 0])
    match wr.result:
        case Ok(first):
            print(f"first below 2: {first}")
        case Error(err):
            print(f"error: {err!r}")
    print(f"log: {list(wr.log)!r}")


if __name__ == "__main__":
    run(main)
