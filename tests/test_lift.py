from fakes import Boom, err_value, ok_value, run
from kungfu import Error, LazyCoroResult, Ok, Result

from monad_extra import any_, lift as L, while_


def test_pure_and_fail() -> None:
    assert ok_value(run(L.up.pure(7))) == 7
    assert err_value(run(L.up.fail(Boom("x")))) == Boom("x")


def test_from_result() -> None:
    assert ok_value(run(L.up.from_result(Ok("v")))) == "v"
    assert err_value(run(L.up.from_result(Error(Boom("e"))))) == Boom("e")


def test_predicate_is_lazy() -> None:
    checked: list[int] = []

    def test(n: int) -> bool:
        checked.append(n)
        return n == 2

    effect = any_(L.up.predicate(test), [1, 2, 3])
    assert checked == []

    assert ok_value(run(effect)) is True
    assert checked == [1, 2]


def test_call_as_predicate() -> None:
    banned = {3}

    async def is_banned(user_id: int) -> Result[bool, Boom]:
        return Ok(user_id in banned)

    def check(user_id: int) -> LazyCoroResult[bool, Boom]:
        return L.call(is_banned, user_id)

    assert ok_value(run(any_(check, [1, 2, 3]))) is True
    assert ok_value(run(any_(check, [1, 2]))) is False


def test_call_defers_until_run() -> None:
    calls: list[int] = []

    async def lookup(n: int) -> Result[int, Boom]:
        calls.append(n)
        return Ok(n)

    effect = L.call(lookup, 4)
    assert calls == []
    assert ok_value(run(effect)) == 4
    assert calls == [4]


def test_call_runs_func_again_on_every_run() -> None:
    remaining = [True, True, False]

    async def is_running() -> Result[bool, Boom]:
        return Ok(remaining.pop(0))

    assert ok_value(run(while_(L.call(is_running)))) is None
    assert remaining == []
