import pytest
from fakes import Boom, Crash, Recorder, err_value, ok_value, run

from monad_extra import all_, and2, and_, any_, lift as L, or2, or_


def is_even(n: int) -> bool:
    return n % 2 == 0


def test_any_stops_at_first_match() -> None:
    recorder = Recorder()

    result = run(any_(recorder.predicate(is_even), [1, 3, 5, 6, 7]))

    assert ok_value(result) is True
    assert recorder.seen == [1, 3, 5, 6]


def test_any_checks_every_item_when_nothing_matches() -> None:
    recorder = Recorder()

    result = run(any_(recorder.predicate(is_even), [1, 3, 5]))

    assert ok_value(result) is False
    assert recorder.seen == [1, 3, 5]


def test_any_of_empty_is_false() -> None:
    assert ok_value(run(any_(L.up.predicate(is_even), []))) is False


def test_all_stops_at_first_miss() -> None:
    recorder = Recorder()

    result = run(all_(recorder.predicate(is_even), [2, 4, 5, 6]))

    assert ok_value(result) is False
    assert recorder.seen == [2, 4, 5]


def test_all_of_empty_is_true() -> None:
    assert ok_value(run(all_(L.up.predicate(is_even), []))) is True


def test_all_propagates_predicate_failure() -> None:
    recorder = Recorder()

    def check(n: int):
        if n == 3:
            return recorder.failing("three", Boom("bad item"))
        return recorder.predicate(lambda _: True)(n)

    result = run(all_(check, [1, 2, 3, 4]))

    assert err_value(result) == Boom("bad item")
    assert recorder.seen == [1, 2, "three"]


def test_or2_skips_second_when_first_is_true() -> None:
    recorder = Recorder()

    result = run(or2(L.up.pure(True), recorder.failing("second", Boom("never"))))

    assert ok_value(result) is True
    assert recorder.seen == []


def test_or2_propagates_second_failure_when_first_is_false() -> None:
    result = run(or2(L.up.pure(False), L.up.fail(Boom("reached"))))

    assert err_value(result) == Boom("reached")


def test_and2_skips_second_when_first_is_false() -> None:
    recorder = Recorder()

    result = run(and2(L.up.pure(False), recorder.failing("second", Boom("never"))))

    assert ok_value(result) is False
    assert recorder.seen == []


def test_and2_yields_second_when_first_is_true() -> None:
    recorder = Recorder()

    result = run(and2(L.up.pure(True), recorder.action("second", False)))

    assert ok_value(result) is False
    assert recorder.seen == ["second"]


def test_or_over_actions_short_circuits() -> None:
    recorder = Recorder()
    actions = [
        recorder.action("a", False),
        recorder.action("b", True),
        recorder.failing("c", Boom("never")),
    ]

    assert ok_value(run(or_(actions))) is True
    assert recorder.seen == ["a", "b"]


def test_and_over_actions_short_circuits() -> None:
    recorder = Recorder()
    actions = [
        recorder.action("a", True),
        recorder.action("b", False),
        recorder.failing("c", Boom("never")),
    ]

    assert ok_value(run(and_(actions))) is False
    assert recorder.seen == ["a", "b"]


def test_and_of_all_true_runs_every_action() -> None:
    recorder = Recorder()
    actions = [recorder.action("a", True), recorder.action("b", True)]

    assert ok_value(run(and_(actions))) is True
    assert recorder.seen == ["a", "b"]


def test_combined_effect_can_be_rerun() -> None:
    recorder = Recorder()
    check = any_(recorder.predicate(is_even), [1, 2, 3])

    run(check)
    run(check)

    assert recorder.seen == [1, 2, 1, 2]


def test_any_lets_raised_exception_through() -> None:
    recorder = Recorder()

    with pytest.raises(Crash) as info:
        run(any_(recorder.raising(lambda n: n > 10, at=3), [1, 2, 3, 4, 50]))

    assert info.value.args == (3,)
    assert recorder.seen == [1, 2, 3]
