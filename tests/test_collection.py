import pytest
from fakes import Boom, Crash, Recorder, err_value, ok_value, run

from monad_extra import concat_map, lift as L, map_maybe, partition, traverse


def is_even(n: int) -> bool:
    return n % 2 == 0


def test_partition_splits_preserving_order() -> None:
    recorder = Recorder()
    items = [5, 2, 8, 1, 4, 7]

    matched, unmatched = ok_value(run(partition(recorder.predicate(is_even), items)))

    assert matched == [2, 8, 4]
    assert unmatched == [5, 1, 7]
    assert recorder.seen == items


def test_partition_covers_every_item_once() -> None:
    items = [3, 3, 6, 1, 6, 0]

    matched, unmatched = ok_value(run(partition(L.up.predicate(is_even), items)))

    assert sorted(matched + unmatched) == sorted(items)
    assert len(matched) + len(unmatched) == len(items)


def test_partition_of_empty() -> None:
    assert ok_value(run(partition(L.up.predicate(is_even), []))) == ([], [])


def test_partition_fails_without_partial_result() -> None:
    recorder = Recorder()

    def check(n: int):
        if n == 3:
            return recorder.failing("three", Boom("partition"))
        return recorder.predicate(is_even)(n)

    result = run(partition(check, [1, 2, 3, 4]))

    assert err_value(result) == Boom("partition")
    assert recorder.seen == [1, 2, "three"]


def test_concat_map_flattens_in_order() -> None:
    recorder = Recorder()

    result = run(concat_map(recorder.function(lambda n: [n] * n), [1, 2, 3]))

    assert ok_value(result) == [1, 2, 2, 3, 3, 3]
    assert recorder.seen == [1, 2, 3]


def test_concat_map_stops_on_failure() -> None:
    recorder = Recorder()

    def expand(n: int):
        if n == 2:
            return recorder.failing("two", Boom("expand"))
        return recorder.function(lambda x: [x])(n)

    result = run(concat_map(expand, [1, 2, 3]))

    assert err_value(result) == Boom("expand")
    assert recorder.seen == [1, "two"]


def test_map_maybe_keeps_present_values() -> None:
    result = run(map_maybe(lambda n: L.up.pure(n if is_even(n) else None), [1, 2, 3, 4]))

    assert ok_value(result) == [2, 4]


def test_map_maybe_keeps_falsy_present_values() -> None:
    result = run(map_maybe(lambda n: L.up.pure(n - 1 if n < 3 else None), [1, 2, 3]))

    assert ok_value(result) == [0, 1]


def test_traverse_collects_in_order() -> None:
    recorder = Recorder()

    result = run(traverse(recorder.function(str), [3, 1, 2]))

    assert ok_value(result) == ["3", "1", "2"]
    assert recorder.seen == [3, 1, 2]


def test_partition_lets_raised_exception_through() -> None:
    recorder = Recorder()

    with pytest.raises(Crash):
        run(partition(recorder.raising(is_even, at=2), [1, 2, 3, 4]))

    assert recorder.seen == [1, 2]
