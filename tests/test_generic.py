"""Generic *M combinators driven by a hand-made effect.

The effect is a bare async thunk whose raw value pairs a Result with the
labels of the effects that produced it; wrap is the identity."""

import asyncio
from typing import Any

from fakes import Boom, err_value, ok_value
from kungfu import Error, Ok, Result

from monad_extra import (
    Continue,
    Done,
    allM,
    andM,
    anyM,
    concat_mapM,
    findM,
    first_justM,
    ifM,
    loopM,
    map_maybeM,
    notM,
    or2M,
    orM,
    partitionM,
    traverseM,
    unlessM,
    when_justM,
    whenM,
    whileM,
)
from monad_extra._helpers import identity

type Traced = tuple[Result[Any, Any], tuple[str, ...]]


def traced(value: Any, label: str):
    async def run() -> Traced:
        return Ok(value), (label,)

    return run


def broken(error: Boom, label: str):
    async def run() -> Traced:
        return Error(error), (label,)

    return run


def extract(raw: Traced) -> Result[Any, Any]:
    return raw[0]


def labels(raws: list[Traced]) -> tuple[str, ...]:
    return tuple(label for _, trace in raws for label in trace)


def combine_ok(value: Any, raws: list[Traced]) -> Traced:
    return Ok(value), labels(raws)


def combine_err(error: Any, raws: list[Traced]) -> Traced:
    return Error(error), labels(raws)


INTERPRETATION = dict(
    extract=extract,
    combine_ok=combine_ok,
    combine_err=combine_err,
    wrap=identity,
)


def run(effect) -> Traced:
    return asyncio.run(effect())


def test_anyM_traces_checked_items() -> None:
    result, trace = run(
        anyM(lambda n: traced(n > 1, f"p{n}"), [1, 2, 3], **INTERPRETATION)
    )

    assert ok_value(result) is True
    assert trace == ("p1", "p2")


def test_ifM_traces_condition_and_taken_branch() -> None:
    result, trace = run(
        ifM(traced(True, "cond"), traced("a", "then"), broken(Boom("x"), "else"), **INTERPRETATION)
    )

    assert ok_value(result) == "a"
    assert trace == ("cond", "then")


def test_whenM_false_is_pure_noop() -> None:
    result, trace = run(whenM(traced(False, "cond"), broken(Boom("x"), "act"), **INTERPRETATION))

    assert ok_value(result) is None
    assert trace == ("cond",)


def test_or2M_failure_keeps_trace() -> None:
    result, trace = run(or2M(traced(False, "a"), broken(Boom("b"), "b"), **INTERPRETATION))

    assert err_value(result) == Boom("b")
    assert trace == ("a", "b")


def test_notM() -> None:
    result, trace = run(notM(traced(False, "cond"), **INTERPRETATION))

    assert ok_value(result) is True
    assert trace == ("cond",)


def test_loopM() -> None:
    def step(n: int):
        return traced(Continue(n + 1) if n < 2 else Done(n * 10), f"s{n}")

    result, trace = run(loopM(step, 0, **INTERPRETATION))

    assert ok_value(result) == 20
    assert trace == ("s0", "s1", "s2")


def test_partitionM_aborts_on_error() -> None:
    def check(n: int):
        return broken(Boom("p"), f"p{n}") if n == 2 else traced(True, f"p{n}")

    result, trace = run(partitionM(check, [1, 2, 3], **INTERPRETATION))

    assert err_value(result) == Boom("p")
    assert trace == ("p1", "p2")


def test_findM_and_concat_mapM() -> None:
    result, _ = run(findM(lambda n: traced(n == 3, "p"), [1, 3, 5], **INTERPRETATION))
    assert ok_value(result) == 3

    result, trace = run(concat_mapM(lambda n: traced([n, -n], f"f{n}"), [1, 2], **INTERPRETATION))
    assert ok_value(result) == [1, -1, 2, -2]
    assert trace == ("f1", "f2")


def test_orM_stops_at_deciding_action() -> None:
    actions = [traced(False, "a"), traced(True, "b"), broken(Boom("c"), "c")]

    result, trace = run(orM(actions, **INTERPRETATION))

    assert ok_value(result) is True
    assert trace == ("a", "b")


def test_andM_stops_at_deciding_action() -> None:
    actions = [traced(True, "a"), traced(False, "b"), broken(Boom("c"), "c")]

    result, trace = run(andM(actions, **INTERPRETATION))

    assert ok_value(result) is False
    assert trace == ("a", "b")


def test_andM_failure_keeps_trace() -> None:
    actions = [traced(True, "a"), broken(Boom("b"), "b"), traced(False, "c")]

    result, trace = run(andM(actions, **INTERPRETATION))

    assert err_value(result) == Boom("b")
    assert trace == ("a", "b")


def test_allM_traces_checked_items() -> None:
    result, trace = run(
        allM(lambda n: traced(n < 2, f"p{n}"), [1, 2, 3], **INTERPRETATION)
    )

    assert ok_value(result) is False
    assert trace == ("p1", "p2")


def test_whileM_traces_every_run() -> None:
    flags = iter([True, True, False])

    async def poll() -> Traced:
        flag = next(flags)
        return Ok(flag), (f"poll {flag}",)

    result, trace = run(whileM(poll, **INTERPRETATION))

    assert ok_value(result) is None
    assert trace == ("poll True", "poll True", "poll False")


def test_first_justM_stops_at_first_present_value() -> None:
    def lookup(n: int):
        if n == 3:
            return broken(Boom("never"), "f3")
        return traced(None if n == 1 else n * 10, f"f{n}")

    result, trace = run(first_justM(lookup, [1, 2, 3], **INTERPRETATION))

    assert ok_value(result) == 20
    assert trace == ("f1", "f2")


def test_map_maybeM_drops_none_and_keeps_falsy() -> None:
    def f(n: int):
        return traced(None if n % 2 else n, f"f{n}")

    result, trace = run(map_maybeM(f, [0, 1, 2, 3], **INTERPRETATION))

    assert ok_value(result) == [0, 2]
    assert trace == ("f0", "f1", "f2", "f3")


def test_when_justM() -> None:
    result, trace = run(when_justM(None, lambda v: broken(Boom("x"), v), combine_ok=combine_ok, wrap=identity))
    assert ok_value(result) is None
    assert trace == ()

    result, trace = run(when_justM("user", lambda v: traced(None, v), combine_ok=combine_ok, wrap=identity))
    assert ok_value(result) is None
    assert trace == ("user",)


def test_unlessM_runs_action_on_false() -> None:
    result, trace = run(unlessM(traced(False, "cond"), traced(None, "act"), **INTERPRETATION))
    assert ok_value(result) is None
    assert trace == ("cond", "act")

    result, trace = run(unlessM(traced(True, "cond"), broken(Boom("x"), "act"), **INTERPRETATION))
    assert ok_value(result) is None
    assert trace == ("cond",)


def test_traverseM_stops_at_first_error() -> None:
    def handle(n: int):
        return broken(Boom("t"), f"h{n}") if n == 2 else traced(n * 2, f"h{n}")

    result, trace = run(traverseM(handle, [1, 2, 3], **INTERPRETATION))
    assert err_value(result) == Boom("t")
    assert trace == ("h1", "h2")

    result, trace = run(traverseM(handle, [1, 3], **INTERPRETATION))
    assert ok_value(result) == [2, 6]
    assert trace == ("h1", "h3")
