import pytest

from memorygame.components.pending_mismatch_reset import PendingMismatchReset
from memorygame.events.bus import (
    EVENT_MATCH_FOUND,
    EVENT_MATCH_MISMATCH,
    EVENT_MISMATCH_RESET,
    EVENT_TICK,
)
from tests.helpers import build_engine, drive_ticks, mismatched_pair, pairs_by_value


def _capture(bus, name):
    captured: list[dict] = []

    def handler(sender, **payload):
        captured.append(payload)

    bus.subscribe(name, handler)
    return captured


def test_match_emits_found_event():
    bus, world, engine = build_engine(size=2)
    found = _capture(bus, EVENT_MATCH_FOUND)
    value, (first, second) = next(iter(pairs_by_value(engine).items()))

    engine.reveal(first)
    engine.reveal(second)

    assert found == [{"positions": (first, second), "value": value, "session_id": engine.session_id}]
    assert not engine.match_evaluator.has_pending


def test_mismatch_schedules_single_pending_reset():
    bus, world, engine = build_engine(size=2)
    mismatches = _capture(bus, EVENT_MATCH_MISMATCH)
    first, second = mismatched_pair(engine)

    engine.reveal(first)
    engine.reveal(second)

    pending = list(world.get_component(PendingMismatchReset))
    assert len(pending) == 1
    reset = pending[0][1]
    assert reset.positions == (first, second)
    assert reset.session_id == engine.session_id
    assert reset.remaining == 1.0
    assert mismatches == [{"positions": (first, second), "session_id": engine.session_id, "delay": 1.0}]


def test_pending_reset_fires_once_after_delay():
    bus, world, engine = build_engine(size=2)
    resets = _capture(bus, EVENT_MISMATCH_RESET)
    first, second = mismatched_pair(engine)
    engine.reveal(first)
    engine.reveal(second)

    bus.emit(EVENT_TICK, dt=0.5)
    assert resets == []
    bus.emit(EVENT_TICK, dt=0.5)
    assert resets == [{"positions": (first, second), "session_id": engine.session_id}]
    drive_ticks(bus, n=8)
    assert len(resets) == 1
    assert not engine.match_evaluator.has_pending


def test_frame_sized_ticks_release_the_lock_after_one_second():
    bus, world, engine = build_engine(size=2)
    first, second = mismatched_pair(engine)
    engine.reveal(first)
    engine.reveal(second)

    for _ in range(59):
        bus.emit(EVENT_TICK, dt=1 / 60)
    assert engine.input_locked
    bus.emit(EVENT_TICK, dt=1 / 60)
    assert not engine.input_locked


def test_custom_delay_is_honoured():
    bus, world, engine = build_engine(size=2, mismatch_delay=0.25)
    first, second = mismatched_pair(engine)
    engine.reveal(first)
    engine.reveal(second)

    bus.emit(EVENT_TICK, dt=0.25)

    assert not engine.input_locked
    assert engine.revealed == ()


def test_initialize_during_delay_cancels_pending_reset():
    bus, world, engine = build_engine(size=2)
    resets = _capture(bus, EVENT_MISMATCH_RESET)
    first, second = mismatched_pair(engine)
    engine.reveal(first)
    engine.reveal(second)
    bus.emit(EVENT_TICK, dt=0.5)

    engine.initialize()
    engine.reveal(0)
    drive_ticks(bus, n=8)

    assert resets == []
    assert engine.revealed == (0,)
    assert not engine.input_locked
    assert not engine.match_evaluator.has_pending


def test_stale_reset_from_previous_session_is_dropped():
    bus, world, engine = build_engine(size=2)
    resets = _capture(bus, EVENT_MISMATCH_RESET)
    engine.reveal(2)
    world.create_entity(
        PendingMismatchReset(session_id=engine.session_id - 1, positions=(0, 1), remaining=0.1)
    )

    bus.emit(EVENT_TICK, dt=0.25)

    assert resets == []
    assert engine.revealed == (2,)
    assert not list(world.get_component(PendingMismatchReset))


def test_cancel_pending_reports_count():
    bus, world, engine = build_engine(size=2)
    first, second = mismatched_pair(engine)
    engine.reveal(first)
    engine.reveal(second)

    assert engine.match_evaluator.cancel_pending() == 1
    assert engine.match_evaluator.cancel_pending() == 0


@pytest.mark.parametrize("bad_dt", [float("nan"), float("inf"), -0.5, "soon"])
def test_invalid_tick_does_not_stall_pending_reset(bad_dt):
    bus, world, engine = build_engine(size=2)
    first, second = mismatched_pair(engine)
    engine.reveal(first)
    engine.reveal(second)

    bus.emit(EVENT_TICK, dt=bad_dt)
    assert engine.input_locked
    [(_, pending)] = world.get_component(PendingMismatchReset)
    assert pending.remaining == pytest.approx(1.0)

    drive_ticks(bus, n=4, dt=0.25)
    assert not engine.input_locked
    assert engine.revealed == ()
