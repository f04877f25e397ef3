import pytest

from blockfall_session import GameSession, State
from conftest import FixedRng


@pytest.fixture
def session(clock):
    frames = []
    s = GameSession(rng=FixedRng("T"), clock=clock, render=frames.append)
    s.frames = frames
    return s


def accepted_ticks(session, clock, n, step=40):
    for _ in range(n):
        clock.advance(step)
        assert session.scheduler.pump()


def test_request_is_idempotent_and_cancellable(session):
    sched = session.scheduler
    first = sched.request()
    assert sched.request() is first
    sched.cancel()
    assert first.cancelled
    assert not sched.armed
    assert not sched.pump()


def test_pump_needs_a_request(session):
    assert not session.scheduler.armed
    assert not session.scheduler.pump()
    assert session.frames == []


def test_cadences(session, clock):
    session.start()
    sched = session.scheduler
    assert len(session.frames) == 1

    accepted_ticks(session, clock, 2)
    assert session.part is None
    assert sched.frame_count == 1

    accepted_ticks(session, clock, 1)
    assert session.part is not None
    assert (session.part.x, session.part.y) == (4, -4)
    assert sched.frame_count == 3
    assert sched.keyframe_count == 4
    assert len(session.frames) == 2

    accepted_ticks(session, clock, 11)
    assert session.part.y == -4
    accepted_ticks(session, clock, 1)
    assert session.part.y == -3
    assert sched.keyframe_count == 5
    assert len(session.frames) == 6
    assert sched.armed


def test_throttled_tick_changes_nothing(session, clock):
    session.start()
    sched = session.scheduler
    accepted_ticks(session, clock, 3)
    before = (sched.frame_count, sched.keyframe_count, sched.last_frame,
              session.grid.snapshot(), session.snapshot())
    frames = len(session.frames)

    clock.advance(39)
    assert sched.pump()
    after = (sched.frame_count, sched.keyframe_count, sched.last_frame,
             session.grid.snapshot(), session.snapshot())
    assert after == before
    assert len(session.frames) == frames
    assert sched.armed

    clock.advance(1)
    sched.pump()
    assert sched.frame_count == 2
    assert sched.last_frame == clock.now


def test_pause_keeps_counters(session, clock):
    session.start()
    sched = session.scheduler
    accepted_ticks(session, clock, 2)
    session.toggle_pause()
    clock.advance(500)
    assert not sched.pump()
    assert sched.frame_count == 1
    session.toggle_pause()
    assert sched.armed
    assert sched.frame_count == 1
    sched.pump()
    assert session.part is not None
    assert sched.frame_count == 3


def test_no_rearm_when_not_running(session, clock):
    session.start()
    session.running = False
    clock.advance(40)
    assert session.scheduler.pump()
    assert not session.scheduler.armed


def test_full_board_ends_game_and_stops(clock):
    frames = []
    s = GameSession({"FREQUENCY": 1, "KEYFRAMES": 1, "MIN_FRAME_MS": 40},
                    rng=FixedRng("T"), clock=clock, render=frames.append)
    s.start()
    for r in range(4):
        s.grid.cells[r] = [1] * s.cols
    ticks = 0
    while s.scheduler.pump():
        clock.advance(40)
        ticks += 1
        assert ticks < 10
    assert s.state == State.GAME_OVER
    assert s.part.y < 0
    assert not s.running
    assert not s.scheduler.armed
    clock.advance(40)
    assert not s.scheduler.pump()
    # start render plus one per tick that did not end the game
    assert len(frames) == ticks
