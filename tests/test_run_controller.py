from dataclasses import replace

import pytest

from dinorun.app.run_controller import RunController
from dinorun.domain.events import SimEvent
from dinorun.domain.obstacles import Obstacle
from dinorun.domain.run_state import RunPhase, fresh_run_state
from dinorun.domain.time_step import clamp_dt


@pytest.fixture
def controller(tuning, fixed_rng):
    return RunController(tuning=tuning, rng=fixed_rng, high_score=50)


def _crash_at(controller: RunController, score: float) -> tuple:
    s = controller.state
    controller.state = replace(
        s,
        obstacles=(Obstacle(x=70, y=139, w=22, h=31),),
        progress=replace(s.progress, score=score),
    )
    return controller.tick(0.016)


def test_starts_idle_and_does_not_step(controller):
    assert controller.phase is RunPhase.IDLE
    before = controller.state
    assert controller.tick(0.016) == ()
    assert controller.state == before


def test_trigger_when_idle_starts_a_run(controller, tuning):
    assert controller.trigger() == (SimEvent.RUN_STARTED,)
    assert controller.phase is RunPhase.RUNNING
    assert controller.state == fresh_run_state(tuning)


def test_trigger_while_running_jumps(controller, tuning):
    controller.trigger()
    assert controller.trigger() == (SimEvent.JUMP,)
    assert controller.state.character.vy == tuning.jump_impulse
    assert not controller.state.character.grounded


def test_second_trigger_in_the_air_is_absorbed(controller):
    controller.trigger()
    controller.trigger()
    controller.tick(0.016)
    vy = controller.state.character.vy
    assert controller.trigger() == ()
    assert controller.state.character.vy == vy
    assert controller.phase is RunPhase.RUNNING


def test_restart_is_ignored_while_running(controller):
    controller.trigger()
    controller.tick(0.016)
    state = controller.state
    assert controller.restart() == ()
    assert controller.state is state


def test_stalled_frame_is_integrated_as_the_ceiling(controller, tuning):
    controller.trigger()
    controller.tick(clamp_dt(0.5, tuning.max_dt))
    assert controller.state.progress.score == pytest.approx(0.04 * 60)
    assert controller.state.progress.elapsed_ms == pytest.approx(40.0)


def test_score_and_speed_are_monotonic_while_running(controller):
    controller.trigger()
    last_score, last_speed = 0.0, controller.state.progress.scroll_speed
    for i in range(300):
        if i % 40 == 0:
            controller.trigger()
        controller.state = replace(controller.state, obstacles=())
        controller.tick(1 / 60)
        p = controller.state.progress
        assert p.score >= last_score
        assert p.scroll_speed >= last_speed
        last_score, last_speed = p.score, p.scroll_speed


def test_collision_ends_the_run_with_a_new_high_score(controller):
    controller.trigger()
    events = _crash_at(controller, 75.4)

    assert controller.phase is RunPhase.ENDED
    assert SimEvent.COLLISION in events
    assert SimEvent.GAME_OVER in events
    assert SimEvent.NEW_HIGH_SCORE in events
    assert controller.high_score == 75
    assert controller.outcome.final_score == 75
    assert controller.outcome.previous_high_score == 50
    assert controller.outcome.new_high_score


def test_collision_below_the_high_score_keeps_it(controller):
    controller.trigger()
    events = _crash_at(controller, 30.0)

    assert controller.phase is RunPhase.ENDED
    assert SimEvent.NEW_HIGH_SCORE not in events
    assert events == (SimEvent.COLLISION, SimEvent.GAME_OVER)
    assert controller.high_score == 50
    assert not controller.outcome.new_high_score


def test_equal_score_is_not_a_record(controller):
    controller.trigger()
    events = _crash_at(controller, 50.9)
    assert SimEvent.NEW_HIGH_SCORE not in events
    assert controller.high_score == 50


def test_ended_run_is_frozen(controller):
    controller.trigger()
    _crash_at(controller, 30.0)
    frozen = controller.state
    assert controller.tick(0.04) == ()
    assert controller.state == frozen
    assert controller.state.progress.score == 30.0


def test_reset_is_identical_from_idle_and_from_ended(tuning, rng_factory):
    from_idle = RunController(tuning=tuning, rng=rng_factory())
    from_idle.trigger()

    from_ended = RunController(tuning=tuning, rng=rng_factory())
    from_ended.trigger()
    for _ in range(100):
        from_ended.tick(0.04)
    _crash_at(from_ended, 12.0)
    assert from_ended.phase is RunPhase.ENDED
    from_ended.trigger()

    assert from_idle.state == from_ended.state == fresh_run_state(tuning)
    assert from_ended.outcome is None


def test_restart_from_ended(controller, tuning):
    controller.trigger()
    _crash_at(controller, 10.0)
    assert controller.restart() == (SimEvent.RUN_STARTED,)
    assert controller.state == fresh_run_state(tuning)


def test_toggle_mute_flips_the_flag(controller):
    assert controller.toggle_mute() is True
    assert controller.muted
    assert controller.toggle_mute() is False


def test_snapshot_exposes_presentation_state(controller, tuning):
    controller.trigger()
    controller.state = replace(
        controller.state,
        obstacles=(Obstacle(x=500, y=139, w=22, h=31),),
        progress=replace(controller.state.progress, score=12.7),
    )
    snap = controller.snapshot()
    assert snap.phase is RunPhase.RUNNING
    assert snap.score == 12
    assert snap.high_score == 50
    assert snap.character_box == controller.state.character.box
    assert len(snap.obstacle_boxes) == 1
    assert snap.outcome is None
