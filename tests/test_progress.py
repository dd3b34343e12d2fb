import pytest

from dinorun.domain.progress import Progress, advance_progress, initial_progress, milestones_crossed
from dinorun.domain.tuning import Tuning


def test_one_second_of_progress(tuning):
    p, fired = advance_progress(initial_progress(tuning), 1.0, tuning)
    assert p.score == pytest.approx(60.0)
    assert p.scroll_speed == pytest.approx(306.0)
    assert p.elapsed_ms == pytest.approx(1000.0)
    assert not fired


def test_score_and_speed_never_decrease(tuning):
    p = initial_progress(tuning)
    for dt in (0.0, 0.016, 0.04, 0.001, 0.0, 0.033):
        nxt, _ = advance_progress(p, dt, tuning)
        assert nxt.score >= p.score
        assert nxt.scroll_speed >= p.scroll_speed
        p = nxt


def test_display_score_is_floored():
    assert Progress(score=75.9, scroll_speed=300, elapsed_ms=0, last_milestone_ms=None).display_score == 75


def test_crossing_a_multiple_of_100_fires_the_milestone(tuning):
    p = Progress(score=99.5, scroll_speed=300.0, elapsed_ms=5000.0, last_milestone_ms=None)
    nxt, fired = advance_progress(p, 1 / 60, tuning)
    assert fired
    assert nxt.last_milestone_ms == pytest.approx(5000.0 + 1000 / 60)


def test_no_milestone_without_a_crossing(tuning):
    p = Progress(score=100.5, scroll_speed=300.0, elapsed_ms=5000.0, last_milestone_ms=4000.0)
    nxt, fired = advance_progress(p, 1 / 60, tuning)
    assert not fired
    assert nxt.last_milestone_ms == 4000.0


def test_milestone_is_debounced(tuning):
    p = Progress(score=199.5, scroll_speed=300.0, elapsed_ms=5100.0, last_milestone_ms=5016.0)
    _, fired = advance_progress(p, 1 / 60, tuning)
    assert not fired


def test_milestone_fires_again_after_the_debounce(tuning):
    p = Progress(score=199.5, scroll_speed=300.0, elapsed_ms=5100.0, last_milestone_ms=4000.0)
    _, fired = advance_progress(p, 1 / 60, tuning)
    assert fired


def test_burst_of_milestones_fires_once():
    t = Tuning(score_rate=10_000.0)
    p, fired = advance_progress(initial_progress(t), 0.04, t)
    assert p.score == pytest.approx(400.0)
    assert fired
    _, fired_again = advance_progress(p, 0.04, t)
    assert not fired_again


def test_milestones_crossed_counts_floored_boundaries():
    assert milestones_crossed(99.9, 100.0, 100) == 1
    assert milestones_crossed(99.9, 200.1, 100) == 2
    assert milestones_crossed(100.0, 199.9, 100) == 0
    assert milestones_crossed(0.0, 0.5, 100) == 0


def test_optional_speed_cap():
    t = Tuning(max_scroll_speed=301.0)
    p, _ = advance_progress(initial_progress(t), 1.0, t)
    assert p.scroll_speed == 301.0
    p, _ = advance_progress(p, 1.0, t)
    assert p.scroll_speed == 301.0


def test_uncapped_speed_keeps_ramping(tuning):
    p = initial_progress(tuning)
    for _ in range(100):
        p, _ = advance_progress(p, 1.0, tuning)
    assert p.scroll_speed == pytest.approx(900.0)
