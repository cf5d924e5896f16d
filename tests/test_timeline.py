"""
Tests for phase length scaling, timeline anchoring and phase progress.
"""
import pytest
from datetime import date, timedelta

from src.models.cycle import CycleState
from src.models.phase import CyclePhase, PhaseLengths, PhaseTimeline
from src.services.constants import PHASE_ORDER
from src.services.exceptions import InsufficientCycleDataError
from src.services.timeline import (
    compute_phase_lengths,
    compute_phase_timeline,
    refine_luteal_length,
    compute_progress,
    build_cycle_timeline
)

@pytest.mark.parametrize("cycle_length", range(1, 61))
def test_phase_lengths_sum_to_cycle_length(cycle_length):
    """Phase lengths always add up to the cycle length."""
    lengths = compute_phase_lengths(cycle_length)
    assert sum(lengths.values()) == cycle_length

@pytest.mark.parametrize("cycle_length", range(4, 61))
def test_every_phase_gets_at_least_one_day(cycle_length):
    lengths = compute_phase_lengths(cycle_length)
    assert min(lengths.values()) >= 1

def test_phase_lengths_for_28_day_cycle():
    """Rounding overshoots by one day and the luteal phase absorbs it."""
    lengths = compute_phase_lengths(28)
    assert (lengths.menstrual, lengths.follicular, lengths.ovulatory, lengths.luteal) == (5, 9, 1, 13)

def test_phase_lengths_for_short_and_long_cycles():
    short = compute_phase_lengths(21)
    assert (short.menstrual, short.follicular, short.ovulatory, short.luteal) == (4, 7, 1, 9)

    long = compute_phase_lengths(35)
    assert (long.menstrual, long.follicular, long.ovulatory, long.luteal) == (6, 11, 1, 17)

def test_reference_cycle_is_unchanged():
    lengths = compute_phase_lengths(29)
    assert lengths.as_dict() == {
        CyclePhase.MENSTRUAL: 5,
        CyclePhase.FOLLICULAR: 9,
        CyclePhase.OVULATORY: 1,
        CyclePhase.LUTEAL: 14
    }

@pytest.mark.parametrize("cycle_length", [0, -5, 28.0, "28", None, True])
def test_invalid_cycle_length(cycle_length):
    with pytest.raises(ValueError, match="positive integer"):
        compute_phase_lengths(cycle_length)

def test_timeline_anchors(lengths_28):
    """Each anchor follows the previous phase's length."""
    timeline = compute_phase_timeline(date(2025, 3, 1), lengths_28)

    assert timeline.menstrual == date(2025, 3, 1)
    assert timeline.follicular == date(2025, 3, 6)
    assert timeline.ovulatory == date(2025, 3, 15)
    assert timeline.luteal == date(2025, 3, 16)

@pytest.mark.parametrize("cycle_length", [4, 21, 28, 35, 45])
def test_timeline_anchors_are_non_decreasing(cycle_length):
    start = date(2024, 12, 30)
    lengths = compute_phase_lengths(cycle_length)
    timeline = compute_phase_timeline(start, lengths)

    anchors = [timeline[phase] for phase in PHASE_ORDER]
    assert anchors[0] == start
    assert anchors == sorted(anchors)
    assert timeline.luteal + timedelta(days=lengths.luteal) == start + timedelta(days=cycle_length)

def _timeline_with_luteal(luteal_start: date) -> PhaseTimeline:
    return PhaseTimeline(
        menstrual=luteal_start - timedelta(days=15),
        follicular=luteal_start - timedelta(days=10),
        ovulatory=luteal_start - timedelta(days=1),
        luteal=luteal_start
    )

def test_refine_luteal_length(lengths_28):
    """A known next period replaces the scaled luteal length."""
    timeline = _timeline_with_luteal(date(2025, 3, 10))

    refined = refine_luteal_length(timeline, date(2025, 3, 24), CyclePhase.LUTEAL, lengths_28)

    assert refined.luteal == 14
    assert refined.menstrual == lengths_28.menstrual
    assert lengths_28.luteal == 13

@pytest.mark.parametrize("next_period", [date(2025, 3, 10), date(2025, 3, 2)])
def test_refine_ignores_non_positive_difference(lengths_28, next_period):
    timeline = _timeline_with_luteal(date(2025, 3, 10))

    refined = refine_luteal_length(timeline, next_period, CyclePhase.LUTEAL, lengths_28)

    assert refined == lengths_28

def test_refine_only_applies_in_luteal_phase(lengths_28):
    timeline = _timeline_with_luteal(date(2025, 3, 10))

    assert refine_luteal_length(timeline, date(2025, 3, 24), CyclePhase.FOLLICULAR, lengths_28) == lengths_28
    assert refine_luteal_length(timeline, None, CyclePhase.LUTEAL, lengths_28) == lengths_28

def test_progress_clamps_stale_days_until():
    """Days until next phase larger than the phase is clamped to the phase length."""
    lengths = PhaseLengths(menstrual=5, follicular=9, ovulatory=1, luteal=14)

    progress = compute_progress(CyclePhase.LUTEAL, 20, lengths)

    assert progress.current_day == 1
    assert progress.progress_percent == pytest.approx(100 / 14)
    assert progress.next_phase == CyclePhase.MENSTRUAL

def test_progress_mid_phase(lengths_28):
    progress = compute_progress(CyclePhase.FOLLICULAR, 3, lengths_28)

    assert progress.current_day == 6
    assert progress.progress_percent == pytest.approx(7 / 9 * 100)
    assert progress.next_phase == CyclePhase.OVULATORY

def test_progress_negative_days_until_is_capped(lengths_28):
    progress = compute_progress(CyclePhase.MENSTRUAL, -3, lengths_28)

    assert progress.current_day == 5
    assert progress.progress_percent == 100.0

def test_progress_without_days_until(lengths_28):
    progress = compute_progress(CyclePhase.OVULATORY, None, lengths_28)

    assert progress.current_day == 1
    assert progress.progress_percent == 100.0
    assert progress.next_phase == CyclePhase.LUTEAL

@pytest.mark.parametrize("days_until", range(-2, 16))
def test_progress_bounds(lengths_28, days_until):
    progress = compute_progress(CyclePhase.LUTEAL, days_until, lengths_28)

    assert 1 <= progress.current_day <= lengths_28.luteal
    assert 0 < progress.progress_percent <= 100

def test_build_timeline_follicular(follicular_state):
    """Full timeline for a user three days before ovulation."""
    result = build_cycle_timeline(follicular_state)

    assert result.current_phase == CyclePhase.FOLLICULAR
    assert result.cycle_length == 28
    assert result.timeline.menstrual == date(2025, 3, 1)
    assert result.timeline.follicular == date(2025, 3, 6)
    assert 0 < result.progress.progress_percent < 100
    assert result.progress.next_phase == CyclePhase.OVULATORY
    assert result.next_phase_start == date(2025, 3, 15)

def test_build_timeline_refines_luteal():
    state = CycleState(
        current_phase="luteal",
        days_until_next_phase=5,
        avg_cycle_length=28,
        last_period_start=date(2025, 2, 23),
        next_period_start=date(2025, 3, 24)
    )

    result = build_cycle_timeline(state)

    assert result.timeline.luteal == date(2025, 3, 10)
    assert result.phase_lengths.luteal == 14
    assert result.cycle_length == 29
    assert result.progress.current_day == 9
    assert result.next_phase_start == date(2025, 3, 24)

def test_build_timeline_rounds_fractional_averages(follicular_state):
    """Averaged day counts from the API are rounded half-up."""
    state = follicular_state.model_copy(update={
        "avg_cycle_length": 28.6,
        "days_until_next_phase": 2.5
    })

    result = build_cycle_timeline(state)

    assert result.cycle_length == 29
    assert result.phase_lengths.luteal == 14
    assert result.progress.current_day == 6

def test_build_timeline_unknown_label_uses_default(follicular_state):
    state = follicular_state.model_copy(update={"current_phase": "xyz"})

    result = build_cycle_timeline(state)

    assert result.current_phase == CyclePhase.MENSTRUAL

@pytest.mark.parametrize("update, missing", [
    ({"avg_cycle_length": None}, ["avg_cycle_length"]),
    ({"avg_cycle_length": 0}, ["avg_cycle_length"]),
    ({"avg_cycle_length": 0.4}, ["avg_cycle_length"]),
    ({"last_period_start": None}, ["last_period_start"]),
    ({"avg_cycle_length": None, "last_period_start": None}, ["avg_cycle_length", "last_period_start"]),
])
def test_build_timeline_insufficient_data(follicular_state, update, missing):
    """No timeline is fabricated without cycle length and last period start."""
    state = follicular_state.model_copy(update=update)

    with pytest.raises(InsufficientCycleDataError) as exc_info:
        build_cycle_timeline(state)

    assert exc_info.value.missing == missing
    assert not state.has_timeline_data
