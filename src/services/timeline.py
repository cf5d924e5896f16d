"""
Service module for laying out cycle phases on a calendar timeline.

The tracking API only reports a coarse cycle summary (current phase, days
until the next phase, average cycle length and last period start). This
module rescales reference phase ratios to the user's cycle length, anchors
each phase on the calendar and locates the user inside the current phase.

All functions are pure and hold no state between calls.

Typical usage:
    >>> state = dashboard.get_cycle_state()
    >>> cycle_timeline = build_cycle_timeline(state)
    >>> print(cycle_timeline.timeline.follicular)
"""
import math
from typing import Dict, Optional
from datetime import date, timedelta

from aws_lambda_powertools import Logger

from src.models.cycle import CycleState
from src.models.phase import (
    CyclePhase,
    CycleTimeline,
    PhaseLengths,
    PhaseProgress,
    PhaseTimeline
)
from src.services.constants import (
    PHASE_ORDER,
    REFERENCE_PHASE_RATIOS,
    RESIDUAL_PHASE,
    MINIMUM_PHASE_DAYS,
    DEFAULT_PHASE
)
from src.services.exceptions import InsufficientCycleDataError
from src.services.phase import normalize_phase, next_phase

logger = Logger()

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def compute_phase_lengths(cycle_length: int) -> PhaseLengths:
    """
    Split a cycle length into per-phase day counts.

    Each reference ratio is scaled by ``cycle_length / sum(ratios)`` and
    rounded half-up on its own. Every phase is floored at one day, then the
    rounding residual is added to the luteal phase so the four lengths always
    sum to ``cycle_length``. If that would leave the luteal phase under the
    floor, the missing days are taken from the longest remaining phases.

    Cycles shorter than four days cannot give every phase a day; for those the
    floor is dropped and only the sum is guaranteed.

    Args:
        cycle_length: Total cycle length in days, no upper or lower clinical bound

    Returns:
        PhaseLengths summing exactly to cycle_length

    Raises:
        ValueError: If cycle_length is not a positive integer

    Example:
        >>> lengths = compute_phase_lengths(28)
        >>> (lengths.menstrual, lengths.follicular, lengths.ovulatory, lengths.luteal)
        (5, 9, 1, 13)
    """
    if isinstance(cycle_length, bool) or not isinstance(cycle_length, int) or cycle_length <= 0:
        raise ValueError(f"Cycle length must be a positive integer, got {cycle_length!r}")

    minimum = MINIMUM_PHASE_DAYS if cycle_length >= MINIMUM_PHASE_DAYS * len(PHASE_ORDER) else 0
    scale = cycle_length / sum(REFERENCE_PHASE_RATIOS.values())

    lengths: Dict[CyclePhase, int] = {
        phase: max(minimum, _round_half_up(REFERENCE_PHASE_RATIOS[phase] * scale))
        for phase in PHASE_ORDER
    }

    residual = cycle_length - sum(lengths.values())
    lengths[RESIDUAL_PHASE] += residual

    shortfall = minimum - lengths[RESIDUAL_PHASE]
    if shortfall > 0:
        lengths[RESIDUAL_PHASE] = minimum
        for _ in range(shortfall):
            donor = max(
                (phase for phase in PHASE_ORDER if phase != RESIDUAL_PHASE),
                key=lambda phase: lengths[phase]
            )
            lengths[donor] -= 1

        logger.debug("Rebalanced phase lengths after rounding", extra={
            "cycle_length": cycle_length,
            "shortfall": shortfall,
            "lengths": {phase.value: days for phase, days in lengths.items()}
        })

    return PhaseLengths.from_mapping(lengths)

def compute_phase_timeline(last_period_start: date, phase_lengths: PhaseLengths) -> PhaseTimeline:
    """
    Anchor every phase on the calendar.

    The menstrual phase starts on ``last_period_start``; every following phase
    starts the day after the previous one ends.

    Args:
        last_period_start: First day of the most recent period
        phase_lengths: Day count of each phase

    Returns:
        PhaseTimeline with the inclusive start date of each phase
    """
    anchors: Dict[str, date] = {}
    current = last_period_start
    for phase in PHASE_ORDER:
        anchors[phase.value] = current
        current = current + timedelta(days=phase_lengths[phase])

    return PhaseTimeline(**anchors)

def refine_luteal_length(
    timeline: PhaseTimeline,
    known_next_period_start: Optional[date],
    current_phase: Optional[CyclePhase],
    phase_lengths: PhaseLengths
) -> PhaseLengths:
    """
    Replace the scaled luteal length with the distance to a known next period.

    Only applies while the user is in the luteal phase and the API already
    predicts the next period start. A prediction on or before the luteal
    anchor is ignored.

    Args:
        timeline: Phase anchors computed from the scaled lengths
        known_next_period_start: Next period start reported by the API, if any
        current_phase: Phase the user is currently in
        phase_lengths: Scaled phase lengths

    Returns:
        Phase lengths with the refined luteal length, or the input unchanged

    Example:
        >>> # luteal anchor 2025-03-10, next period 2025-03-24
        >>> refine_luteal_length(timeline, date(2025, 3, 24), CyclePhase.LUTEAL, lengths).luteal
        14
    """
    if current_phase != CyclePhase.LUTEAL or known_next_period_start is None:
        return phase_lengths

    refined = (known_next_period_start - timeline.luteal).days
    if refined <= 0:
        logger.debug("Ignoring next period date before luteal anchor", extra={
            "luteal_start": timeline.luteal.isoformat(),
            "next_period_start": known_next_period_start.isoformat()
        })
        return phase_lengths

    return phase_lengths.replace(CyclePhase.LUTEAL, refined)

def compute_progress(
    current_phase: CyclePhase,
    days_until_next_phase: Optional[int],
    phase_lengths: PhaseLengths
) -> PhaseProgress:
    """
    Locate the user inside the current phase.

    The API's days-until-next-phase value may be stale, so it is clamped to
    ``[0, phase length]`` before use. A missing value counts as the whole
    phase remaining.

    Args:
        current_phase: Phase the user is in
        days_until_next_phase: Days left before the next phase begins
        phase_lengths: Day count of each phase

    Returns:
        PhaseProgress with a 1-based current day, a percentage capped at 100
        and the next phase in the cycle

    Example:
        >>> progress = compute_progress(CyclePhase.LUTEAL, 20, lengths)  # luteal=14
        >>> progress.current_day, round(progress.progress_percent, 2)
        (1, 7.14)
    """
    phase_length = max(phase_lengths[current_phase], 1)

    if days_until_next_phase is None:
        safe_days_until = phase_length
    else:
        safe_days_until = min(max(days_until_next_phase, 0), phase_length)

    current_day = max(1, phase_length - safe_days_until)
    progress_percent = min(100.0, (phase_length + 1 - safe_days_until) / phase_length * 100)

    return PhaseProgress(
        current_day=current_day,
        progress_percent=progress_percent,
        next_phase=next_phase(current_phase)
    )

def build_cycle_timeline(state: CycleState) -> CycleTimeline:
    """
    Build the full phase timeline for a dashboard cycle snapshot.

    No placeholder data is ever substituted: without a cycle length and a last
    period start the caller gets an InsufficientCycleDataError and should show
    an explicit empty state. Fractional day counts from the API are rounded
    half-up; an average that rounds to zero days counts as missing.

    Args:
        state: Cycle snapshot from the dashboard endpoint

    Returns:
        CycleTimeline with lengths, anchors and progress

    Raises:
        InsufficientCycleDataError: If cycle length or last period start is missing
        ValueError: If the cycle length is not positive
    """
    cycle_length = None
    if state.avg_cycle_length is not None:
        cycle_length = _round_half_up(state.avg_cycle_length)

    missing = []
    if not cycle_length:
        missing.append("avg_cycle_length")
    if state.last_period_start is None:
        missing.append("last_period_start")
    if missing:
        raise InsufficientCycleDataError(missing)

    current_phase = normalize_phase(state.current_phase)
    if current_phase is None:
        logger.warning("Unrecognised phase label, using default phase", extra={
            "label": state.current_phase,
            "default_phase": DEFAULT_PHASE.value
        })
        current_phase = DEFAULT_PHASE

    phase_lengths = compute_phase_lengths(cycle_length)
    timeline = compute_phase_timeline(state.last_period_start, phase_lengths)

    phase_lengths = refine_luteal_length(
        timeline,
        state.next_period_start,
        current_phase,
        phase_lengths
    )
    # Luteal is last, so refinement never moves an anchor
    days_until_next_phase = state.days_until_next_phase
    if days_until_next_phase is not None:
        days_until_next_phase = _round_half_up(days_until_next_phase)
    progress = compute_progress(current_phase, days_until_next_phase, phase_lengths)

    return CycleTimeline(
        current_phase=current_phase,
        cycle_length=phase_lengths.total,
        phase_lengths=phase_lengths,
        timeline=timeline,
        progress=progress
    )
