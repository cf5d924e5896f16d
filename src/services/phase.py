"""
Service module for cycle phase labels, transitions and display.

This module maps the tracking API's loosely formatted phase labels and numeric
phase codes onto CyclePhase values, and renders computed timelines as text.

Typical usage:
    >>> phase = normalize_phase(state.current_phase)
    >>> print(phase_display_name(next_phase(phase)))
    >>> report = generate_timeline_report(cycle_timeline)
"""
from typing import Any, Optional
from datetime import date

from src.models.phase import CyclePhase, CycleTimeline
from src.services.constants import (
    PHASE_ORDER,
    PHASE_TRANSITIONS,
    PHASE_LABEL_KEYWORDS,
    PHASE_DISPLAY_NAMES,
    PHASE_ICONS,
    INSUFFICIENT_DATA_MESSAGE
)

def normalize_phase(label: Any, default: Optional[CyclePhase] = None) -> Optional[CyclePhase]:
    """
    Map a free-text phase label to a CyclePhase.

    Matching is a case-insensitive substring search, so "Menstrual bleeding",
    "OVULATION" and "late luteal" are all accepted. This function never raises.

    Args:
        label: Phase label as reported by the API
        default: Value returned when no phase keyword is found

    Returns:
        Matching CyclePhase, or ``default`` if the label is not recognised

    Example:
        >>> normalize_phase("ovulation")
        <CyclePhase.OVULATORY: 'ovulatory'>
        >>> normalize_phase("xyz") is None
        True
    """
    if not isinstance(label, str):
        return default

    lowered = label.lower()
    for keyword, phase in PHASE_LABEL_KEYWORDS:
        if keyword in lowered:
            return phase

    return default

def next_phase(phase: CyclePhase) -> CyclePhase:
    """Get the phase that follows ``phase``, wrapping from luteal to menstrual."""
    return PHASE_TRANSITIONS[phase]

def phase_from_index(index: int) -> Optional[CyclePhase]:
    """
    Convert the API's numeric phase code (0-3) to a CyclePhase.

    Returns None for codes outside the known range.
    """
    if isinstance(index, int) and 0 <= index < len(PHASE_ORDER):
        return PHASE_ORDER[index]
    return None

def phase_index(phase: CyclePhase) -> int:
    """Convert a CyclePhase to the API's numeric phase code."""
    return PHASE_ORDER.index(phase)

def phase_display_name(phase: Optional[CyclePhase]) -> str:
    """Human readable phase name, "--" when unknown."""
    if phase is None:
        return "--"
    return PHASE_DISPLAY_NAMES[phase]

def format_anchor_date(value: date) -> str:
    """Format a phase anchor as month and day, e.g. "Mar 6"."""
    return f"{value:%b} {value.day}"

def generate_timeline_report(cycle_timeline: CycleTimeline) -> str:
    """
    Generate a text report of a computed cycle timeline.

    Args:
        cycle_timeline: Result of build_cycle_timeline

    Returns:
        Formatted report string
    """
    current = cycle_timeline.current_phase
    progress = cycle_timeline.progress
    lengths = cycle_timeline.phase_lengths

    report = [
        "🌙 Cycle Timeline",
        f"Cycle length: {cycle_timeline.cycle_length} days",
        (f"Current phase: {phase_display_name(current)} "
         f"(day {progress.current_day} of {lengths[current]}, {progress.progress_percent:.0f}%)"),
        (f"Next phase: {phase_display_name(progress.next_phase)} "
         f"on {format_anchor_date(cycle_timeline.next_phase_start)}"),
        "",
        "📅 Phases:",
    ]

    for phase in PHASE_ORDER:
        marker = " ◀" if phase == current else ""
        report.append(
            f"{PHASE_ICONS[phase]} {phase_display_name(phase)}: "
            f"{format_anchor_date(cycle_timeline.timeline[phase])} "
            f"({lengths[phase]} days){marker}"
        )

    return "\n".join(report)

def generate_insufficient_data_report() -> str:
    """Report shown in place of a timeline when cycle data is missing."""
    return "\n".join([
        "🌙 Cycle Timeline",
        f"ℹ️ {INSUFFICIENT_DATA_MESSAGE}"
    ])
