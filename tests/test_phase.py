"""
Tests for phase label handling and timeline reports.
"""
import pytest
from datetime import date

from src.models.phase import CyclePhase
from src.services.phase import (
    normalize_phase,
    next_phase,
    phase_from_index,
    phase_index,
    phase_display_name,
    format_anchor_date,
    generate_timeline_report,
    generate_insufficient_data_report
)
from src.services.timeline import build_cycle_timeline

@pytest.mark.parametrize("label, expected", [
    ("MENSTRUAL bleeding", CyclePhase.MENSTRUAL),
    ("Menstrual", CyclePhase.MENSTRUAL),
    ("follicular", CyclePhase.FOLLICULAR),
    ("ovulation", CyclePhase.OVULATORY),
    ("Ovulatory window", CyclePhase.OVULATORY),
    ("Late Luteal", CyclePhase.LUTEAL),
])
def test_normalize_phase(label, expected):
    assert normalize_phase(label) == expected

@pytest.mark.parametrize("label", ["xyz", "", None, 3, "period"])
def test_normalize_phase_unrecognised(label):
    """Unknown labels never raise."""
    assert normalize_phase(label) is None
    assert normalize_phase(label, default=CyclePhase.LUTEAL) == CyclePhase.LUTEAL

def test_phase_transitions_wrap():
    assert next_phase(CyclePhase.MENSTRUAL) == CyclePhase.FOLLICULAR
    assert next_phase(CyclePhase.OVULATORY) == CyclePhase.LUTEAL
    assert next_phase(CyclePhase.LUTEAL) == CyclePhase.MENSTRUAL

def test_phase_index_mapping():
    """API phase codes 0-3 follow cycle order."""
    for index, phase in enumerate(CyclePhase):
        assert phase_from_index(index) == phase
        assert phase_index(phase) == index

    assert phase_from_index(4) is None
    assert phase_from_index(-1) is None

def test_display_names():
    assert phase_display_name(CyclePhase.OVULATORY) == "Ovulation"
    assert phase_display_name(phase_from_index(9)) == "--"

def test_format_anchor_date():
    assert format_anchor_date(date(2025, 3, 6)) == "Mar 6"
    assert format_anchor_date(date(2025, 11, 24)) == "Nov 24"

def test_timeline_report(follicular_state):
    report = generate_timeline_report(build_cycle_timeline(follicular_state))

    assert "Cycle length: 28 days" in report
    assert "Current phase: Follicular (day 6 of 9, 78%)" in report
    assert "Next phase: Ovulation on Mar 15" in report
    assert "Follicular: Mar 6 (9 days) ◀" in report
    assert "Luteal: Mar 16 (13 days)" in report

def test_insufficient_data_report():
    report = generate_insufficient_data_report()

    assert "Not enough cycle data" in report
    assert "days" not in report.split("\n")[0]
