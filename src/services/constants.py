"""
Constants and shared data for cycle phase services.
"""
from typing import Dict, List, Tuple
from src.models.phase import CyclePhase

PHASE_ORDER: List[CyclePhase] = [
    CyclePhase.MENSTRUAL,
    CyclePhase.FOLLICULAR,
    CyclePhase.OVULATORY,
    CyclePhase.LUTEAL
]

# Relative weights only, rescaled to the user's cycle length
REFERENCE_PHASE_RATIOS: Dict[CyclePhase, int] = {
    CyclePhase.MENSTRUAL: 5,
    CyclePhase.FOLLICULAR: 9,
    CyclePhase.OVULATORY: 1,
    CyclePhase.LUTEAL: 14
}

# Phase that absorbs the rounding residual
RESIDUAL_PHASE = CyclePhase.LUTEAL

MINIMUM_PHASE_DAYS = 1

PHASE_TRANSITIONS: Dict[CyclePhase, CyclePhase] = {
    CyclePhase.MENSTRUAL: CyclePhase.FOLLICULAR,
    CyclePhase.FOLLICULAR: CyclePhase.OVULATORY,
    CyclePhase.OVULATORY: CyclePhase.LUTEAL,
    CyclePhase.LUTEAL: CyclePhase.MENSTRUAL
}

# Substrings accepted in free-text phase labels, checked in order
PHASE_LABEL_KEYWORDS: List[Tuple[str, CyclePhase]] = [
    ("menstrual", CyclePhase.MENSTRUAL),
    ("follicular", CyclePhase.FOLLICULAR),
    ("ovulat", CyclePhase.OVULATORY),
    ("luteal", CyclePhase.LUTEAL)
]

DEFAULT_PHASE = CyclePhase.MENSTRUAL

PHASE_DISPLAY_NAMES: Dict[CyclePhase, str] = {
    CyclePhase.MENSTRUAL: "Menstrual",
    CyclePhase.FOLLICULAR: "Follicular",
    CyclePhase.OVULATORY: "Ovulation",
    CyclePhase.LUTEAL: "Luteal"
}

PHASE_ICONS: Dict[CyclePhase, str] = {
    CyclePhase.MENSTRUAL: "🩸",
    CyclePhase.FOLLICULAR: "🌱",
    CyclePhase.OVULATORY: "🌕",
    CyclePhase.LUTEAL: "🍂"
}

INSUFFICIENT_DATA_MESSAGE = (
    "Not enough cycle data to build your timeline yet. "
    "Log your period start dates to see phase predictions."
)
