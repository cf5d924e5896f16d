"""
Phase model definitions for the cycle phase timeline.
"""
from enum import Enum
from datetime import date, timedelta
from typing import Dict, Iterator
from pydantic import BaseModel, ConfigDict

class CyclePhase(str, Enum):
    """
    Menstrual cycle phases, declared in cyclic order.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"

class PhaseLengths(BaseModel):
    """
    Number of days assigned to each phase of one cycle.
    """
    model_config = ConfigDict(frozen=True)

    menstrual: int
    follicular: int
    ovulatory: int
    luteal: int

    @classmethod
    def from_mapping(cls, lengths: Dict[CyclePhase, int]) -> "PhaseLengths":
        return cls(**{phase.value: days for phase, days in lengths.items()})

    def __getitem__(self, phase: CyclePhase) -> int:
        return getattr(self, CyclePhase(phase).value)

    def as_dict(self) -> Dict[CyclePhase, int]:
        return {phase: self[phase] for phase in CyclePhase}

    def values(self) -> Iterator[int]:
        return iter(self.as_dict().values())

    def replace(self, phase: CyclePhase, days: int) -> "PhaseLengths":
        """Return a copy with a single phase length changed."""
        return self.model_copy(update={CyclePhase(phase).value: days})

    @property
    def total(self) -> int:
        return sum(self.values())

class PhaseTimeline(BaseModel):
    """
    Calendar date on which each phase begins.
    """
    model_config = ConfigDict(frozen=True)

    menstrual: date
    follicular: date
    ovulatory: date
    luteal: date

    def __getitem__(self, phase: CyclePhase) -> date:
        return getattr(self, CyclePhase(phase).value)

    def as_dict(self) -> Dict[CyclePhase, date]:
        return {phase: self[phase] for phase in CyclePhase}

class PhaseProgress(BaseModel):
    """
    Position inside the current phase.
    """
    model_config = ConfigDict(frozen=True)

    current_day: int  # 1-based day within the phase
    progress_percent: float
    next_phase: CyclePhase

class CycleTimeline(BaseModel):
    """
    Complete phase schedule derived from a single cycle snapshot.
    """
    model_config = ConfigDict(frozen=True)

    current_phase: CyclePhase
    cycle_length: int
    phase_lengths: PhaseLengths
    timeline: PhaseTimeline
    progress: PhaseProgress

    @property
    def next_phase_start(self) -> date:
        """Date the phase after the current one begins."""
        if self.current_phase == CyclePhase.LUTEAL:
            return self.timeline.luteal + timedelta(days=self.phase_lengths.luteal)
        return self.timeline[self.progress.next_phase]

