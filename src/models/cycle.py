"""
Cycle records exchanged with the tracking API.
"""
from enum import IntEnum
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

class PeriodEventType(IntEnum):
    """Period event codes understood by the periods endpoint."""
    START = 1
    END = 2

class SymptomOccurrence(IntEnum):
    """Symptom filter codes for the symptoms endpoint."""
    ALL = 0
    DURING_PERIOD = 1
    NON_CYCLE_DAYS = 2

class CycleState(BaseModel):
    """
    Cycle summary reported by the dashboard endpoint.

    Only the fields needed to lay out a phase timeline are kept. Dates arrive
    as ISO-8601 strings and are parsed by pydantic. Day counts may be
    averages with a fractional part; they are rounded when a timeline is built.
    """
    current_phase: str = ""
    days_until_next_phase: Optional[float] = None
    avg_cycle_length: Optional[float] = None
    last_period_start: Optional[date] = None
    next_period_start: Optional[date] = None
    days_until_next_period: Optional[float] = None

    @property
    def has_timeline_data(self) -> bool:
        """Check if a phase timeline can be derived from this snapshot."""
        return (
            self.avg_cycle_length is not None
            and self.avg_cycle_length >= 0.5
            and self.last_period_start is not None
        )

class PeriodRecord(BaseModel):
    """
    A logged period, open while end_date is unset.
    """
    id: str
    start_date: date
    end_date: Optional[date] = None
    duration_days: Optional[int] = None
    notes: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.end_date is None

class Symptom(BaseModel):
    """
    A logged symptom with its severity.
    """
    id: str
    type: str
    severity: int = Field(..., ge=0, le=5)
    date: date
    notes: Optional[str] = None
