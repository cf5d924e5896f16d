"""
User profile model for the cycle tracking client.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel


class UserProfile(BaseModel):
    """
    Represents the signed-in user's profile details.
    """
    first_name: str
    last_name: str
    email: Optional[str] = None
    dob: Optional[date] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    current_period_record_id: Optional[str] = None
    last_period_record_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
