"""
Service-level exceptions.

This module contains exceptions that can be raised by the timeline
calculator and the API services.
"""
from typing import Optional

class InsufficientCycleDataError(Exception):
    """Raised when a cycle snapshot lacks the data needed to build a timeline."""

    def __init__(self, missing: list):
        self.missing = missing
        super().__init__(f"Insufficient cycle data, missing: {', '.join(missing)}")

class AuthenticationError(Exception):
    """Raised when a call requires a signed-in session and none is active."""
    pass

class ApiError(Exception):
    """Raised when a failed API response is converted into an exception."""

    def __init__(
        self,
        code: str,
        message: str,
        status: Optional[int] = None,
        details: str = ""
    ):
        self.code = code
        self.message = message
        self.status = status
        self.details = details
        super().__init__(f"{code}: {message}")
