"""
Response envelope shared by every API call.
"""
from typing import Any, Optional
from pydantic import BaseModel

from src.services.exceptions import ApiError

class ErrorDetails(BaseModel):
    """Normalized description of a failed request."""
    code: str
    message: str
    details: str = ""

class ApiResponse(BaseModel):
    """
    Uniform result of an API call.

    Failed calls carry an ErrorDetails instead of raising, so callers can
    branch on ``success`` the same way for HTTP, network and timeout errors.
    """
    success: bool
    data: Optional[Any] = None
    error: Optional[ErrorDetails] = None
    status: Optional[int] = None

    def raise_for_error(self) -> "ApiResponse":
        """
        Raise ApiError if the call failed.

        Returns:
            The response itself, to allow chaining

        Raises:
            ApiError: If success is False
        """
        if not self.success:
            error = self.error or ErrorDetails(code="UNKNOWN_ERROR", message="Unknown error occurred")
            raise ApiError(error.code, error.message, status=self.status, details=error.details)
        return self
