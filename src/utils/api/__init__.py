"""
Tracking API utilities package.
"""
from .client import ApiClient
from .errors import (
    error_from_status,
    error_from_exception,
    extract_error_message
)

__all__ = [
    "ApiClient",
    "error_from_status",
    "error_from_exception",
    "extract_error_message"
]
