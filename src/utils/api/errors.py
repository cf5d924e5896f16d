"""
Mapping of failed HTTP exchanges to ErrorDetails.
"""
import json
from typing import Any

import requests

from src.models.api import ErrorDetails

# status -> (code, message template); "{message}" is the server-provided message
HTTP_ERROR_CODES = {
    400: ("BAD_REQUEST", "Bad Request: {message}"),
    401: ("UNAUTHORIZED", "Unauthorized: Authentication required"),
    403: ("FORBIDDEN", "Forbidden: You do not have permission to access this resource"),
    404: ("NOT_FOUND", "Not Found: The requested resource was not found"),
    409: ("CONFLICT", "There was a conflict with the request"),
    422: ("VALIDATION_ERROR", "Validation Error: The request data is invalid"),
    500: ("SERVER_ERROR", "Internal Server Error: Something went wrong on the server"),
}

def extract_error_message(body: Any, fallback: str = "") -> str:
    """
    Pull the most meaningful message out of an error response body.

    Args:
        body: Decoded response body (dict, string or None)
        fallback: Message used when the body has none

    Returns:
        Error message string
    """
    if isinstance(body, str) and body:
        return body

    if isinstance(body, dict):
        if body.get("message"):
            return str(body["message"])

        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if error:
            return json.dumps(error)

    return fallback or "Unknown error occurred"

def error_from_status(status: int, body: Any, reason: str = "") -> ErrorDetails:
    """
    Build ErrorDetails for a response outside the 2xx range.

    Example:
        >>> error_from_status(404, {"message": "missing"}).code
        'NOT_FOUND'
    """
    message = extract_error_message(body, reason)
    code, template = HTTP_ERROR_CODES.get(
        status,
        (f"HTTP_{status}", f"HTTP Error {status}: {{message}}")
    )

    if body is None or body == "":
        details = ""
    elif isinstance(body, str):
        details = body
    else:
        details = json.dumps(body)

    return ErrorDetails(code=code, message=template.format(message=message), details=details)

def error_from_exception(exc: requests.exceptions.RequestException) -> ErrorDetails:
    """
    Build ErrorDetails for a request that never produced a response.

    Timeouts and connection failures get their own codes; anything else is
    treated as a problem building the request.
    """
    if isinstance(exc, requests.exceptions.Timeout):
        return ErrorDetails(
            code="TIMEOUT",
            message="Request timeout: The server took too long to respond"
        )
    if isinstance(exc, requests.exceptions.ConnectionError):
        return ErrorDetails(
            code="NETWORK_ERROR",
            message="Network Error: Unable to connect to the server",
            details=str(exc)
        )
    return ErrorDetails(
        code="REQUEST_SETUP_ERROR",
        message=f"Request Error: {exc}"
    )
