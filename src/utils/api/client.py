"""
Cycle tracking API client implementation.
"""
import os
from typing import Dict, Any, Optional

import requests

from src.models.api import ApiResponse, ErrorDetails
from src.utils.case import to_snake_case
from src.utils.logging import logger
from src.utils.session import Session
from .errors import error_from_status, error_from_exception

DEFAULT_BASE_URL = "http://0.0.0.0:8000/api/v1/"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENVELOPE_KEYS = ("success", "data", "error")

class ApiClient:
    """Client for the cycle tracking REST API."""

    def __init__(
        self,
        session: Optional[Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.session = session if session is not None else Session()
        self.base_url = base_url or os.environ.get("API_BASE_URL", DEFAULT_BASE_URL)
        self.timeout = timeout or float(os.environ.get("API_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
        self.http = requests.Session()

    def get_full_url(self, url: str) -> str:
        """
        Resolve a path against the base URL.

        Absolute URLs are returned unchanged. Relative paths are joined with a
        single slash between base URL and path.
        """
        if url.startswith("http://") or url.startswith("https://"):
            return url

        if self.base_url.endswith("/") and url.startswith("/"):
            return f"{self.base_url}{url[1:]}"
        if self.base_url and not self.base_url.endswith("/") and not url.startswith("/"):
            return f"{self.base_url}/{url}"
        return f"{self.base_url}{url}"

    def request(
        self,
        method: str,
        url: str,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> ApiResponse:
        """
        Send a request and wrap the outcome in an ApiResponse.

        Args:
            method: HTTP method
            url: Path relative to the base URL, or an absolute URL
            body: JSON body
            params: Query parameters, None values are dropped
            headers: Extra headers
            timeout: Per-request timeout in seconds

        Returns:
            ApiResponse; failures are reported in ``error`` and never raised
        """
        full_url = self.get_full_url(url)
        request_headers = {"Content-Type": "application/json"}
        request_headers.update(headers or {})
        request_headers.update(self.session.auth_headers())

        query = {key: value for key, value in (params or {}).items() if value is not None}

        try:
            response = self.http.request(
                method,
                full_url,
                json=body,
                params=query or None,
                headers=request_headers,
                timeout=timeout or self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.exception("API request failed", extra={
                "url": full_url,
                "method": method,
                "error_type": e.__class__.__name__
            })
            return ApiResponse(success=False, data=None, error=error_from_exception(e))

        payload = self._decode(response)

        if response.ok:
            if self._is_envelope(payload):
                return self._from_envelope(payload, response.status_code)
            return ApiResponse(
                success=True,
                data=to_snake_case(payload),
                error=None,
                status=response.status_code
            )

        logger.error("API request failed", extra={
            "url": full_url,
            "method": method,
            "status": response.status_code,
            "error": response.reason
        })

        if isinstance(payload, dict) and "success" in payload and "error" in payload:
            return self._from_envelope(payload, response.status_code)

        return ApiResponse(
            success=False,
            data=None,
            error=error_from_status(response.status_code, payload, response.reason or ""),
            status=response.status_code
        )

    def get(self, url: str, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self.request("GET", url, params=params, headers=headers)

    def post(self, url: str, body: Optional[Any] = None, params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self.request("POST", url, body=body, params=params, headers=headers)

    def put(self, url: str, body: Optional[Any] = None, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self.request("PUT", url, body=body, params=params, headers=headers)

    def patch(self, url: str, body: Optional[Any] = None, params: Optional[Dict[str, Any]] = None,
              headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self.request("PATCH", url, body=body, params=params, headers=headers)

    def delete(self, url: str, params: Optional[Dict[str, Any]] = None,
               headers: Optional[Dict[str, str]] = None) -> ApiResponse:
        return self.request("DELETE", url, params=params, headers=headers)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _is_envelope(payload: Any) -> bool:
        return isinstance(payload, dict) and all(key in payload for key in ENVELOPE_KEYS)

    @staticmethod
    def _from_envelope(payload: Dict[str, Any], status: int) -> ApiResponse:
        error = payload.get("error")
        if isinstance(error, dict):
            error = ErrorDetails(
                code=str(error.get("code", f"HTTP_{status}")),
                message=str(error.get("message", "")),
                details=str(error.get("details") or "")
            )
        elif error:
            error = ErrorDetails(code=f"HTTP_{status}", message=str(error))
        else:
            error = None

        return ApiResponse(
            success=bool(payload.get("success")),
            data=to_snake_case(payload.get("data")),
            error=error,
            status=status
        )
