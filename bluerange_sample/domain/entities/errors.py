"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NoDeviceFoundError(DomainError):
    """Raised when no active device matches the requested identifier."""

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"No device found with deviceId {device_id}"
        super().__init__(message, {"device_id": device_id, **(details or {})})


class AmbiguousDeviceError(DomainError):
    """Raised when more than one active device matches the identifier."""

    def __init__(
        self, device_id: str, count: int, details: Optional[Dict[str, Any]] = None
    ):
        message = f"{count} devices found with deviceId {device_id}"
        super().__init__(
            message, {"device_id": device_id, "count": count, **(details or {})}
        )


class ApiError(Exception):
    """
    Raised when the server answers with a non-success HTTP status.

    Args:
        status_code: HTTP status of the failed call
        response_body: Raw response body, possibly empty
        method: HTTP method of the failed request
        url: Full request URL
    """

    def __init__(
        self,
        status_code: int,
        response_body: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} returned HTTP {status_code}")
