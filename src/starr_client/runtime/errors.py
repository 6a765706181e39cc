"""
Starr Error Model

This module provides the error handling framework for the starr client.
Every error raised by the transport carries the rendered request it came from,
and each failure kind has its own class so callers can tell them apart.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, List, Tuple
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for the failure kinds the client distinguishes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    REQUEST_ERROR = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    MARSHAL_ERROR = 103
    UNMARSHAL_ERROR = 104

    # Network errors (200-299)
    NETWORK_ERROR = 200
    TIMEOUT = 202

    # Context errors (300-399)
    CANCELLED = 300
    DEADLINE_EXCEEDED = 301

    # Server errors (400-499)
    INVALID_STATUS = 400


class StarrError(Exception):
    """
    Base class for all starr client errors.

    Provides structured error information plus the request that failed.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None,
                 request: Optional[str] = None):
        """
        Initialize a starr error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
            request: Rendered form of the originating request
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause
        self.request = request

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.request:
            parts.append(f"Request: {self.request}")
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.request:
            result["request"] = self.request
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class NetworkError(StarrError):
    """Network-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        super().__init__(message, ErrorCode.NETWORK_ERROR, details, cause, request)


class TimeoutError(NetworkError):
    """Transport timeouts that were not caused by a context deadline."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        super().__init__(message, details, cause, request)
        self.code = ErrorCode.TIMEOUT


class CancelledError(StarrError):
    """The caller's context was cancelled."""

    def __init__(self, message: str = "context canceled", details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        super().__init__(message, ErrorCode.CANCELLED, details, cause, request)


class DeadlineExceededError(CancelledError):
    """The caller's context deadline passed."""

    def __init__(self, message: str = "context deadline exceeded", details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        super().__init__(message, details, cause, request)
        self.code = ErrorCode.DEADLINE_EXCEEDED


class InvalidStatusError(StarrError):
    """The server answered with a status outside the 2xx class."""

    def __init__(self, status_code: int, body: str = "", reason: str = "",
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        message = f"invalid status code: {status_code}"
        if reason:
            message += f" {reason}"
        details = {"body": body} if body else None
        super().__init__(message, ErrorCode.INVALID_STATUS, details, cause, request)
        self.status_code = status_code
        self.body = body


class EncodingError(StarrError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None,
                 request: Optional[str] = None):
        super().__init__(message, code, details, cause, request)


class MarshalError(EncodingError):
    """A request body could not be encoded."""

    def __init__(self, message: str = "Marshal error", details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        super().__init__(message, ErrorCode.MARSHAL_ERROR, details, cause, request)


class UnmarshalError(EncodingError):
    """A response body did not match the expected shape."""

    def __init__(self, message: str = "Unmarshal error", details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None, request: Optional[str] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause, request)


class BulkRequestError(StarrError):
    """
    One or more items of a per-item loop failed.

    ``failures`` holds ``(item, error)`` pairs in the order they were attempted.
    Items not listed succeeded.
    """

    def __init__(self, failures: List[Tuple[Any, StarrError]], message: str = "request error"):
        joined = "; ".join(f"{item}: {error}" for item, error in failures)
        super().__init__(f"{message}: {joined}", ErrorCode.REQUEST_ERROR)
        self.failures = list(failures)

    @property
    def failed_items(self) -> List[Any]:
        """Items whose request failed."""
        return [item for item, _ in self.failures]

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["failures"] = [
            {"item": item, "error": error.to_dict()} for item, error in self.failures
        ]
        return result


__all__ = [
    "ErrorCode",
    "StarrError",
    "NetworkError",
    "TimeoutError",
    "CancelledError",
    "DeadlineExceededError",
    "InvalidStatusError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "BulkRequestError",
]
