"""
Custom exceptions for the document service client.
"""

from enum import Enum
from typing import Dict, Any, Optional

from .models import ErrorCode


class ConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedResponseError(ConversionError):
    """Raised when the service answer is not a valid progress envelope."""

    pass


class ServiceError(ConversionError):
    """Raised when the conversion service reports an error code."""

    def __init__(
        self, message: str, code: int, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.code = code

    @property
    def cause(self) -> Optional[ErrorCode]:
        """The mapped ErrorCode, or None when the code is not a known one."""
        try:
            return ErrorCode(self.code)
        except ValueError:
            return None


class TransportKind(str, Enum):
    TIMEOUT = "timeout"
    BAD_REQUEST = "bad_request"
    NO_RESPONSE = "no_response"


class TransportError(ConversionError):
    """Raised when the HTTP round trip itself fails."""

    kind: TransportKind = TransportKind.BAD_REQUEST


class RequestTimeoutError(TransportError):
    """Raised when every attempt to reach the service timed out."""

    kind = TransportKind.TIMEOUT


class BadRequestError(TransportError):
    """Raised when the service could not be reached or rejected the request."""

    kind = TransportKind.BAD_REQUEST


class NoResponseError(TransportError):
    """Raised when the service returned no answer body."""

    kind = TransportKind.NO_RESPONSE
