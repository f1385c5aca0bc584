"""
Data models for conversion requests and progress results.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Optional, Union


class ErrorCode(IntEnum):
    """
    Error codes reported by the conversion service in the ``Error`` element.

    Zero means no error. Any value not listed here is surfaced with its raw
    code by ServiceError.
    """

    VKEY = -8
    REQUEST = -7
    DATABASE = -6
    UNEXPECTED_GUID = -5
    DOWNLOAD = -4
    CONVERSION = -3
    CONVERSION_TIMEOUT = -2
    CONVERSION_UNKNOWN = -1


@dataclass(frozen=True)
class ConversionRequest:
    """
    Fully resolved parameters of a single conversion request.

    Attributes:
        source_uri: Publicly reachable URI of the source document
        source_extension: Extension of the source document (e.g. ".docx")
        target_extension: Extension of the requested output (e.g. ".pdf")
        title: Document title passed to the service
        revision_id: Sanitized cache key, at most 20 characters
        is_async: Ask the service to answer before conversion finishes
    """

    source_uri: str
    source_extension: str
    target_extension: str
    title: str
    revision_id: str
    is_async: bool = False


@dataclass(frozen=True)
class UploadRequest:
    """
    Raw document upload to the storage endpoint.

    ``content`` may be bytes or any binary stream with a ``read`` method.
    """

    content: Union[bytes, BinaryIO]
    content_length: int
    content_type: Optional[str]
    revision_id: str


@dataclass(frozen=True)
class InProgress:
    """Conversion is still running."""

    percent: int


@dataclass(frozen=True)
class Complete:
    """Conversion finished; the result is available at ``result_uri``."""

    result_uri: str

    @property
    def percent(self) -> int:
        return 100


@dataclass(frozen=True)
class Failed:
    """The service reported a non-zero error code."""

    code: int

    @property
    def cause(self) -> Optional[ErrorCode]:
        try:
            return ErrorCode(self.code)
        except ValueError:
            return None


ConversionProgress = Union[InProgress, Complete, Failed]
