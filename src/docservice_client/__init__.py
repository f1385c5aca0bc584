"""
Document Service Client

Python client for submitting document conversions to a remote conversion
service and uploading documents to its storage endpoint.
"""

from .client import ConversionClient
from .config import Settings, get_settings
from .models import (
    ConversionRequest,
    UploadRequest,
    ErrorCode,
    ConversionProgress,
    InProgress,
    Complete,
    Failed,
)
from .exceptions import (
    ConversionError,
    MalformedResponseError,
    ServiceError,
    TransportError,
    TransportKind,
    RequestTimeoutError,
    BadRequestError,
    NoResponseError,
)

__version__ = "1.0.0"

__all__ = [
    "ConversionClient",
    "Settings",
    "get_settings",
    "ConversionRequest",
    "UploadRequest",
    "ErrorCode",
    "ConversionProgress",
    "InProgress",
    "Complete",
    "Failed",
    "ConversionError",
    "MalformedResponseError",
    "ServiceError",
    "TransportError",
    "TransportKind",
    "RequestTimeoutError",
    "BadRequestError",
    "NoResponseError",
]
