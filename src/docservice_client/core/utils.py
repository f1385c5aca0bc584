"""
Utility functions for HTTP round trips to the conversion service.
"""

from typing import Dict, Optional

import httpx

MAX_ATTEMPTS = 3
UPLOAD_CHUNK_SIZE = 1024
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def build_upload_headers(content_type: Optional[str], content_length: int) -> Dict[str, str]:
    """Build headers for a raw storage upload."""
    return {
        "Content-Type": content_type or DEFAULT_CONTENT_TYPE,
        "charset": "utf-8",
        "Content-Length": str(content_length),
        "Cache-Control": "no-cache",
    }


def classify_request_exception(exception: Exception) -> str:
    """Classify exception type for error handling logic."""
    if isinstance(exception, httpx.TimeoutException):
        return "timeout"
    elif isinstance(exception, httpx.HTTPStatusError):
        return "status"
    elif isinstance(
        exception, (httpx.NetworkError, httpx.TransportError, ConnectionError, OSError)
    ):
        return "network"
    else:
        return "unknown"


def should_retry_request(attempt: int, max_attempts: int, exception: Exception) -> bool:
    """Only timeouts are retried, and only while attempts remain."""
    if attempt >= max_attempts:
        return False

    return classify_request_exception(exception) == "timeout"
