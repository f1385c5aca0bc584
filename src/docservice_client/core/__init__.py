"""
Core pure functions for the client.

This package contains I/O-free functions for revision ids, request URLs,
response parsing and retry decisions.
"""

from .files import get_file_name, get_file_extension

from .revision import generate_revision_id, string_hash

from .request import (
    resolve_conversion_request,
    build_convert_url,
    build_request_url,
    build_storage_url,
)

from .response import (
    parse_response,
    describe_error_code,
    resolve_result_uri,
)

from .utils import (
    build_upload_headers,
    classify_request_exception,
    should_retry_request,
)

__all__ = [
    # File name functions
    "get_file_name",
    "get_file_extension",
    # Revision functions
    "generate_revision_id",
    "string_hash",
    # Request functions
    "resolve_conversion_request",
    "build_convert_url",
    "build_request_url",
    "build_storage_url",
    # Response functions
    "parse_response",
    "describe_error_code",
    "resolve_result_uri",
    # Transport functions
    "build_upload_headers",
    "classify_request_exception",
    "should_retry_request",
]
