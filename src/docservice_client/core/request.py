"""
Pure functions for building conversion service requests.

Functions for resolving request parameters and assembling the converter
and storage URLs without I/O dependencies.
"""

import uuid
from typing import Optional
from urllib.parse import quote_plus

from ..models import ConversionRequest
from .files import get_file_extension, get_file_name
from .revision import generate_revision_id

CONVERT_PARAMS = "?url={url}&outputtype={outputtype}&filetype={filetype}&title={title}&key={key}"


def strip_extension_dots(extension: str) -> str:
    return extension.replace(".", "")


def resolve_conversion_request(
    source_uri: str,
    from_extension: Optional[str],
    to_extension: str,
    revision_id: Optional[str] = None,
    is_async: bool = False,
) -> ConversionRequest:
    """
    Fill in the defaults for a conversion request.

    Args:
        source_uri: URI of the document to convert
        from_extension: Source extension; taken from the URI when empty
        to_extension: Requested output extension
        revision_id: Cache key; the source URI is used when empty
        is_async: Whether the service should answer before finishing

    Returns:
        ConversionRequest with title and sanitized revision id resolved
    """
    from_extension = from_extension or get_file_extension(source_uri)

    title = get_file_name(source_uri) or str(uuid.uuid4())

    revision_id = generate_revision_id(revision_id or source_uri)

    return ConversionRequest(
        source_uri=source_uri,
        source_extension=from_extension,
        target_extension=to_extension,
        title=title,
        revision_id=revision_id,
        is_async=is_async,
    )


def build_convert_url(
    base: str,
    source_uri: str,
    from_extension: str,
    to_extension: str,
    title: str,
    revision_id: str,
    is_async: bool = False,
) -> str:
    """Build the converter GET URL. Only the source URI is encoded."""
    url = base + CONVERT_PARAMS.format(
        url=quote_plus(source_uri, safe=""),
        outputtype=strip_extension_dots(to_extension),
        filetype=strip_extension_dots(from_extension),
        title=title,
        key=revision_id,
    )

    if is_async:
        url += "&async=true"

    return url


def build_request_url(base: str, request: ConversionRequest) -> str:
    """Build the converter URL for an already resolved request."""
    return build_convert_url(
        base,
        request.source_uri,
        request.source_extension,
        request.target_extension,
        request.title,
        request.revision_id,
        request.is_async,
    )


def build_storage_url(base: str, revision_id: str) -> str:
    """Build the storage POST URL; only the key is populated."""
    return base + CONVERT_PARAMS.format(
        url="", outputtype="", filetype="", title="", key=revision_id
    )
