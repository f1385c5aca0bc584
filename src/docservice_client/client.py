import asyncio
import io
from typing import AsyncIterator, BinaryIO, Optional, Union

import httpx

from .config import Settings, get_logger, get_settings
from .core.request import build_request_url, build_storage_url, resolve_conversion_request
from .core.response import parse_response, resolve_result_uri, service_error_from
from .core.utils import (
    MAX_ATTEMPTS,
    UPLOAD_CHUNK_SIZE,
    build_upload_headers,
    classify_request_exception,
    should_retry_request,
)
from .exceptions import (
    BadRequestError,
    MalformedResponseError,
    NoResponseError,
    RequestTimeoutError,
)
from .models import ConversionProgress, Failed, UploadRequest


async def iter_chunks(
    stream: BinaryIO, chunk_size: int = UPLOAD_CHUNK_SIZE
) -> AsyncIterator[bytes]:
    """Yield a binary stream in fixed-size chunks, reading off the event loop."""
    while True:
        chunk = await asyncio.to_thread(stream.read, chunk_size)
        if not chunk:
            break
        yield chunk


class ConversionClient:
    """
    Client for the document conversion and storage service.

    Every operation is a single stateless round trip. Callers poll
    ``request_conversion`` until it returns a non-empty URI.

    Example:
        >>> client = ConversionClient(get_settings())
        >>> uri = await client.request_conversion(
        ...     "https://example.com/report.docx", ".docx", ".pdf"
        ... )
        >>> if not uri:
        ...     print("still converting")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self.logger = get_logger("client")

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout_seconds),
            transport=self._transport,
        )

    async def check_conversion(
        self,
        source_uri: str,
        from_extension: Optional[str],
        to_extension: str,
        revision_id: Optional[str] = None,
        is_async: bool = False,
    ) -> ConversionProgress:
        """
        Ask the converter for the state of a conversion.

        Args:
            source_uri: Publicly reachable URI of the source document
            from_extension: Source extension, taken from the URI when empty
            to_extension: Requested output extension
            revision_id: Cache key of the document version; defaults to the URI
            is_async: Return immediately instead of waiting for the result

        Returns:
            InProgress or Complete

        Raises:
            ServiceError: If the service reports an error code
            MalformedResponseError: If the answer cannot be parsed
            RequestTimeoutError: If every attempt timed out
            BadRequestError: If the service could not be reached
            NoResponseError: If the service returned an empty answer
        """
        request = resolve_conversion_request(
            source_uri, from_extension, to_extension, revision_id, is_async
        )
        url = build_request_url(self.settings.converter_url, request)

        self.logger.info(
            "Requesting conversion of %s to %s (key=%s)",
            source_uri,
            request.target_extension,
            request.revision_id,
        )

        body = await self._send_convert_request(url)
        return self._parse_answer(body, url)

    def _parse_answer(self, body: str, url: str) -> ConversionProgress:
        """Parse a service answer, raising and logging every failure."""
        if not body:
            self.logger.error("No answer from %s", url)
            raise NoResponseError("Could not get an answer", {"url": url})

        try:
            progress = parse_response(body)
        except MalformedResponseError as e:
            self.logger.error("Unreadable answer from %s: %s", url, e)
            raise

        if isinstance(progress, Failed):
            error = service_error_from(progress)
            self.logger.error("Request to %s failed: %s", url, error)
            raise error

        return progress

    async def request_conversion(
        self,
        source_uri: str,
        from_extension: Optional[str],
        to_extension: str,
        revision_id: Optional[str] = None,
        is_async: bool = False,
    ) -> str:
        """Return the converted document URI, or "" while still converting."""
        progress = await self.check_conversion(
            source_uri, from_extension, to_extension, revision_id, is_async
        )
        return resolve_result_uri(progress)

    async def _send_convert_request(self, url: str) -> str:
        # Each attempt sends a new request; httpx drops a failed connection
        # from the pool so the retry opens a fresh one.
        async with self._create_client() as client:
            attempt = 0
            while True:
                attempt += 1
                try:
                    response = await client.get(url, follow_redirects=True)
                    response.raise_for_status()
                    break
                except (httpx.HTTPError, OSError) as e:
                    if should_retry_request(attempt, MAX_ATTEMPTS, e):
                        self.logger.warning(
                            "Converter timed out (attempt %d of %d), retrying",
                            attempt,
                            MAX_ATTEMPTS,
                        )
                        continue

                    if classify_request_exception(e) == "timeout":
                        self.logger.error(
                            "Converter timed out after %d attempts", attempt
                        )
                        raise RequestTimeoutError(
                            "Timeout", {"url": url, "attempts": attempt}
                        ) from e

                    self.logger.error("Converter request failed: %s", e)
                    raise BadRequestError(
                        "Bad Request", {"url": url, "reason": str(e)}
                    ) from e

            return response.text

    async def upload_document(
        self,
        content: Union[bytes, BinaryIO],
        content_length: int,
        content_type: Optional[str] = None,
        revision_id: str = "",
    ) -> str:
        """
        Upload raw document bytes to the storage endpoint.

        The body is streamed in fixed-size chunks. Uploads are not retried.

        Returns:
            The stored document URI, or "" if the service is still processing
        """
        request = UploadRequest(
            content=content,
            content_length=content_length,
            content_type=content_type,
            revision_id=revision_id,
        )
        url = build_storage_url(self.settings.storage_url, request.revision_id)
        headers = build_upload_headers(request.content_type, request.content_length)

        stream = request.content
        if isinstance(stream, (bytes, bytearray)):
            stream = io.BytesIO(stream)

        self.logger.info(
            "Uploading %d bytes (%s) to storage", content_length, headers["Content-Type"]
        )

        async with self._create_client() as client:
            try:
                response = await client.post(
                    url,
                    content=iter_chunks(stream),
                    headers=headers,
                    follow_redirects=False,
                )
                response.raise_for_status()
            except httpx.TimeoutException as e:
                self.logger.error("Storage upload timed out: %s", e)
                raise RequestTimeoutError("Timeout", {"url": url}) from e
            except (httpx.HTTPError, OSError) as e:
                self.logger.error("Storage upload failed: %s", e)
                raise BadRequestError("Bad Request", {"url": url, "reason": str(e)}) from e

            body = response.text

        return resolve_result_uri(self._parse_answer(body, url))

    def check_conversion_sync(
        self,
        source_uri: str,
        from_extension: Optional[str],
        to_extension: str,
        revision_id: Optional[str] = None,
        is_async: bool = False,
    ) -> ConversionProgress:
        """Synchronous version of check_conversion."""
        return asyncio.run(
            self.check_conversion(
                source_uri, from_extension, to_extension, revision_id, is_async
            )
        )

    def request_conversion_sync(
        self,
        source_uri: str,
        from_extension: Optional[str],
        to_extension: str,
        revision_id: Optional[str] = None,
        is_async: bool = False,
    ) -> str:
        """Synchronous version of request_conversion."""
        return asyncio.run(
            self.request_conversion(
                source_uri, from_extension, to_extension, revision_id, is_async
            )
        )

    def upload_document_sync(
        self,
        content: Union[bytes, BinaryIO],
        content_length: int,
        content_type: Optional[str] = None,
        revision_id: str = "",
    ) -> str:
        """Synchronous version of upload_document."""
        return asyncio.run(
            self.upload_document(content, content_length, content_type, revision_id)
        )
