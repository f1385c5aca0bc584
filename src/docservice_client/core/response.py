"""
Pure functions for parsing conversion service answers.

The service answers both conversion and storage requests with a small XML
progress envelope::

    <FileResult>
        <Error>-4</Error>
        <EndConvert>False</EndConvert>
        <Percent>45</Percent>
        <FileUrl>https://...</FileUrl>
    </FileResult>
"""

from typing import Optional
from xml.etree import ElementTree as ET

from ..exceptions import MalformedResponseError, ServiceError
from ..models import Complete, ConversionProgress, ErrorCode, Failed, InProgress

ERROR_MESSAGE_TEMPLATE = "Error occurred in the ConvertService: "

ERROR_DESCRIPTIONS = {
    ErrorCode.VKEY: "Error document VKey",
    ErrorCode.REQUEST: "Error document request",
    ErrorCode.DATABASE: "Error database",
    ErrorCode.UNEXPECTED_GUID: "Error unexpected guid",
    ErrorCode.DOWNLOAD: "Error download error",
    ErrorCode.CONVERSION: "Error convertation error",
    ErrorCode.CONVERSION_TIMEOUT: "Error convertation timeout",
    ErrorCode.CONVERSION_UNKNOWN: "Error convertation unknown",
}


def describe_error_code(code: int) -> str:
    """Human-readable message for a service error code."""
    try:
        return ERROR_MESSAGE_TEMPLATE + ERROR_DESCRIPTIONS[ErrorCode(code)]
    except ValueError:
        return f"ErrorCode = {code}"


def service_error_from(failed: Failed) -> ServiceError:
    return ServiceError(describe_error_code(failed.code), failed.code)


def _find_text(root: ET.Element, tag: str) -> Optional[str]:
    # Matched by local name anywhere below the root, ignoring namespaces.
    for element in root.iter():
        if element is not root and element.tag.rsplit("}", 1)[-1] == tag:
            return "".join(element.itertext())
    return None


def _parse_int(text: str, field: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise MalformedResponseError(
            f"Invalid answer format: {field} is not an integer", {field: text}
        )


def parse_response(xml_body: str) -> ConversionProgress:
    """
    Parse the service's progress envelope.

    Args:
        xml_body: Raw response body

    Returns:
        InProgress, Complete or Failed

    Raises:
        MalformedResponseError: If the body is not XML or required
            elements are missing
    """
    # A body without a root element fails to parse as well.
    try:
        root = ET.fromstring(xml_body)
    except ET.ParseError as e:
        raise MalformedResponseError("Invalid answer format", {"reason": str(e)})

    error_text = _find_text(root, "Error")
    if error_text and error_text.strip():
        code = _parse_int(error_text, "Error")
        if code != 0:
            return Failed(code=code)

    end_convert = _find_text(root, "EndConvert")
    if end_convert is None:
        raise MalformedResponseError("Invalid answer format: missing EndConvert")

    if end_convert.strip().lower() == "true":
        file_url = _find_text(root, "FileUrl")
        if file_url is None:
            raise MalformedResponseError("Invalid answer format: missing FileUrl")
        return Complete(result_uri=file_url)

    percent_text = _find_text(root, "Percent")
    if percent_text is None:
        raise MalformedResponseError("Invalid answer format: missing Percent")

    percent = _parse_int(percent_text, "Percent")
    return InProgress(percent=max(0, min(percent, 99)))


def resolve_result_uri(progress: ConversionProgress) -> str:
    """Map a progress value to the caller-facing URI, "" while in progress."""
    if isinstance(progress, Failed):
        raise service_error_from(progress)
    if isinstance(progress, Complete):
        return progress.result_uri
    return ""
