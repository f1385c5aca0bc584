"""
Revision id generation for conversion and storage requests.
"""

import re

MAX_REVISION_ID_LENGTH = 20

_DISALLOWED_CHARS = re.compile(r"[^0-9\-.a-zA-Z_=]")


def utf16_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(value.encode("utf-16-be", "surrogatepass")) // 2


def string_hash(value: str) -> int:
    """Signed 32-bit ``s[0]*31^(n-1) + ... + s[n-1]`` hash over UTF-16 code units."""
    encoded = value.encode("utf-16-be", "surrogatepass")
    result = 0
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        result = (31 * result + unit) & 0xFFFFFFFF
    return result - (1 << 32) if result & 0x80000000 else result


def generate_revision_id(expected_key: str) -> str:
    """
    Derive a short cache key the conversion service accepts.

    Keys longer than the limit are replaced by their hash before the
    disallowed characters are replaced with ``_`` and the result truncated.
    """
    if utf16_length(expected_key) > MAX_REVISION_ID_LENGTH:
        expected_key = str(string_hash(expected_key))

    key = _DISALLOWED_CHARS.sub("_", expected_key)

    return key[:MAX_REVISION_ID_LENGTH]
