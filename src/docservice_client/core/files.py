"""
File name helpers for document URIs.
"""

from urllib.parse import urlsplit


def get_file_name(uri: str) -> str:
    """Return the last path segment of a URI or path, without query or fragment."""
    if not uri:
        return ""

    path = urlsplit(uri).path if "://" in uri else uri.split("?", 1)[0].split("#", 1)[0]
    return path.rsplit("/", 1)[-1]


def get_file_extension(uri: str) -> str:
    """Return the lower-cased extension including the dot, or "" if there is none."""
    file_name = get_file_name(uri)
    index = file_name.rfind(".")
    if index == -1:
        return ""
    return file_name[index:].lower()
