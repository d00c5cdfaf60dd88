"""Input validation utilities."""

from urllib.parse import quote

from kvstore_client.exceptions import MissingFieldError


def require(value: str, error: type[MissingFieldError]) -> str:
    """Ensure a required string field is set.

    Args:
        value: The field value
        error: Exception class to raise when the value is empty

    Returns:
        The value (unchanged)

    Raises:
        MissingFieldError: If the value is empty
    """
    if not value:
        raise error()
    return value


def path_segment(value: str) -> str:
    """Escape a value for use as a single URL path segment.

    Slashes are escaped too, so a key such as ``a/b`` stays one segment.
    The dot segments ``.`` and ``..`` are escaped as ``%2E`` so URL
    normalization cannot collapse them into a parent path.
    """
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe="")
