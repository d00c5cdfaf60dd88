"""KV store client exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class KVClientError(Exception):
    """Base exception for kvstore-client."""

    pass


class ConfigError(KVClientError):
    """Configuration error."""

    pass


class MissingFieldError(KVClientError, ValueError):
    """A required input field was empty.

    Raised before any request is sent.
    """

    field_name: str = "field"

    def __init__(self, field_name: str | None = None) -> None:
        if field_name is not None:
            self.field_name = field_name
        super().__init__(f"missing required field: {self.field_name}")


class MissingNameError(MissingFieldError):
    """Store name is required."""

    field_name = "name"


class MissingIDError(MissingFieldError):
    """Store ID is required."""

    field_name = "id"


class MissingKeyError(MissingFieldError):
    """Key is required."""

    field_name = "key"


class HTTPError(KVClientError):
    """The server answered with an unexpected status code.

    The response is kept so callers can inspect the status and body.
    """

    def __init__(self, response: "httpx.Response") -> None:
        self.response = response
        self.status_code = response.status_code
        self.body = response.text

        try:
            request = response.request
            target = f"{request.method} {request.url.path}"
        except RuntimeError:
            target = "request"

        message = f"{target} failed with status {self.status_code}"
        if self.body:
            message = f"{message}: {self.body}"
        super().__init__(message)


class NotFoundError(HTTPError):
    """Resource not found (404)."""

    pass


def http_error(response: "httpx.Response") -> HTTPError:
    """Build the most specific HTTPError for a response."""
    if response.status_code == 404:
        return NotFoundError(response)
    return HTTPError(response)
