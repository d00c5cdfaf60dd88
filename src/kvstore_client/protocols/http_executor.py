"""HTTPExecutor protocol for the HTTP transport used by the client."""

from typing import Any, Mapping, Protocol, runtime_checkable

import httpx


@runtime_checkable
class HTTPExecutor(Protocol):
    """Protocol for verb-specific HTTP calls against the storage API.

    Paths are relative to the API endpoint. Implementations return the
    response as received; status handling is left to the caller.
    """

    def get(
        self, path: str, params: Mapping[str, str] | None = None
    ) -> httpx.Response:
        """Send a GET request."""
        ...

    def post_json(
        self,
        path: str,
        body: Any,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a POST request with a JSON-encoded body."""
        ...

    def put(
        self,
        path: str,
        content: str | bytes | None = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a PUT request with a raw body."""
        ...

    def delete(
        self, path: str, params: Mapping[str, str] | None = None
    ) -> httpx.Response:
        """Send a DELETE request."""
        ...
