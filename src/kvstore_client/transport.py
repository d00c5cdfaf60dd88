"""httpx-backed HTTP transport for the storage API."""

from typing import TYPE_CHECKING, Any, Mapping

import httpx

from kvstore_client.exceptions import ConfigError
from kvstore_client.observability import Timer, emit_timer, get_logger

if TYPE_CHECKING:
    from kvstore_client.config import Config

logger = get_logger(__name__)


class HTTPXExecutor:
    """HTTP transport backed by a synchronous ``httpx.Client``.

    Implements the HTTPExecutor protocol. Connection failures and timeouts
    surface as ``httpx`` exceptions; status codes are not checked here.
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        auth_header: str = "Fastly-Key",
        timeout: float = 30.0,
        user_agent: str = "kvstore-client/0.1.0",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            endpoint: Base URL of the API
            token: API token sent on every request
            auth_header: Header carrying the token
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (used for testing)
        """
        if not token:
            raise ConfigError("HTTPXExecutor requires an API token")

        self.endpoint = endpoint.rstrip("/")
        self._client = httpx.Client(
            base_url=self.endpoint,
            headers={
                auth_header: token,
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: "Config", transport: httpx.BaseTransport | None = None
    ) -> "HTTPXExecutor":
        """Build an executor from configuration.

        Raises:
            ConfigError: If no API token is configured
        """
        api = config.api
        if not api.token:
            raise ConfigError("api.token is required")

        return cls(
            endpoint=api.endpoint,
            token=api.token,
            auth_header=api.auth_header,
            timeout=api.timeout_seconds,
            user_agent=api.user_agent,
            transport=transport,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        with Timer() as t:
            response = self._client.request(method, path, params=params, **kwargs)

        logger.debug(
            f"{method} {path}",
            context={"status_code": response.status_code},
            duration_ms=t.duration_ms,
        )
        emit_timer(
            "kvstore_client.request",
            t.duration_ms,
            {"method": method, "status_code": response.status_code},
        )
        return response

    def get(
        self, path: str, params: Mapping[str, str] | None = None
    ) -> httpx.Response:
        """Send a GET request."""
        return self._request("GET", path, params)

    def post_json(
        self,
        path: str,
        body: Any,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a POST request with a JSON body."""
        return self._request("POST", path, params, json=body)

    def put(
        self,
        path: str,
        content: str | bytes | None = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a PUT request with a raw body."""
        return self._request("PUT", path, params, content=content)

    def delete(
        self, path: str, params: Mapping[str, str] | None = None
    ) -> httpx.Response:
        """Send a DELETE request."""
        return self._request("DELETE", path, params)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def __enter__(self) -> "HTTPXExecutor":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
