"""Pytest configuration and fixtures."""

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import unquote

import httpx
import pytest

from kvstore_client.client import KVStoreClient


@dataclass
class Call:
    """A request recorded by a fake executor."""

    method: str
    path: str
    params: dict[str, str] | None
    body: Any = None


class RecordingExecutor:
    """HTTPExecutor double that records calls and replays scripted responses.

    Scripted entries may be httpx.Response objects or exceptions to raise.
    With no script left, every call answers 200 with an empty JSON object.
    """

    def __init__(self, responses: list[httpx.Response | Exception] | None = None) -> None:
        self.calls: list[Call] = []
        self.responses = list(responses or [])

    def _respond(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None,
        body: Any = None,
    ) -> httpx.Response:
        self.calls.append(Call(method, path, dict(params) if params is not None else None, body))
        if not self.responses:
            return httpx.Response(200, json={})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, path: str, params: Mapping[str, str] | None = None) -> httpx.Response:
        return self._respond("GET", path, params)

    def post_json(
        self, path: str, body: Any, params: Mapping[str, str] | None = None
    ) -> httpx.Response:
        return self._respond("POST", path, params, body)

    def put(
        self,
        path: str,
        content: str | bytes | None = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return self._respond("PUT", path, params, content)

    def delete(self, path: str, params: Mapping[str, str] | None = None) -> httpx.Response:
        return self._respond("DELETE", path, params)


class InMemoryKVServer(RecordingExecutor):
    """HTTPExecutor double that keeps key values in memory.

    Only the key endpoints are served; each path is
    ``/resources/stores/kv/{id}/keys/{key}``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.values: dict[tuple[str, str], str] = {}

    @staticmethod
    def _parse(path: str) -> tuple[str, str]:
        parts = path.split("/")
        # ["", "resources", "stores", "kv", id, "keys", key]
        return unquote(parts[4]), unquote(parts[6])

    def _respond(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None,
        body: Any = None,
    ) -> httpx.Response:
        self.calls.append(Call(method, path, dict(params) if params is not None else None, body))
        location = self._parse(path)

        if method == "PUT":
            self.values[location] = body if isinstance(body, str) else body.decode()
            return httpx.Response(200)
        if method == "GET":
            if location not in self.values:
                return httpx.Response(404, text="not found")
            return httpx.Response(200, text=self.values[location])
        if method == "DELETE":
            if self.values.pop(location, None) is None:
                return httpx.Response(404, text="not found")
            return httpx.Response(204)
        return httpx.Response(405)


def build_stores_page(names: list[str], next_cursor: str | None) -> httpx.Response:
    """Build a list-stores response page."""
    meta = {} if next_cursor is None else {"next_cursor": next_cursor}
    return httpx.Response(
        200,
        json={
            "data": [{"id": f"id-{name}", "name": name} for name in names],
            "meta": meta,
        },
    )


def build_keys_page(keys: list[str], next_cursor: str | None) -> httpx.Response:
    """Build a list-keys response page."""
    meta = {} if next_cursor is None else {"next_cursor": next_cursor}
    return httpx.Response(200, json={"data": keys, "meta": meta})


@pytest.fixture
def make_executor():
    """Factory for recording executors with scripted responses."""

    def factory(
        responses: list[httpx.Response | Exception] | None = None,
    ) -> RecordingExecutor:
        return RecordingExecutor(responses)

    return factory


@pytest.fixture
def stores_page():
    """Builder for list-stores response pages."""
    return build_stores_page


@pytest.fixture
def keys_page():
    """Builder for list-keys response pages."""
    return build_keys_page


@pytest.fixture
def executor() -> RecordingExecutor:
    """Create a recording executor with no scripted responses."""
    return RecordingExecutor()


@pytest.fixture
def client(executor: RecordingExecutor) -> KVStoreClient:
    """Create a client bound to the recording executor."""
    return KVStoreClient(executor)


@pytest.fixture
def kv_server() -> InMemoryKVServer:
    """Create a stateful in-memory key server."""
    return InMemoryKVServer()


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Sample configuration dictionary for testing."""
    return {
        "api": {
            "endpoint": "https://kv.example.com",
            "token": "test-token",
            "timeout_seconds": 5,
        },
        "logging": {"level": "DEBUG", "format": "text"},
    }
