"""Store records, operation inputs and list responses."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NewType

from pydantic import BaseModel, Field

# Opaque continuation token; "" means no further pages.
Cursor = NewType("Cursor", str)


class Store(BaseModel):
    """A KV store as returned by the API."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ListStoresResponse(BaseModel):
    """One page of stores."""

    data: list[Store] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)

    @property
    def next_cursor(self) -> Cursor:
        """Cursor for the following page, or "" on the last page."""
        return Cursor(self.meta.get("next_cursor") or "")


class ListKeysResponse(BaseModel):
    """One page of keys within a store."""

    data: list[str] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)

    @property
    def next_cursor(self) -> Cursor:
        """Cursor for the following page, or "" on the last page."""
        return Cursor(self.meta.get("next_cursor") or "")


def _format_filters(cursor: str, limit: int) -> dict[str, str] | None:
    if limit == 0 and not cursor:
        return None

    params: dict[str, str] = {}
    if limit != 0:
        params["limit"] = str(limit)
    if cursor:
        params["cursor"] = cursor
    return params


@dataclass
class CreateStoreInput:
    """Input for create_store."""

    name: str = ""


@dataclass
class ListStoresInput:
    """Input for list_stores.

    Attributes:
        cursor: Continuation token from a previous page
        limit: Maximum number of stores per page (0 = server default)
    """

    cursor: str = ""
    limit: int = 0

    def format_filters(self) -> dict[str, str] | None:
        """Query parameters for the request, or None when nothing is set."""
        return _format_filters(self.cursor, self.limit)


@dataclass
class GetStoreInput:
    """Input for get_store."""

    id: str = ""


@dataclass
class DeleteStoreInput:
    """Input for delete_store."""

    id: str = ""


@dataclass
class ListKeysInput:
    """Input for list_keys.

    Attributes:
        id: Store ID (required)
        cursor: Continuation token from a previous page
        limit: Maximum number of keys per page (0 = server default)
    """

    id: str = ""
    cursor: str = ""
    limit: int = 0

    def format_filters(self) -> dict[str, str] | None:
        """Query parameters for the request, or None when nothing is set."""
        return _format_filters(self.cursor, self.limit)


@dataclass
class GetKeyInput:
    """Input for get_key."""

    id: str = ""
    key: str = ""


@dataclass
class InsertKeyInput:
    """Input for insert_key. An empty value is allowed."""

    id: str = ""
    key: str = ""
    value: str = ""


@dataclass
class DeleteKeyInput:
    """Input for delete_key."""

    id: str = ""
    key: str = ""
