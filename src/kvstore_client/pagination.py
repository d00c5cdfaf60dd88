"""Cursor-based pagination over list operations.

A paginator wraps one list call and re-issues it with the cursor returned
by the previous page until the server reports no further pages::

    paginator = client.new_list_keys_paginator(ListKeysInput(id=store_id))
    while paginator.next():
        for key in paginator.keys:
            ...
    if paginator.err:
        raise paginator.err

Paginators are not safe for concurrent use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

import httpx

from kvstore_client.exceptions import KVClientError
from kvstore_client.models import (
    Cursor,
    ListKeysInput,
    ListKeysResponse,
    ListStoresInput,
    ListStoresResponse,
    Store,
)
from kvstore_client.observability import get_logger

if TYPE_CHECKING:
    from kvstore_client.client import KVStoreClient

logger = get_logger(__name__)

T = TypeVar("T")
InputT = TypeVar("InputT", ListStoresInput, ListKeysInput)

# Errors that stop a paginator. Decode errors (JSON, pydantic) are ValueErrors.
PAGINATION_ERRORS = (KVClientError, httpx.HTTPError, ValueError)


@dataclass(frozen=True)
class Ready:
    """More pages may follow; ``cursor`` is sent with the next call."""

    cursor: Cursor = Cursor("")


class _Finished:
    """No further pages. Terminal."""

    _instance: "_Finished | None" = None

    def __new__(cls) -> "_Finished":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FINISHED"


FINISHED = _Finished()

PaginatorState = Ready | _Finished


class Paginator(ABC, Generic[InputT, T]):
    """Base class for cursor paginators.

    Subclasses implement ``_fetch`` to issue one list call with the given
    input and return ``(items, next_cursor)``.
    """

    def __init__(self, client: "KVStoreClient", input: InputT) -> None:
        """Initialize paginator.

        Args:
            client: Client used for each list call (not owned)
            input: Fixed list parameters; its cursor is replaced per call
        """
        self.client = client
        self.input = input
        self.state: PaginatorState = Ready()
        self._err: Exception | None = None
        self._page: list[T] = []

    @abstractmethod
    def _fetch(self, input: InputT) -> tuple[list[T], Cursor]:
        """Issue one list call."""
        ...

    @property
    def finished(self) -> bool:
        """True once no further pages will be fetched."""
        return self.state is FINISHED

    @property
    def page(self) -> list[T]:
        """Items from the most recent page, in server order."""
        return self._page

    @property
    def err(self) -> Exception | None:
        """The error that stopped pagination, if any."""
        return self._err

    def next(self) -> bool:
        """Fetch the next page.

        Returns:
            True if a page is available via ``page``. False once pagination
            is finished, either because the last page was already returned
            or because a call failed (see ``err``).
        """
        state = self.state
        if not isinstance(state, Ready):
            self._page = []
            return False

        try:
            items, next_cursor = self._fetch(replace(self.input, cursor=state.cursor))
        except PAGINATION_ERRORS as e:
            logger.warning(
                "Pagination stopped on error",
                context={"paginator": type(self).__name__, "cursor": state.cursor},
                error=e,
            )
            self._err = e
            self._page = []
            self.state = FINISHED
            return False

        self._page = items
        self.state = Ready(next_cursor) if next_cursor else FINISHED
        return True

    def pages(self) -> Iterator[list[T]]:
        """Yield each page until pagination finishes.

        Check ``err`` afterwards to tell exhaustion from failure.
        """
        while self.next():
            yield self.page

    def __iter__(self) -> Iterator[T]:
        """Yield every item across all pages.

        Re-raises the error that stopped pagination, after the items that
        were fetched successfully.
        """
        for page in self.pages():
            yield from page
        if self._err is not None:
            raise self._err

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self.state!r}, err={self._err!r})"


class ListStoresPaginator(Paginator[ListStoresInput, Store]):
    """Paginates over all stores in the account."""

    def _fetch(self, input: ListStoresInput) -> tuple[list[Store], Cursor]:
        response: ListStoresResponse = self.client.list_stores(input)
        return response.data, response.next_cursor

    @property
    def stores(self) -> list[Store]:
        """Stores from the most recent page."""
        return self.page


class ListKeysPaginator(Paginator[ListKeysInput, str]):
    """Paginates over all keys in one store."""

    def _fetch(self, input: ListKeysInput) -> tuple[list[str], Cursor]:
        response: ListKeysResponse = self.client.list_keys(input)
        return response.data, response.next_cursor

    @property
    def keys(self) -> list[str]:
        """Keys from the most recent page."""
        return self.page
