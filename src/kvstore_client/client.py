"""Client for the KV store resources API.

Each operation validates its input, issues one request through an
HTTPExecutor and decodes the response. Validation failures never reach
the transport.
"""

from typing import TYPE_CHECKING, Any

from kvstore_client.decoding import check_response, decode_json, decode_text, expect_status
from kvstore_client.exceptions import MissingIDError, MissingKeyError, MissingNameError
from kvstore_client.models import (
    CreateStoreInput,
    DeleteKeyInput,
    DeleteStoreInput,
    GetKeyInput,
    GetStoreInput,
    InsertKeyInput,
    ListKeysInput,
    ListKeysResponse,
    ListStoresInput,
    ListStoresResponse,
    Store,
)
from kvstore_client.observability import configure_logging, emit_counter, get_logger
from kvstore_client.pagination import ListKeysPaginator, ListStoresPaginator
from kvstore_client.protocols import HTTPExecutor
from kvstore_client.transport import HTTPXExecutor
from kvstore_client.utils.validation import path_segment, require

if TYPE_CHECKING:
    from kvstore_client.config import Config

logger = get_logger(__name__)

STORES_PATH = "/resources/stores/kv"

NO_CONTENT = 204


def _store_path(store_id: str) -> str:
    return f"{STORES_PATH}/{path_segment(store_id)}"


def _key_path(store_id: str, key: str) -> str:
    return f"{_store_path(store_id)}/keys/{path_segment(key)}"


class KVStoreClient:
    """Operations on KV stores and the keys they contain.

    Example:
        with KVStoreClient.from_config(Config.from_file("kv.yaml")) as client:
            store = client.create_store(CreateStoreInput(name="sessions"))
            client.insert_key(InsertKeyInput(id=store.id, key="k", value="v"))
            value = client.get_key(GetKeyInput(id=store.id, key="k"))
    """

    def __init__(self, http: HTTPExecutor, owns_http: bool = False) -> None:
        """Initialize client.

        Args:
            http: Transport used for every request
            owns_http: Whether close() should close the transport. False for
                a shared transport the caller manages.
        """
        self.http = http
        self.owns_http = owns_http

    @classmethod
    def from_config(cls, config: "Config") -> "KVStoreClient":
        """Build a client and its httpx transport from configuration.

        Also applies the logging settings.
        """
        configure_logging(config.logging.level, config.logging.format)
        return cls(HTTPXExecutor.from_config(config), owns_http=True)

    def close(self) -> None:
        """Close the transport if this client owns it."""
        if not self.owns_http:
            return
        close = getattr(self.http, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "KVStoreClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # Stores

    def create_store(self, input: CreateStoreInput) -> Store:
        """Create a new store.

        Raises:
            MissingNameError: If no name is given
            HTTPError: If the server rejects the request
        """
        require(input.name, MissingNameError)

        response = self.http.post_json(STORES_PATH, {"name": input.name})
        store = decode_json(response, Store)

        logger.info("Store created", context={"store_id": store.id, "name": store.name})
        emit_counter("kvstore_client.store.created")
        return store

    def list_stores(self, input: ListStoresInput | None = None) -> ListStoresResponse:
        """Fetch one page of stores."""
        params = input.format_filters() if input is not None else None
        response = self.http.get(STORES_PATH, params)
        return decode_json(response, ListStoresResponse)

    def new_list_stores_paginator(
        self, input: ListStoresInput | None = None
    ) -> ListStoresPaginator:
        """Create a paginator over all stores."""
        return ListStoresPaginator(self, input or ListStoresInput())

    def get_store(self, input: GetStoreInput) -> Store:
        """Fetch a single store.

        Raises:
            MissingIDError: If no store ID is given
            NotFoundError: If the store does not exist
        """
        require(input.id, MissingIDError)

        response = self.http.get(_store_path(input.id))
        return decode_json(response, Store)

    def delete_store(self, input: DeleteStoreInput) -> None:
        """Delete a store and every key in it.

        Raises:
            MissingIDError: If no store ID is given
            HTTPError: Unless the server answers 204 No Content
        """
        require(input.id, MissingIDError)

        response = self.http.delete(_store_path(input.id))
        expect_status(response, NO_CONTENT)

        logger.info("Store deleted", context={"store_id": input.id})
        emit_counter("kvstore_client.store.deleted")

    # Keys

    def list_keys(self, input: ListKeysInput) -> ListKeysResponse:
        """Fetch one page of keys from a store.

        Raises:
            MissingIDError: If no store ID is given
        """
        require(input.id, MissingIDError)

        response = self.http.get(f"{_store_path(input.id)}/keys", input.format_filters())
        return decode_json(response, ListKeysResponse)

    def new_list_keys_paginator(self, input: ListKeysInput) -> ListKeysPaginator:
        """Create a paginator over all keys in a store."""
        return ListKeysPaginator(self, input)

    def get_key(self, input: GetKeyInput) -> str:
        """Fetch the raw value stored under a key.

        Raises:
            MissingIDError: If no store ID is given
            MissingKeyError: If no key is given
            NotFoundError: If the key does not exist
        """
        require(input.id, MissingIDError)
        require(input.key, MissingKeyError)

        response = self.http.get(_key_path(input.id, input.key))
        return decode_text(response)

    def insert_key(self, input: InsertKeyInput) -> None:
        """Insert or overwrite a key's value.

        The value is sent as the raw request body. An empty value is stored
        as-is.

        Raises:
            MissingIDError: If no store ID is given
            MissingKeyError: If no key is given
        """
        require(input.id, MissingIDError)
        require(input.key, MissingKeyError)

        response = self.http.put(_key_path(input.id, input.key), input.value)
        check_response(response)

    def delete_key(self, input: DeleteKeyInput) -> None:
        """Delete a key from a store.

        Raises:
            MissingIDError: If no store ID is given
            MissingKeyError: If no key is given
            HTTPError: Unless the server answers 204 No Content
        """
        require(input.id, MissingIDError)
        require(input.key, MissingKeyError)

        response = self.http.delete(_key_path(input.id, input.key))
        expect_status(response, NO_CONTENT)
