"""kvstore-client - A client for remote KV store resources."""

from kvstore_client.client import KVStoreClient
from kvstore_client.config import Config
from kvstore_client.exceptions import (
    ConfigError,
    HTTPError,
    KVClientError,
    MissingFieldError,
    MissingIDError,
    MissingKeyError,
    MissingNameError,
    NotFoundError,
)
from kvstore_client.models import (
    CreateStoreInput,
    Cursor,
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
from kvstore_client.observability import (
    LogLevel,
    StructuredLogger,
    Timer,
    configure_logging,
    emit_counter,
    emit_metric,
    emit_timer,
    get_logger,
    register_metric_callback,
)
from kvstore_client.pagination import (
    FINISHED,
    ListKeysPaginator,
    ListStoresPaginator,
    Paginator,
    Ready,
)
from kvstore_client.protocols import HTTPExecutor
from kvstore_client.transport import HTTPXExecutor

__version__ = "0.1.0"
__all__ = [
    # Core
    "Config",
    "HTTPExecutor",
    "HTTPXExecutor",
    "KVStoreClient",
    # Models
    "CreateStoreInput",
    "Cursor",
    "DeleteKeyInput",
    "DeleteStoreInput",
    "GetKeyInput",
    "GetStoreInput",
    "InsertKeyInput",
    "ListKeysInput",
    "ListKeysResponse",
    "ListStoresInput",
    "ListStoresResponse",
    "Store",
    # Pagination
    "FINISHED",
    "ListKeysPaginator",
    "ListStoresPaginator",
    "Paginator",
    "Ready",
    # Errors
    "ConfigError",
    "HTTPError",
    "KVClientError",
    "MissingFieldError",
    "MissingIDError",
    "MissingKeyError",
    "MissingNameError",
    "NotFoundError",
    # Observability
    "LogLevel",
    "StructuredLogger",
    "Timer",
    "configure_logging",
    "emit_counter",
    "emit_metric",
    "emit_timer",
    "get_logger",
    "register_metric_callback",
]
