"""Protocol interfaces for pluggable collaborators."""

from kvstore_client.protocols.http_executor import HTTPExecutor

__all__ = ["HTTPExecutor"]
