"""Utility modules."""

from kvstore_client.utils.validation import path_segment, require

__all__ = ["path_segment", "require"]
