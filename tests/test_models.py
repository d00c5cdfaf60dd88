"""Tests for input and response models."""

import pydantic
import pytest

from kvstore_client.models import (
    ListKeysInput,
    ListKeysResponse,
    ListStoresInput,
    ListStoresResponse,
    Store,
)


class TestFormatFilters:
    """Tests for list input query filters."""

    def test_defaults_produce_none(self) -> None:
        """No filters are produced for default values."""
        assert ListStoresInput().format_filters() is None
        assert ListKeysInput(id="s").format_filters() is None

    def test_limit_and_cursor(self) -> None:
        """Both filters are rendered as strings."""
        assert ListStoresInput(limit=25, cursor="xyz").format_filters() == {
            "limit": "25",
            "cursor": "xyz",
        }

    def test_cursor_only(self) -> None:
        """A cursor without a limit is sent alone."""
        assert ListKeysInput(id="s", cursor="c1").format_filters() == {"cursor": "c1"}

    def test_store_id_not_a_filter(self) -> None:
        """The store ID is part of the path, not the query."""
        filters = ListKeysInput(id="s", limit=5).format_filters()
        assert filters == {"limit": "5"}


class TestListResponses:
    """Tests for list response decoding."""

    def test_stores_page(self) -> None:
        """Stores and the next cursor are decoded."""
        response = ListStoresResponse.model_validate({
            "data": [
                {
                    "id": "1",
                    "name": "a",
                    "created_at": "2024-01-01T00:00:00Z",
                    "updated_at": "2024-01-02T00:00:00Z",
                }
            ],
            "meta": {"next_cursor": "c1", "limit": 100},
        })

        assert response.data[0] == Store(
            id="1",
            name="a",
            created_at=response.data[0].created_at,
            updated_at=response.data[0].updated_at,
        )
        assert response.data[0].updated_at.day == 2
        assert response.next_cursor == "c1"

    def test_null_next_cursor(self) -> None:
        """A null next_cursor means the last page."""
        response = ListKeysResponse.model_validate({"data": ["k"], "meta": {"next_cursor": None}})
        assert response.next_cursor == ""

    def test_empty_body(self) -> None:
        """Missing data and meta default to empty."""
        response = ListKeysResponse.model_validate({})
        assert response.data == []
        assert response.next_cursor == ""

    @pytest.mark.parametrize("record", [{"id": "", "name": "x"}, {"id": "s", "name": ""}])
    def test_store_requires_id_and_name(self, record: dict) -> None:
        """Store records with an empty id or name are rejected."""
        with pytest.raises(pydantic.ValidationError):
            ListStoresResponse.model_validate({"data": [record], "meta": {}})
