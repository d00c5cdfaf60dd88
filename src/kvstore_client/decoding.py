"""Response status checks and body decoding."""

from typing import TypeVar

import httpx
from pydantic import BaseModel

from kvstore_client.exceptions import http_error

M = TypeVar("M", bound=BaseModel)


def check_response(response: httpx.Response) -> httpx.Response:
    """Raise HTTPError unless the response has a 2xx status."""
    if not response.is_success:
        raise http_error(response)
    return response


def expect_status(response: httpx.Response, status_code: int) -> httpx.Response:
    """Raise HTTPError unless the response has exactly ``status_code``."""
    if response.status_code != status_code:
        raise http_error(response)
    return response


def decode_json(response: httpx.Response, model: type[M]) -> M:
    """Decode a successful JSON response into ``model``.

    Raises:
        HTTPError: If the status is not 2xx
        json.JSONDecodeError: If the body is not JSON
        pydantic.ValidationError: If the body does not match ``model``
    """
    check_response(response)
    return model.model_validate(response.json())


def decode_text(response: httpx.Response) -> str:
    """Return the raw body of a successful response as text."""
    check_response(response)
    return response.text
