"""Errors raised for Kong Admin API failures."""

from __future__ import annotations

import json
from http import HTTPStatus


class APIError(Exception):
    """An error response returned by the Kong Admin API."""

    def __init__(self, code: int, message: str, raw: bytes | None = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.raw = raw

    def __str__(self) -> str:
        return f"HTTP status {self.code} (message: {json.dumps(self.message)})"


def _find_api_error(error: BaseException | None) -> APIError | None:
    """Walk the exception chain and return the first APIError found."""
    seen: set[int] = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, APIError):
            return error
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return None


def is_not_found_err(error: BaseException | None) -> bool:
    """Return True if the error or its cause is a 404 response from Kong."""
    api_error = _find_api_error(error)
    return api_error is not None and api_error.code == HTTPStatus.NOT_FOUND


def is_forbidden_err(error: BaseException | None) -> bool:
    """Return True if the error or its cause is a 403 response from Kong."""
    api_error = _find_api_error(error)
    return api_error is not None and api_error.code == HTTPStatus.FORBIDDEN