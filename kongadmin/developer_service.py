"""Developers of the Kong Developer Portal."""

from __future__ import annotations

from http import HTTPStatus

from .client import PAGE_SIZE, Client, ListOpt
from .errors import APIError
from .models import Developer, from_payload

_ENDPOINT = "/developers"


class DeveloperService:
    """Manages Developers in Kong."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def create(self, developer: Developer) -> Developer:
        """Create a Developer.

        Always uses POST, even when an ID is given: a PUT would not accept a
        password nor create the consumer that backs the developer.
        """
        response = self._client.request("POST", _ENDPOINT, None, developer)
        return from_payload(Developer, response.json() or {})

    def get(self, email_or_id: str | None) -> Developer:
        """Fetch a Developer by e-mail address or ID."""
        if not email_or_id:
            raise ValueError("email_or_id cannot be empty for Get operation")
        response = self._client.request("GET", f"{_ENDPOINT}/{email_or_id}")
        return from_payload(Developer, response.json() or {})

    def get_by_custom_id(self, custom_id: str | None) -> Developer:
        """Fetch a Developer by its custom ID; raise a 404 APIError if none matches."""
        if not custom_id:
            raise ValueError("custom_id cannot be empty for Get operation")
        response = self._client.request("GET", _ENDPOINT, {"custom_id": custom_id})
        data = (response.json() or {}).get("data") or []
        if not data:
            raise APIError(HTTPStatus.NOT_FOUND, "Not found")
        return from_payload(Developer, data[0])

    def update(self, developer: Developer) -> Developer:
        """Update a Developer; its ID must be set."""
        if developer is None or not developer.id:
            raise ValueError("ID cannot be empty for Update operation")
        response = self._client.request(
            "PATCH", f"{_ENDPOINT}/{developer.id}", None, developer
        )
        payload = response.json() or {}
        return from_payload(Developer, payload.get("developer") or {})

    def delete(self, email_or_id: str | None) -> None:
        """Delete a Developer by e-mail address or ID."""
        if not email_or_id:
            raise ValueError("email_or_id cannot be empty for Delete operation")
        self._client.request("DELETE", f"{_ENDPOINT}/{email_or_id}")

    def list(self, opt: ListOpt | None = None) -> tuple[list[Developer], ListOpt | None]:
        """Fetch one page of Developers and the options for the next page."""
        data, next_opt = self._client.list(_ENDPOINT, opt)
        return [from_payload(Developer, item) for item in data], next_opt

    def list_all(self) -> list[Developer]:
        """Fetch every Developer, following all pages."""
        developers: list[Developer] = []
        opt: ListOpt | None = ListOpt(size=PAGE_SIZE)
        while opt is not None:
            page, opt = self.list(opt)
            developers.extend(page)
        return developers