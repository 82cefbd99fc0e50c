"""JWK and PEM keys stored in Kong."""

from __future__ import annotations

from .client import PAGE_SIZE, Client, ListOpt
from .models import Key, from_payload

_KEYS = "/keys"


class KeyService:
    """Manages Keys in Kong."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _send(self, method: str, suffix: str = "", key: Key | None = None) -> Key:
        answer = self._client.request(method, _KEYS + suffix, None, key)
        return from_payload(Key, answer.json() or {})

    def create(self, key: Key) -> Key:
        """Create a Key.

        With an ID set the key is created under that ID by PUT; otherwise
        Kong generates one.
        """
        if key.id is not None:
            return self._send("PUT", f"/{key.id}", key)
        return self._send("POST", key=key)

    def get(self, name_or_id: str | None) -> Key:
        """Fetch a Key by name or ID."""
        if not name_or_id:
            raise ValueError("name_or_id cannot be empty for Get operation")
        return self._send("GET", f"/{name_or_id}")

    def update(self, key: Key) -> Key:
        """Update a Key; its ID must be set."""
        if key is None or not key.id:
            raise ValueError("ID cannot be empty for Update operation")
        return self._send("PATCH", f"/{key.id}", key)

    def delete(self, name_or_id: str | None) -> None:
        """Delete a Key by name or ID."""
        if not name_or_id:
            raise ValueError("name_or_id cannot be empty for Delete operation")
        self._client.request("DELETE", f"{_KEYS}/{name_or_id}")

    def list(self, opt: ListOpt | None = None) -> tuple[list[Key], ListOpt | None]:
        """Fetch one page of Keys and the options for the next page."""
        data, next_opt = self._client.list(_KEYS, opt)
        return [from_payload(Key, item) for item in data], next_opt

    def list_all(self) -> list[Key]:
        """Fetch every Key, following all pages."""
        keys: list[Key] = []
        next_opt: ListOpt | None = ListOpt(size=PAGE_SIZE)
        while next_opt is not None:
            batch, next_opt = self.list(next_opt)
            keys.extend(batch)
        return keys