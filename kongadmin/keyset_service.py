"""Key sets stored in Kong."""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from .client import PAGE_SIZE, Client, ListOpt
from .models import KeySet, from_payload

T = TypeVar("T")


class _CollectionService(Generic[T]):
    """Create, read, update, delete and paging over one Admin API collection."""

    endpoint: ClassVar[str]
    model: ClassVar[type]
    reference: ClassVar[str]

    def __init__(self, client: Client) -> None:
        self._client = client

    def _send(self, method: str, path: str, entity: object = None) -> T:
        response = self._client.request(method, path, None, entity)
        return from_payload(self.model, response.json() or {})

    def _path(self, ref: str | None, operation: str) -> str:
        if not ref:
            raise ValueError(f"{self.reference} cannot be empty for {operation} operation")
        return f"{self.endpoint}/{ref}"

    def _create(self, entity: T) -> T:
        # An entity carrying an ID is created under that ID by PUT.
        if entity.id is None:
            return self._send("POST", self.endpoint, entity)
        return self._send("PUT", f"{self.endpoint}/{entity.id}", entity)

    def _get(self, ref: str | None) -> T:
        return self._send("GET", self._path(ref, "Get"))

    def _update(self, entity: T | None) -> T:
        if entity is None or not entity.id:
            raise ValueError("ID cannot be empty for Update operation")
        return self._send("PATCH", f"{self.endpoint}/{entity.id}", entity)

    def _delete(self, ref: str | None) -> None:
        self._client.request("DELETE", self._path(ref, "Delete"), None, None)

    def _list(self, opt: ListOpt | None) -> tuple[list[T], ListOpt | None]:
        data, next_opt = self._client.list(self.endpoint, opt)
        return [from_payload(self.model, item) for item in data], next_opt

    def _list_all(self) -> list[T]:
        entities: list[T] = []
        opt: ListOpt | None = ListOpt(size=PAGE_SIZE)
        while opt is not None:
            page, opt = self._list(opt)
            entities.extend(page)
        return entities


class KeySetService(_CollectionService[KeySet]):
    """Manages Key Sets in Kong."""

    endpoint = "/key-sets"
    model = KeySet
    reference = "name_or_id"

    def __init__(self, client: Client) -> None:
        super().__init__(client)

    def create(self, key_set: KeySet) -> KeySet:
        """Create a Key Set, under its own ID if it has one."""
        return self._create(key_set)

    def get(self, name_or_id: str | None) -> KeySet:
        """Fetch a Key Set by name or ID."""
        return self._get(name_or_id)

    def update(self, key_set: KeySet) -> KeySet:
        """Update a Key Set; its ID must be set."""
        return self._update(key_set)

    def delete(self, name_or_id: str | None) -> None:
        """Delete a Key Set by name or ID."""
        self._delete(name_or_id)

    def list(self, opt: ListOpt | None = None) -> tuple[list[KeySet], ListOpt | None]:
        """Fetch one page of Key Sets and the options for the next page."""
        return self._list(opt)

    def list_all(self) -> list[KeySet]:
        """Fetch every Key Set, following all pages."""
        return self._list_all()