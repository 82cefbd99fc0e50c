"""Developer Roles of the Kong Developer Portal."""

from __future__ import annotations

from .client import PAGE_SIZE, Client, ListOpt
from .models import DeveloperRole, from_payload

_ROLES = "/developers/roles"


class DeveloperRoleService:
    """Manages Developer Roles in Kong."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _call(
        self, method: str, suffix: str = "", role: DeveloperRole | None = None
    ) -> DeveloperRole:
        answer = self._client.request(method, _ROLES + suffix, None, role)
        return from_payload(DeveloperRole, answer.json() or {})

    def create(self, role: DeveloperRole | None) -> DeveloperRole:
        """Create a Developer Role."""
        if role is None:
            raise ValueError("cannot create a nil role")
        return self._call("POST", role=role)

    def get(self, name_or_id: str | None) -> DeveloperRole:
        """Fetch a Developer Role by name or ID."""
        if not name_or_id:
            raise ValueError("name_or_id cannot be empty for Get operation")
        return self._call("GET", f"/{name_or_id}")

    def update(self, role: DeveloperRole | None) -> DeveloperRole:
        """Update a Developer Role; its ID must be set."""
        if role is None:
            raise ValueError("cannot update a nil Role")
        if not role.id:
            raise ValueError("ID cannot be empty for Update operation")
        return self._call("PATCH", f"/{role.id}", role)

    def delete(self, role_or_id: str | None) -> None:
        """Delete a Developer Role by name or ID."""
        if not role_or_id:
            raise ValueError("role_or_id cannot be empty for Delete operation")
        self._client.request("DELETE", f"{_ROLES}/{role_or_id}")

    def list(
        self, opt: ListOpt | None = None
    ) -> tuple[list[DeveloperRole], ListOpt | None]:
        """Fetch one page of Developer Roles and the options for the next page."""
        data, next_opt = self._client.list(_ROLES + "/", opt)
        return [from_payload(DeveloperRole, item) for item in data], next_opt

    def list_all(self) -> list[DeveloperRole]:
        """Fetch every Developer Role, following all pages."""
        found: list[DeveloperRole] = []
        cursor: ListOpt | None = ListOpt(size=PAGE_SIZE)
        while cursor is not None:
            batch, cursor = self.list(cursor)
            found += batch
        return found