"""Enterprise licenses stored in Kong."""

from __future__ import annotations

from .client import Client, ListOpt
from .keyset_service import _CollectionService
from .models import License


class LicenseService(_CollectionService[License]):
    """Manages Licenses in Kong."""

    endpoint = "/licenses"
    model = License
    reference = "ID"

    def __init__(self, client: Client) -> None:
        super().__init__(client)

    def create(self, license: License | None) -> License:
        """Create a License, under its own ID if it has one."""
        if license is None:
            raise ValueError("cannot create a nil license")
        return self._create(license)

    def get(self, id: str | None) -> License:
        """Fetch a License by ID."""
        return self._get(id)

    def update(self, license: License | None) -> License:
        """Update a License; its ID must be set."""
        if license is None:
            raise ValueError("cannot update a nil license")
        return self._update(license)

    def delete(self, id: str | None) -> None:
        """Delete a License by ID."""
        self._delete(id)

    def list(self, opt: ListOpt | None = None) -> tuple[list[License], ListOpt | None]:
        """Fetch one page of Licenses and the options for the next page."""
        return self._list(opt)

    def list_all(self) -> list[License]:
        """Fetch every License, following all pages."""
        return self._list_all()