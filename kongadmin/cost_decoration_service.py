"""Cost decorations for the GraphQL rate-limiting plugin."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

from .client import PAGE_SIZE, Client, ListOpt
from .models import GraphqlRateLimitingCostDecoration as Decoration
from .models import from_payload

_COSTS = "/graphql-rate-limiting-advanced/costs"


class GraphqlRateLimitingCostDecorationService:
    """Manages cost decorations of the GraphQL rate-limiting plugin."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def _exchange(self, method: str, path: str, body: Decoration | None = None) -> Decoration:
        answer = self._client.request(method, path, None, body)
        return from_payload(Decoration, answer.json() or {})

    def create(self, cost_decoration: Decoration) -> Decoration:
        """Create a cost decoration; its ID must not be set."""
        if cost_decoration.id is not None:
            raise ValueError("can't specify an ID for creating new Cost Decoration")
        return self._exchange("POST", _COSTS, cost_decoration)

    def get(self, id: str | None) -> Decoration:
        """Fetch a cost decoration by ID."""
        if not id:
            raise ValueError("id cannot be empty for Get operation")
        return self._exchange("GET", f"{_COSTS}/{id}")

    def update(self, cost_decoration: Decoration) -> Decoration:
        """Update an existing cost decoration; its ID must be set."""
        if not cost_decoration.id:
            raise ValueError("ID cannot be empty for Update operation")
        return self._exchange("PATCH", f"{_COSTS}/{cost_decoration.id}", cost_decoration)

    def delete(self, id: str | None) -> None:
        """Delete a cost decoration by ID."""
        if not id:
            raise ValueError("ID cannot be empty for Delete operation")
        self._client.request("DELETE", f"{_COSTS}/{id}")

    def list(self, opt: ListOpt | None = None) -> tuple[list[Decoration], ListOpt | None]:
        """Fetch one page of cost decorations and the options for the next page."""
        data, next_opt = self._client.list(_COSTS, opt)
        return [from_payload(Decoration, item) for item in data], next_opt

    def _pages(self) -> Iterator[list[Decoration]]:
        opt: ListOpt | None = ListOpt(size=PAGE_SIZE)
        while opt is not None:
            page, opt = self.list(opt)
            yield page

    def list_all(self) -> list[Decoration]:
        """Fetch every cost decoration, following all pages."""
        return list(chain.from_iterable(self._pages()))