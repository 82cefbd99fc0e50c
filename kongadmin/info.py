"""Runtime information about a Kong node."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from .client import Client
from .models import Info, from_payload

_Model = TypeVar("_Model")


def convert(data: Any, cls: type[_Model]) -> _Model:
    """Convert JSON-compatible data into an instance of cls via a JSON round trip."""
    return from_payload(cls, json.loads(json.dumps(data)))


class InfoService:
    """Reads Kong's general runtime information."""

    def __init__(self, client: Client) -> None:
        self._root = client.root

    def get(self) -> Info:
        """Retrieve the high-level metadata of the Kong node."""
        return convert(self._root(), Info)