"""Entity types exchanged with the Kong Admin API."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")


def _nested(model: type) -> Any:
    return field(default=None, metadata={"model": model})


@dataclass
class _Record:
    """Fields shared by entities that carry an ID and timestamps."""

    id: str | None = None
    created_at: int | None = None
    updated_at: int | None = None


@dataclass
class DeveloperRole:
    """A Developer Role in Kong."""

    comment: str | None = None
    created_at: int | None = None
    id: str | None = None
    name: str | None = None


@dataclass
class Developer(_Record):
    """A Developer in Kong."""

    status: int | None = None
    email: str | None = None
    custom_id: str | None = None
    roles: list[str] | None = None
    rbac_user: dict[str, Any] | None = None
    meta: str | None = None
    password: str | None = None


@dataclass
class GraphqlRateLimitingCostDecoration:
    """A cost decoration used by the GraphQL rate-limiting plugin."""

    id: str | None = None
    type_path: str | None = None
    add_constant: float | None = None
    add_arguments: list[str] | None = None
    mul_constant: float | None = None
    mul_arguments: list[str] | None = None


@dataclass
class KeySet(_Record):
    """A set of keys in Kong."""

    name: str | None = None
    tags: list[str] | None = None


@dataclass
class PEM:
    """A PEM formatted key pair."""

    public_key: str | None = None
    private_key: str | None = None


@dataclass
class Key(_Record):
    """A JWK or PEM key in Kong."""

    set: KeySet | None = _nested(KeySet)
    name: str | None = None
    kid: str | None = None
    jwk: str | None = None
    pem: PEM | None = _nested(PEM)
    tags: list[str] | None = None


@dataclass
class License(_Record):
    """A License in Kong."""

    payload: str | None = None

    def friendly_name(self) -> str:
        """Return the license ID, or an empty string."""
        return self.id if self.id is not None else ""


@dataclass
class RuntimeConfiguration:
    """The runtime configuration of a Kong node."""

    database: str = ""
    portal: bool = False
    rbac: str = ""

    def is_in_memory(self) -> bool:
        """Return True if Kong runs without a database."""
        return self.database == "off"

    def is_rbac_enabled(self) -> bool:
        """Return True if RBAC is turned on."""
        return self.rbac == "on"


@dataclass
class Info:
    """General information about a Kong node."""

    version: str = ""
    configuration: RuntimeConfiguration | None = _nested(RuntimeConfiguration)


def _encode_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_payload(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _encode_value(item) for key, item in value.items()}
    return value


def to_payload(entity: Any) -> dict[str, Any]:
    """Turn an entity into a JSON-ready dict, leaving out unset fields."""
    if not dataclasses.is_dataclass(entity) or isinstance(entity, type):
        raise TypeError(f"expected an entity instance, got {type(entity).__name__}")
    payload: dict[str, Any] = {}
    for f in dataclasses.fields(entity):
        value = getattr(entity, f.name)
        if value is None:
            continue
        if f.default is not dataclasses.MISSING and value == f.default:
            continue
        payload[f.name] = _encode_value(value)
    return payload


def from_payload(cls: type[T], data: Mapping[str, Any]) -> T:
    """Build an entity of type cls from a decoded JSON object."""
    if not isinstance(data, Mapping):
        raise TypeError(f"cannot decode {type(data).__name__} into {cls.__name__}")
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        value = data.get(f.name)
        if value is None:
            continue
        model = f.metadata.get("model")
        if model is not None:
            value = from_payload(model, value)
        elif isinstance(value, list):
            value = [*value]
        elif isinstance(value, Mapping):
            value = dict(value)
        kwargs[f.name] = value
    return cls(**kwargs)