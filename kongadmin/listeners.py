"""Proxy and stream listeners configured on a Kong node."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .client import Client

T = TypeVar("T")


def _key(name: str) -> Any:
    return field(default=None, metadata={"key": name})


@dataclass
class ProxyListener:
    """A listener on the Kong Gateway for L7 routing."""

    ssl: bool = False
    listener: str = ""
    port: int = 0
    bind: bool = False
    ip: str = ""
    http2: bool = False
    proxy_protocol: bool = False
    deferred: bool = False
    reuseport: bool = False
    backlog: bool = field(default=False, metadata={"key": "backlog=%d+"})


@dataclass
class StreamListener:
    """A listener on the Kong Gateway for L4 routing."""

    udp: bool = False
    ssl: bool = False
    proxy_protocol: bool = False
    ip: str = ""
    listener: str = ""
    port: int = 0
    bind: bool = False
    reuseport: bool = False
    backlog: bool = field(default=False, metadata={"key": "backlog=%d+"})


def _type_ok(value: Any, default: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        if isinstance(value, float) and value.is_integer():
            return True
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, str)


def _decode(cls: type[T], raw: Any) -> T:
    if not isinstance(raw, Mapping):
        raise ValueError(f"expected a map for {cls.__name__}, got {type(raw).__name__}")
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        key = f.metadata.get("key", f.name)
        if key not in raw or raw[key] is None:
            continue
        value = raw[key]
        if not _type_ok(value, f.default):
            raise ValueError(
                f"'{key}' expected type '{type(f.default).__name__}', "
                f"got '{type(value).__name__}'"
            )
        if isinstance(f.default, int) and not isinstance(f.default, bool):
            value = int(value)
        kwargs[f.name] = value
    return cls(**kwargs)


def _decode_list(cls: type[T], raw: Any) -> list[T]:
    # The Admin API sends {} for an empty list.
    if not isinstance(raw, list):
        return []
    return [_decode(cls, item) for item in raw]


def parse_listeners(
    root: bytes | str | Mapping[str, Any],
) -> tuple[list[ProxyListener], list[StreamListener]]:
    """Extract proxy and stream listeners from the root document."""
    prefix = "couldn't decode root JSON when trying to determine listeners"
    try:
        document = json.loads(root) if isinstance(root, (bytes, str)) else root
        if not isinstance(document, Mapping):
            raise ValueError("root document is not an object")
        config = document.get("configuration")
        if config is None:
            return [], []
        if not isinstance(config, Mapping):
            raise ValueError("configuration is not an object")
        proxy = _decode_list(ProxyListener, config.get("proxy_listeners"))
        stream = _decode_list(StreamListener, config.get("stream_listeners"))
    except ValueError as err:
        raise ValueError(f"{prefix}: {err}") from err
    return proxy, stream


def listeners(client: Client) -> tuple[list[ProxyListener], list[StreamListener]]:
    """Fetch the root document and return its configured listeners."""
    return parse_listeners(client.root_json())