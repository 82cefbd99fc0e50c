"""HTTP client for the Kong Admin API, with pagination helpers."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import APIError, is_not_found_err
from .models import to_payload

DEFAULT_BASE_URL = "http://localhost:8001"
PAGE_SIZE = 1000


@dataclass
class ListOpt:
    """Pagination and tag filtering for list endpoints."""

    size: int = 0
    offset: str = ""
    tags: list[str] | None = None
    match_all_tags: bool = False


@dataclass
class QueryString:
    """Query string parameters sent to list endpoints."""

    size: int = 0
    offset: str = ""
    tags: str = ""

    def to_params(self) -> dict[str, Any]:
        """Return the non-empty parameters as a dict."""
        params: dict[str, Any] = {}
        if self.size:
            params["size"] = self.size
        if self.offset:
            params["offset"] = self.offset
        if self.tags:
            params["tags"] = self.tags
        return params


@dataclass
class Response:
    """A raw HTTP response."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Decode the body as JSON; an empty body decodes to None."""
        if not self.body:
            return None
        return json.loads(self.body)


Transport = Callable[[str, str, Mapping[str, str], "bytes | None"], Response]


def construct_query_string(opt: ListOpt | None) -> QueryString:
    """Build the list query string for the given options."""
    if opt is None:
        return QueryString()
    separator = "," if opt.match_all_tags else "/"
    return QueryString(
        size=opt.size,
        offset=opt.offset,
        tags=separator.join(opt.tags or ()),
    )


def _urllib_transport(
    method: str, url: str, headers: Mapping[str, str], body: bytes | None
) -> Response:
    req = urllib.request.Request(url, data=body, headers=dict(headers), method=method)
    try:
        with urllib.request.urlopen(req) as resp:
            return Response(resp.status, resp.read(), dict(resp.headers))
    except urllib.error.HTTPError as err:
        return Response(err.code, err.read(), dict(err.headers or {}))


def _error_message(body: bytes) -> str:
    try:
        decoded = json.loads(body)
    except ValueError:
        return body.decode("utf-8", errors="replace")
    if isinstance(decoded, dict) and isinstance(decoded.get("message"), str):
        return decoded["message"]
    return body.decode("utf-8", errors="replace")


def _encode_body(body: Any) -> Any:
    if isinstance(body, Mapping):
        return {key: _encode_body(value) for key, value in body.items()}
    if isinstance(body, (list, tuple)):
        return [_encode_body(item) for item in body]
    if hasattr(body, "__dataclass_fields__") and not isinstance(body, type):
        return to_payload(body)
    return body


class Client:
    """Talks to the Kong Admin API over HTTP."""

    def __init__(
        self, base_url: str | None = None, transport: Transport | None = None
    ) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._transport = transport or _urllib_transport

    def request(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Response:
        """Send a request; raise APIError for any non-2xx response."""
        url = self.base_url + endpoint
        if params:
            url += "?" + urllib.parse.urlencode(params, doseq=True)
        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            data = json.dumps(_encode_body(body)).encode("utf-8")
            headers["Content-Type"] = "application/json"
        response = self._transport(method, url, headers, data)
        if not 200 <= response.status_code < 300:
            raise APIError(response.status_code, _error_message(response.body), response.body)
        return response

    def list(
        self, endpoint: str, opt: ListOpt | None = None
    ) -> tuple[list[dict[str, Any]], ListOpt | None]:
        """Fetch one page of a list endpoint and the options for the next page."""
        params = construct_query_string(opt).to_params()
        payload = self.request("GET", endpoint, params or None).json() or {}
        data = payload.get("data") or []
        offset = payload.get("offset")
        next_opt = None
        if offset is not None:
            next_opt = ListOpt(offset=offset)
            if opt is not None:
                next_opt.size = opt.size
                next_opt.tags = opt.tags
                next_opt.match_all_tags = opt.match_all_tags
        return [*data], next_opt

    def exists(self, endpoint: str) -> bool:
        """Check whether the endpoint exists, using GET."""
        try:
            response = self.request("GET", endpoint)
        except APIError as err:
            if is_not_found_err(err):
                return False
            raise
        return response.status_code == 200

    def root(self) -> dict[str, Any]:
        """Return the decoded root document of the Admin API."""
        return self.request("GET", "/").json() or {}

    def root_json(self) -> bytes:
        """Return the raw root document of the Admin API."""
        return self.request("GET", "/").body