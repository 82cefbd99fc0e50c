import itertools
import json
import re
from urllib.parse import parse_qs, urlsplit

import pytest

from kongadmin.client import Client, ListOpt, Response
from kongadmin.errors import APIError, is_not_found_err
from kongadmin.key_service import KeyService
from kongadmin.models import Key, KeySet


class KeyStore:
    """In-memory /keys collection with tag filtering and offset paging."""

    def __init__(self):
        self.keys = {}
        self.log = []
        self._serial = itertools.count(1)

    def __call__(self, method, url, headers, body):
        parts = urlsplit(url)
        query = {name: values[0] for name, values in parse_qs(parts.query).items()}
        document = json.loads(body) if body else None
        self.log.append((method, parts.path, query, document))
        ref = parts.path.removeprefix("/keys").lstrip("/")
        if not ref:
            if method == "GET":
                return self._page(query)
            return self._save(f"key-{next(self._serial)}", document)
        if method == "PUT":
            return self._save(ref, document)
        key = self.keys.get(ref) or next(
            (k for k in self.keys.values() if k.get("name") == ref), None
        )
        if key is None:
            return Response(404, b'{"message": "Not found"}')
        if method == "DELETE":
            del self.keys[key["id"]]
            return Response(204)
        if method == "PATCH":
            key.update(document)
        return Response(200, json.dumps(key).encode())

    def _save(self, key_id, document):
        self.keys[key_id] = {**(document or {}), "id": key_id}
        return Response(200, json.dumps(self.keys[key_id]).encode())

    def _page(self, query):
        found = list(self.keys.values())
        if query.get("tags"):
            match = all if "," in query["tags"] else any
            wanted = re.split("[,/]", query["tags"])
            found = [k for k in found if match(t in k.get("tags", []) for t in wanted)]
        start, size = int(query.get("offset", 0)), int(query.get("size", 100))
        page = {"data": found[start:start + size]}
        if start + size < len(found):
            page["offset"] = str(start + size)
        return Response(200, json.dumps(page).encode())


@pytest.fixture
def server():
    return KeyStore()


@pytest.fixture
def keys(server):
    return KeyService(Client("http://localhost:8001", server))


def test_key_with_set_create_get_update_delete(server, keys):
    created = keys.create(Key(name="foo", kid="foo-1", set=KeySet(id="set-1"), jwk="placeholder"))
    assert created.id
    assert server.log[-1][:2] == ("POST", "/keys")
    assert server.log[-1][3]["set"] == {"id": "set-1"}

    fetched = keys.get(created.id)
    assert (fetched.name, fetched.kid) == ("foo", "foo-1")
    assert fetched.set == KeySet(id="set-1")

    fetched.name = "bar"
    assert keys.update(fetched).name == "bar"
    assert server.log[-1][:2] == ("PATCH", f"/keys/{created.id}")

    keys.delete(created.id)
    with pytest.raises(APIError) as excinfo:
        keys.get(created.id)
    assert is_not_found_err(excinfo.value)


def test_create_with_id_uses_put(server, keys):
    key_id = "0f6e2b7a-1c3d-4e5f-8a9b-0c1d2e3f4a5b"
    created = keys.create(Key(name="foo", id=key_id, kid="foo-2", jwk="placeholder"))
    assert created.id == key_id
    assert server.log[-1][:2] == ("PUT", f"/keys/{key_id}")
    keys.delete(created.id)
    assert server.keys == {}


def test_key_with_tags(keys):
    assert keys.create(Key(name="foo", kid="foo-1", tags=["tag1", "tag2"])).tags == ["tag1", "tag2"]


def test_key_list_with_tags(keys):
    tag_pairs = [("tag1", "tag2"), ("tag2", "tag3"), ("tag1", "tag3")] * 2
    fixtures = [
        keys.create(Key(name=f"user{n}", kid=f"user-key-{n}", set=KeySet(id="set-1"), tags=list(tags)))
        for n, tags in enumerate(tag_pairs, start=1)
    ]

    unpaged = [
        (ListOpt(tags=["tag1"]), 4),
        (ListOpt(tags=["tag2"]), 4),
        (ListOpt(tags=["tag1", "tag2"]), 6),
        (ListOpt(tags=["tag1", "tag2"], match_all_tags=True), 2),
    ]
    for opt, expected in unpaged:
        found, next_opt = keys.list(opt)
        assert next_opt is None
        assert len(found) == expected

    for opt, page_size in [
        (ListOpt(tags=["tag1", "tag2"], size=3), 3),
        (ListOpt(tags=["tag1", "tag2"], match_all_tags=True, size=1), 1),
    ]:
        found, next_opt = keys.list(opt)
        assert next_opt is not None
        assert len(found) == page_size
        found, next_opt = keys.list(next_opt)
        assert next_opt is None
        assert len(found) == page_size

    for key in fixtures:
        keys.delete(key.name)
    assert keys.list_all() == []


def test_list_all_follows_pages(server, keys):
    for n in range(3):
        keys.create(Key(name=f"k{n}"))
    assert sorted(k.name for k in keys.list_all()) == ["k0", "k1", "k2"]
    assert server.log[-1][2] == {"size": "1000"}


@pytest.mark.parametrize("bad", [None, ""])
def test_get_and_delete_require_name_or_id(server, keys, bad):
    with pytest.raises(ValueError, match="name_or_id cannot be empty for Get"):
        keys.get(bad)
    with pytest.raises(ValueError, match="name_or_id cannot be empty for Delete"):
        keys.delete(bad)
    assert server.log == []


def test_update_requires_id(server, keys):
    with pytest.raises(ValueError, match="ID cannot be empty for Update"):
        keys.update(Key(name="foo"))
    assert server.log == []