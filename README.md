# kongadmin

A small client for the Kong Admin API, written with the standard library only.

## What it covers

| Module | What it offers |
| --- | --- |
| `kongadmin.client` | `Client` (HTTP requests, paging, existence checks, the root document), `ListOpt`, `QueryString`, `Response`, `construct_query_string` |
| `kongadmin.errors` | `APIError`, `is_not_found_err`, `is_forbidden_err` |
| `kongadmin.models` | the entity dataclasses `Developer`, `DeveloperRole`, `GraphqlRateLimitingCostDecoration`, `Key`, `KeySet`, `PEM`, `License`, `Info`, `RuntimeConfiguration`, and `to_payload` / `from_payload` |
| `kongadmin.info` | `InfoService` and `convert` |
| `kongadmin.listeners` | `ProxyListener`, `StreamListener`, `parse_listeners`, `listeners` |
| `kongadmin.developer_service` | `DeveloperService` |
| `kongadmin.developer_role_service` | `DeveloperRoleService` |
| `kongadmin.cost_decoration_service` | `GraphqlRateLimitingCostDecorationService` |
| `kongadmin.key_service` | `KeyService` |
| `kongadmin.keyset_service` | `KeySetService` |
| `kongadmin.license_service` | `LicenseService` |

## Installation

```
pip install .
```

## Usage

```python
from kongadmin.client import Client, ListOpt
from kongadmin.errors import is_not_found_err
from kongadmin.info import InfoService
from kongadmin.key_service import KeyService
from kongadmin.keyset_service import KeySetService
from kongadmin.listeners import listeners
from kongadmin.models import Key, KeySet

client = Client("http://localhost:8001")  # this is also the default base URL

info = InfoService(client).get()
print(info.version)
if info.configuration is not None:
    print(info.configuration.is_in_memory(), info.configuration.is_rbac_enabled())

proxy, stream = listeners(client)

key_sets = KeySetService(client)
created = key_sets.create(KeySet(name="signing", tags=["tag1", "tag2"]))

keys = KeyService(client)
keys.create(Key(name="k1", kid="k1", set=KeySet(id=created.id), jwk="{...}"))

page, next_opt = keys.list(ListOpt(size=10, tags=["tag1", "tag2"], match_all_tags=True))
while next_opt is not None:
    more, next_opt = keys.list(next_opt)
    page.extend(more)

everything = keys.list_all()

try:
    keys.get("missing")
except Exception as exc:
    if is_not_found_err(exc):
        print("no such key")
```

### Services

Every service is built from a `Client` and offers `create`, `get`, `update`,
`delete`, `list` and `list_all`; `DeveloperService` also has
`get_by_custom_id`, which raises a 404 `APIError` when no developer matches.

- `list(opt)` returns one page and the `ListOpt` for the next page, or `None`
  when there are no more pages. The next options keep the size, tags and
  tag matching of the ones passed in.
- `list_all()` follows every page, asking for 1000 items at a time.
- `KeyService`, `KeySetService` and `LicenseService` create an entity that
  already has an ID with `PUT` under that ID, and otherwise with `POST`.
  `DeveloperService.create` always uses `POST`.
  `GraphqlRateLimitingCostDecorationService.create` refuses an entity with an ID.

Arguments that a call needs, such as the ID for an update or the name or ID
for a `get` or `delete`, are checked before any request is sent; a
`ValueError` is raised when they are missing or empty.

### Tags

`construct_query_string` joins the tags of a `ListOpt` with `/` (entities
with any of the tags) or, when `match_all_tags` is true, with `,` (entities
with all of them).

### Errors

Any response outside 2xx is raised as `APIError`, which carries `code`,
`message` (taken from the `message` field of a JSON body when there is one)
and `raw`, the response body. `is_not_found_err` and `is_forbidden_err` look
through the exception's cause and context chain for an `APIError` with status
404 or 403. `Client.exists(endpoint)` turns a 404 into `False`.

### Transport

`Client(base_url, transport)` sends requests through `urllib` by default.
Any callable `transport(method, url, headers, body)` returning a
`Response` can take its place, for example to add headers or to answer
requests in tests.

### Listeners

`parse_listeners` reads `proxy_listeners` and `stream_listeners` from the
`configuration` object of the root document; a list that Kong sends as `{}`
is read as empty. Malformed documents raise `ValueError`.

## What it does not do

- It covers only the entities listed above. Services, routes, consumers,
  plugins, credentials, RBAC roles and permissions, workspaces and other
  Admin API collections have no service here, though `Client.request` and
  `Client.list` can reach any endpoint directly.
- The default transport sends no authentication headers; supply your own
  transport to add them.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```