# huma

Small building blocks for HTTP APIs, using only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `huma.casing`: split identifiers written in any style into words
  (`split`) and join them again (`join`) as CamelCase (`camel`),
  lowerCamelCase (`lower_camel`), snake_case (`snake`) or kebab-case
  (`kebab`). `merge_numbers` keeps numbers next to their words
  (`h264`, `stream_1080p`); `initialism` upper-cases common initialisms
  such as `ID` or `HTTP`; `identity` leaves parts as they are.
- `huma.chain`: `Middlewares`, a list of `middleware(ctx, next)` callables.
  `handler(endpoint)` returns one handler that runs them in order, with the
  endpoint last.
- `huma.autoconfig`: `AutoConfig` and `AutoConfigVar` dataclasses describing
  CLI auto-configuration for an API; `to_dict()` gives the JSON-ready form,
  leaving out empty optional fields.
- `huma.cookie`: `read_cookie(headers, name)` and `read_cookies(headers)`
  parse `Cookie` request headers (a mapping or `(name, value)` pairs) into
  `Cookie(name, value)` values. A missing cookie raises `NoCookieError`.
- `huma.conditional`: `Params` holds `If-Match`, `If-None-Match`,
  `If-Modified-Since` and `If-Unmodified-Since`. Call `resolve(method)` to
  mark writes (POST, PUT, PATCH, DELETE), then
  `precondition_failed(etag, modified)`, which raises `StatusError` with
  status 304 on reads or 412 (with `ErrorDetail` entries) on writes when a
  condition fails, and returns `None` otherwise.
- `huma.flow`: `Mux`, a router with `:name` parameters, optional regular
  expressions (`:age|^[0-9]+$`), trailing `/...` wildcards, middleware via
  `use`, scoped middleware via `group`, and automatic HEAD (for GET),
  OPTIONS and 405 handling. Requests and responses are the `Request` and
  `Response` dataclasses; `param(request, name)` reads a matched parameter.
  `not_found`, `method_not_allowed` and `options` handlers can be replaced.
- `huma.formats`: `Format` pairs a marshal and an unmarshal function.
  `default_formats()` returns JSON under `application/json` and `json`;
  `select_unmarshal_format` and `select_marshal_format` pick a format for a
  content type such as `application/json; charset=utf-8` or
  `application/merge-patch+json`, raising `UnknownContentTypeError` if none
  fits.
- `huma.api`: `API` brings formats, response transformers and middleware
  together (`marshal`, `unmarshal`, `transform`, `use_middleware`).
  `get_api_prefix(server_urls)` returns the path of the first server URL that
  has one.
- `huma.autopatch`: `merge_patch(original, patch)` applies a JSON Merge Patch
  without modifying its arguments, `make_optional_schema(schema)` copies a
  JSON Schema dict with nothing required, and `patch_name(operation_id)`
  turns `get-thing` into `thing`.

## Examples

```python
from huma import casing

casing.split("HTTPServer_2020")                  # ['HTTP', 'Server', '2020']
casing.snake("Stream1080P")                      # 'stream_1080p'
casing.camel("platform-api", casing.initialism)  # 'PlatformAPI'
```

```python
from huma.flow import Mux, Request, Response, param

mux = Mux()

def greet(request: Request, response: Response) -> None:
    response.write("Hello, " + param(request, "name"))

mux.handle("/hello/:name", greet, "GET")
response = mux.serve(Request("GET", "/hello/world"))
response.status  # 200
response.body    # b'Hello, world'
```

```python
from datetime import datetime, timezone
from huma.conditional import Params, StatusError

params = Params(if_none_match=['"abc123"'])
params.resolve("GET")
try:
    params.precondition_failed("abc123", datetime.now(timezone.utc))
except StatusError as err:
    err.status  # 304
```

```python
from huma.api import API
from huma.autopatch import merge_patch

api = API()
api.marshal("application/json", {"a": 1})                # b'{"a":1}\n'
api.unmarshal("application/merge-patch+json", b'{"a":2}')  # {'a': 2}
merge_patch({"a": 1, "b": 2}, {"b": None, "c": 3})        # {'a': 1, 'c': 3}
```

## What this package does not do

It has no HTTP server or network listener: `Mux.serve` dispatches
in-memory `Request` objects. It does not build or serve OpenAPI documents,
documentation pages or schema routes, does not register operations from
typed handlers, and does not validate request bodies against schemas. The
`huma.autopatch` helpers provide the pieces for a PATCH operation but do not
register one or call GET and PUT handlers themselves; JSON Patch (RFC 6902)
documents are not supported.