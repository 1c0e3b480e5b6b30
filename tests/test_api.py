import pytest

from huma.api import API, get_api_prefix
from huma.formats import Format, UnknownContentTypeError


def test_blank_config_uses_json_by_default():
    api = API()
    assert api.default_format == "application/json"
    assert api.format_keys[0] == "application/json"
    assert api.unmarshal("", b'{"a": 1}') == {"a": 1}


def test_no_formats_means_no_default():
    api = API(formats={})
    assert api.default_format == ""
    assert api.format_keys == []
    with pytest.raises(UnknownContentTypeError):
        api.unmarshal("application/json", b"{}")


def test_unmarshal_content_type_variants():
    api = API()
    assert api.unmarshal("application/json; charset=utf-8", b"[1, 2]") == [1, 2]
    assert api.unmarshal("application/my-format+json", b'"x"') == "x"


def test_unmarshal_unknown_type():
    api = API()
    with pytest.raises(UnknownContentTypeError) as info:
        api.unmarshal("text/plain", b"hello")
    assert info.value.content_type == "text/plain"


def test_marshal_json_and_suffix():
    api = API()
    assert api.marshal("application/json", {"a": 1}) == b'{"a":1}\n'
    assert api.marshal("application/vnd.thing+json", [1]) == b"[1]\n"


def test_marshal_unknown_type():
    with pytest.raises(UnknownContentTypeError):
        API().marshal("application/cbor", {})


def test_custom_format():
    fmt = Format(marshal=lambda v: str(v).encode(), unmarshal=lambda d: d)
    api = API(formats={"text/plain": fmt}, default_format="text/plain")
    assert api.format_keys == ["text/plain", "text/plain"]
    assert api.marshal("text/plain", 42) == b"42"


def test_transform_runs_in_order():
    calls = []

    def first(ctx, status, value):
        calls.append(("first", status))
        return value + [1]

    def second(ctx, status, value):
        calls.append(("second", status))
        return value + [2]

    api = API(transformers=[first, second])
    assert api.transform(None, "200", []) == [1, 2]
    assert calls == [("first", "200"), ("second", "200")]


def test_transform_error_propagates():
    def bad(ctx, status, value):
        raise RuntimeError("boom")

    api = API(transformers=[bad])
    with pytest.raises(RuntimeError, match="boom"):
        api.transform(None, "200", {})


def test_context_value_through_middleware():
    api = API()
    seen = {}

    def endpoint(ctx):
        seen["foo"] = ctx["foo"]

    # With no middleware the endpoint itself is the handler.
    assert api.middlewares.handler(endpoint) is endpoint

    def middleware(ctx, nxt):
        nxt({**ctx, "foo": "bar"})
        seen["status"] = 204

    api.use_middleware(middleware)

    handler = api.middlewares.handler(endpoint)
    assert handler is not endpoint
    handler({})
    assert seen == {"foo": "bar", "status": 204}


def test_middleware_order():
    api = API()
    order = []
    api.use_middleware(
        lambda ctx, nxt: (order.append(1), nxt(ctx)),
        lambda ctx, nxt: (order.append(2), nxt(ctx)),
    )
    api.middlewares.handler(lambda ctx: order.append("end"))(None)
    assert order == [1, 2, "end"]


@pytest.mark.parametrize(
    "urls, expected",
    [
        (["http://localhost:8888/api"], "/api"),
        (["http://example.com", "http://example.com/v2"], "/v2"),
        ([], ""),
        (["http://example.com"], ""),
    ],
)
def test_get_api_prefix(urls, expected):
    assert get_api_prefix(urls) == expected