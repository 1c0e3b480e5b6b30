from datetime import datetime, timezone

import pytest

from huma.conditional import ErrorDetail, Params, StatusError

NOW = datetime(2021, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
BEFORE = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
AFTER = datetime(2022, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_has_conditional():
    assert Params().has_conditional_params() is False
    assert Params(if_match=["test"]).has_conditional_params() is True
    assert Params(if_none_match=["test"]).has_conditional_params() is True
    assert Params(if_modified_since=datetime.now()).has_conditional_params() is True
    assert Params(if_unmodified_since=datetime.now()).has_conditional_params() is True


def test_resolve_marks_writes():
    p = Params()
    p.resolve("GET")
    assert p.is_write is False
    p.resolve("PUT")
    assert p.is_write is True


def test_if_match():
    p = Params()
    p.if_match = ['"abc123"', 'W/"def456"']
    p.resolve("GET")
    assert p.precondition_failed("abc123", None) is None
    assert p.precondition_failed("def456", None) is None

    with pytest.raises(StatusError) as info:
        p.precondition_failed("bad", None)
    assert info.value.status == 304

    with pytest.raises(StatusError) as info:
        p.precondition_failed("", None)
    assert info.value.status == 304

    p.if_match = ['"abc123"', 'W/"def456"']
    p.resolve("PUT")
    assert p.precondition_failed("abc123", None) is None

    with pytest.raises(StatusError) as info:
        p.precondition_failed("bad", None)
    assert info.value.status == 412
    assert info.value.errors[0].location == "headers.If-Match"
    assert info.value.errors[0].value == ['"abc123"', 'W/"def456"']


def test_if_none_match():
    p = Params()
    p.if_none_match = ['"abc123"', 'W/"def456"']
    p.resolve("GET")
    assert p.precondition_failed("bad", None) is None
    assert p.precondition_failed("", None) is None

    with pytest.raises(StatusError) as info:
        p.precondition_failed("abc123", None)
    assert info.value.status == 304

    with pytest.raises(StatusError) as info:
        p.precondition_failed("def456", None)
    assert info.value.status == 304

    p.if_none_match = ['"abc123"', 'W/"def456"']
    p.resolve("PUT")
    with pytest.raises(StatusError) as info:
        p.precondition_failed("abc123", None)
    assert info.value.status == 412
    assert p.precondition_failed("bad", None) is None

    p.if_none_match = ["*"]
    assert p.precondition_failed("", None) is None

    with pytest.raises(StatusError) as info:
        p.precondition_failed("abc123", None)
    assert info.value.status == 412
    detail = info.value.errors[0]
    assert detail.location == "headers.If-None-Match"
    assert detail.value == "*"
    assert detail.message == (
        "If-None-Match: * precondition failed, found resource with ETag abc123"
    )


def test_if_modified_since():
    p = Params(if_modified_since=NOW)
    p.resolve("GET")
    with pytest.raises(StatusError):
        p.precondition_failed("", BEFORE)
    with pytest.raises(StatusError):
        p.precondition_failed("", NOW)
    assert p.precondition_failed("", AFTER) is None

    p = Params(if_modified_since=NOW)
    p.resolve("PUT")
    with pytest.raises(StatusError) as info:
        p.precondition_failed("", BEFORE)
    assert info.value.status == 412
    assert info.value.errors[0].location == "headers.If-Modified-Since"


def test_if_unmodified_since():
    p = Params(if_unmodified_since=NOW)
    p.resolve("GET")
    assert p.precondition_failed("", BEFORE) is None
    assert p.precondition_failed("", NOW) is None
    with pytest.raises(StatusError):
        p.precondition_failed("", AFTER)

    p = Params(if_unmodified_since=NOW)
    p.resolve("PUT")
    with pytest.raises(StatusError) as info:
        p.precondition_failed("", AFTER)
    assert info.value.status == 412
    assert info.value.errors[0].location == "headers.If-Unmodified-Since"


def test_read_failures_carry_no_details():
    p = Params(if_match=["x"])
    p.resolve("GET")
    with pytest.raises(StatusError) as info:
        p.precondition_failed("y", None)
    assert info.value.errors == []


def test_error_detail_string():
    detail = ErrorDetail(message="bad", location="headers.If-Match", value="v")
    assert str(detail) == "bad (headers.If-Match: v)"