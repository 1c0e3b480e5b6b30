import pytest

from huma.cookie import Cookie, NoCookieError, read_cookie, read_cookies


def test_read_all_cookies_in_order():
    headers = [("Cookie", "first=one; second=two")]
    assert read_cookies(headers) == [Cookie("first", "one"), Cookie("second", "two")]


def test_multiple_cookie_headers_and_case_insensitive_name():
    headers = [("Cookie", "a=1"), ("X-Other", "b=2"), ("cookie", "c=3")]
    assert read_cookies(headers) == [Cookie("a", "1"), Cookie("c", "3")]


def test_mapping_headers_are_accepted():
    assert read_cookies({"Cookie": "session=token"}) == [Cookie("session", "token")]


def test_no_headers_gives_empty_list():
    assert read_cookies([]) == []
    assert read_cookies([("Accept", "application/json")]) == []


def test_quotes_are_stripped():
    assert read_cookies([("Cookie", 'q="quoted"')]) == [Cookie("q", "quoted")]


def test_invalid_names_and_values_are_skipped():
    headers = [("Cookie", 'bad name=x; good=y; slash=a\\b; semi="x"y"')]
    cookies = read_cookies(headers)
    assert [c.name for c in cookies] == ["good"]


def test_empty_parts_are_ignored():
    headers = [("Cookie", " ; a=1;; ;b=2 ")]
    assert read_cookies(headers) == [Cookie("a", "1"), Cookie("b", "2")]


def test_read_cookie_returns_first_match():
    headers = [("Cookie", "x=1; y=2; x=3")]
    assert read_cookie(headers, "x") == Cookie("x", "1")
    assert read_cookie(headers, "y").value == "2"


def test_read_cookie_missing_raises():
    with pytest.raises(NoCookieError) as info:
        read_cookie([("Cookie", "a=1")], "missing")
    assert info.value.name == "missing"
    assert "missing" in str(info.value)


def test_read_cookie_skips_invalid_value():
    with pytest.raises(NoCookieError):
        read_cookie([("Cookie", "a=b\\c")], "a")


def test_cookie_without_equals_has_empty_value():
    assert read_cookies([("Cookie", "flag")]) == [Cookie("flag", "")]