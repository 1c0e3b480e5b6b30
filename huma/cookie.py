"""Read cookies sent by a client in ``Cookie`` request headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Union

Headers = Union[Mapping[str, str], Iterable[tuple[str, str]]]

_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~"
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)
_HTTP_SPACE = " \t\r\n"


@dataclass(frozen=True)
class Cookie:
    """A single cookie sent by the client."""

    name: str
    value: str


class NoCookieError(LookupError):
    """Raised when a named cookie is not present in the request."""

    def __init__(self, name: str) -> None:
        super().__init__(f"named cookie not present: {name}")
        self.name = name


def _header_items(headers: Headers) -> Iterable[tuple[str, str]]:
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def _cookie_lines(headers: Headers) -> list[str]:
    return [
        value for name, value in _header_items(headers) if name.lower() == "cookie"
    ]


def _is_valid_name(raw: str) -> bool:
    return bool(raw) and all(c in _TOKEN_CHARS for c in raw)


def _is_valid_value_char(c: str) -> bool:
    return 0x20 <= ord(c) < 0x7F and c not in '";\\'


def _parse_value(raw: str) -> str | None:
    if len(raw) > 1 and raw[0] == '"' and raw[-1] == '"':
        raw = raw[1:-1]
    if all(_is_valid_value_char(c) for c in raw):
        return raw
    return None


def _parse(lines: Iterable[str], wanted: str = "") -> Iterator[Cookie]:
    for line in lines:
        for part in line.strip(_HTTP_SPACE).split(";"):
            part = part.strip(_HTTP_SPACE)
            if not part:
                continue
            name, _, raw_value = part.partition("=")
            name = name.strip(_HTTP_SPACE)
            if not _is_valid_name(name):
                continue
            if wanted and name != wanted:
                continue
            value = _parse_value(raw_value)
            if value is None:
                continue
            yield Cookie(name, value)


def read_cookie(headers: Headers, name: str) -> Cookie:
    """Return the first cookie called ``name``.

    ``headers`` is a mapping or an iterable of ``(name, value)`` pairs; header
    names are matched case-insensitively. Raises :class:`NoCookieError` when
    no such cookie was sent.
    """
    for cookie in _parse(_cookie_lines(headers), name):
        return cookie
    raise NoCookieError(name)


def read_cookies(headers: Headers) -> list[Cookie]:
    """Return every valid cookie found in the ``Cookie`` headers, in order."""
    return list(_parse(_cookie_lines(headers)))