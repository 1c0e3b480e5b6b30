"""Request and response body formats, selected by content type."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


class UnknownContentTypeError(ValueError):
    """Raised when no format is registered for a content type."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"unknown content type: {content_type}")
        self.content_type = content_type


@dataclass(frozen=True)
class Format:
    """Marshals values to bytes and unmarshals bytes back to values."""

    marshal: Callable[[Any], bytes]
    unmarshal: Callable[[bytes | str], Any]


_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _json_marshal(value: Any) -> bytes:
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    # These characters can only occur inside JSON strings, so escaping them
    # here is safe.
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return (text + "\n").encode("utf-8")


def _json_unmarshal(data: bytes | str) -> Any:
    return json.loads(data)


JSON_FORMAT = Format(marshal=_json_marshal, unmarshal=_json_unmarshal)


def default_formats() -> dict[str, Format]:
    """Return a fresh map of the default formats: JSON by type and suffix."""
    return {"application/json": JSON_FORMAT, "json": JSON_FORMAT}


def select_unmarshal_format(formats: Mapping[str, Format], content_type: str) -> Format:
    """Pick the format to read a request body with.

    Handles e.g. ``application/json; charset=utf-8`` and ``my/format+json``.
    An empty type means JSON.
    """
    start = content_type.find("+") + 1
    end = content_type.find(";")
    if end == -1:
        end = len(content_type)
    if start > end:
        raise UnknownContentTypeError(content_type)
    ct = content_type[start:end] or "application/json"
    try:
        return formats[ct]
    except KeyError:
        raise UnknownContentTypeError(content_type) from None


def select_marshal_format(formats: Mapping[str, Format], content_type: str) -> Format:
    """Pick the format to write a response body with.

    The exact type is tried first, then the suffix after ``+``.
    """
    found = formats.get(content_type)
    if found is None:
        found = formats.get(content_type[content_type.find("+") + 1 :])
    if found is None:
        raise UnknownContentTypeError(content_type)
    return found