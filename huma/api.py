"""The API object: body formats, response transformers and middleware."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any
from urllib.parse import urlparse

from huma.chain import Middleware, Middlewares
from huma.formats import (
    Format,
    default_formats,
    select_marshal_format,
    select_unmarshal_format,
)

Transformer = Callable[[Any, str, Any], Any]


def get_api_prefix(server_urls: Iterable[str]) -> str:
    """Return the path of the first server URL that has one, or ""."""
    for url in server_urls:
        try:
            path = urlparse(url).path
        except ValueError:
            continue
        if path:
            return path
    return ""


class API:
    """An API with its body formats, transformers and middleware stack.

    When ``default_format`` is not given and JSON is available, JSON becomes
    the default. The default format comes first in :attr:`format_keys`.
    """

    def __init__(
        self,
        formats: Mapping[str, Format] | None = None,
        default_format: str = "",
        transformers: Iterable[Transformer] = (),
        middlewares: Iterable[Middleware] = (),
    ) -> None:
        self.formats: dict[str, Format] = dict(
            default_formats() if formats is None else formats
        )
        if not default_format and "application/json" in self.formats:
            default_format = "application/json"
        self.default_format = default_format
        self.format_keys: list[str] = [default_format] if default_format else []
        self.format_keys.extend(self.formats)
        self.transformers: list[Transformer] = list(transformers)
        self.middlewares = Middlewares(middlewares)

    def unmarshal(self, content_type: str, data: bytes | str) -> Any:
        """Decode a request body sent with the given content type.

        Raises :class:`huma.formats.UnknownContentTypeError` for types
        without a registered format.
        """
        return select_unmarshal_format(self.formats, content_type).unmarshal(data)

    def marshal(self, content_type: str, value: Any) -> bytes:
        """Encode a response body for the given content type."""
        return select_marshal_format(self.formats, content_type).marshal(value)

    def transform(self, ctx: Any, status: str, value: Any) -> Any:
        """Run every transformer in order over a response body value.

        ``status`` is the response key such as "200". Exceptions raised by a
        transformer propagate unchanged.
        """
        for transformer in self.transformers:
            value = transformer(ctx, status, value)
        return value

    def use_middleware(self, *middlewares: Middleware) -> None:
        """Append middleware to the stack run for every operation."""
        self.middlewares.extend(middlewares)