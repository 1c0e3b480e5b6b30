"""Middleware chains run around an endpoint handler."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Handler = Callable[[Any], None]
Middleware = Callable[[Any, Handler], None]


def _wrap(middleware: Middleware, nxt: Handler) -> Handler:
    def handler(ctx: Any) -> None:
        middleware(ctx, nxt)

    return handler


class Middlewares(list):
    """A list of middleware functions called as ``middleware(ctx, next)``.

    Middleware run in the order they were added, each deciding whether and
    with which context to call ``next``.
    """

    def handler(self, endpoint: Handler) -> Handler:
        """Return a handler running the chain with ``endpoint`` last."""
        wrapped = endpoint
        for middleware in reversed(self):
            wrapped = _wrap(middleware, wrapped)
        return wrapped