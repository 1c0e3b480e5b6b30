"""A small HTTP router with named parameters, wildcards and route groups.

Patterns are split on ``/``. A segment starting with ``:`` is a named
parameter, optionally restricted by a regular expression after ``|``
(``:age|^[0-9]{1,3}$``). A trailing ``/...`` matches the rest of the path.
Registering GET also registers HEAD. Routes with no methods match every
method. OPTIONS requests and 405 responses are handled automatically.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from urllib.parse import unquote_plus

ALL_METHODS = (
    "GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE",
)

_compiled_patterns: dict[str, re.Pattern[str]] = {}
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass
class Request:
    """An incoming request as seen by the router.

    ``path`` is the escaped URL path; a query string after ``?`` is moved
    into ``query``.
    """

    method: str = "GET"
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    query: str = ""
    params: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if "?" in self.path:
            self.path, _, query = self.path.partition("?")
            if not self.query:
                self.query = query


@dataclass
class Response:
    """A response being built by a handler."""

    status: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def write(self, data: bytes | str) -> None:
        """Append data to the response body."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.body += data


Handler = Callable[[Request, Response], None]
Middleware = Callable[[Handler], Handler]


def param(request: Request, name: str) -> str:
    """Return the value of a named parameter or wildcard, or "" if absent."""
    return request.params.get(name, "")


def _error(response: Response, text: str, status: int) -> None:
    response.headers["Content-Type"] = "text/plain; charset=utf-8"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.status = status
    response.write(text + "\n")


def _default_not_found(request: Request, response: Response) -> None:
    _error(response, "404 page not found", 404)


def _default_method_not_allowed(request: Request, response: Response) -> None:
    _error(response, "Method Not Allowed", 405)


def _default_options(request: Request, response: Response) -> None:
    response.status = 204


def _query_unescape(value: str) -> str | None:
    if _BAD_ESCAPE.search(value):
        return None
    return unquote_plus(value)


@dataclass
class _Route:
    method: str
    segments: list[str]
    wildcard: bool
    handler: Handler

    def match(self, url_segments: list[str]) -> dict[str, str] | None:
        if not self.wildcard and len(url_segments) != len(self.segments):
            return None

        params: dict[str, str] = {}
        for i, segment in enumerate(self.segments):
            if i > len(url_segments) - 1:
                return None

            if segment == "...":
                params["..."] = "/".join(url_segments[i:])
                return params

            if segment.startswith(":"):
                key, has_rx, rx = segment[1:].partition("|")
                value = _query_unescape(url_segments[i])
                if value is None:
                    return None
                if has_rx:
                    if _compiled_patterns[rx].search(value):
                        params[key] = value
                        continue
                elif value != "":
                    params[key] = value
                    continue
                return None

            if url_segments[i] != segment:
                return None

        return params


class Mux:
    """Dispatches requests to handlers by path pattern and method."""

    def __init__(self) -> None:
        self.not_found: Handler = _default_not_found
        self.method_not_allowed: Handler = _default_method_not_allowed
        self.options: Handler = _default_options
        self._routes: list[_Route] = []
        self._middlewares: list[Middleware] = []

    def handle(self, pattern: str, handler: Handler, *methods: str) -> None:
        """Register ``handler`` for ``pattern`` and the given methods."""
        method_list = list(methods)
        if "GET" in method_list and "HEAD" not in method_list:
            method_list.append("HEAD")
        if not method_list:
            method_list = list(ALL_METHODS)

        segments = pattern.split("/")
        for method in method_list:
            self._routes.append(
                _Route(
                    method=method.upper(),
                    segments=list(segments),
                    wildcard=pattern.endswith("/..."),
                    handler=self._wrap(handler),
                )
            )

        for segment in segments:
            if segment.startswith(":"):
                _, has_rx, rx = segment.partition("|")
                if has_rx:
                    _compiled_patterns[rx] = re.compile(rx)

    def use(self, *middlewares: Middleware) -> None:
        """Add middleware of the form ``middleware(next_handler) -> handler``."""
        self._middlewares.extend(middlewares)

    def group(self, fn: Callable[[Mux], None]) -> None:
        """Call ``fn`` with a mux whose added middleware applies only inside."""
        sub = copy.copy(self)
        sub._middlewares = list(self._middlewares)
        fn(sub)

    def serve(self, request: Request) -> Response:
        """Dispatch a request and return the response."""
        response = Response()
        url_segments = request.path.split("/")
        allowed: list[str] = []

        for route in self._routes:
            params = route.match(url_segments)
            if params is None:
                continue
            if request.method == route.method:
                matched = replace(request, params={**request.params, **params})
                route.handler(matched, response)
                return response
            if route.method not in allowed:
                allowed.append(route.method)

        if allowed:
            response.headers["Allow"] = ", ".join([*allowed, "OPTIONS"])
            if request.method == "OPTIONS":
                self._wrap(self.options)(request, response)
            else:
                self._wrap(self.method_not_allowed)(request, response)
            return response

        self._wrap(self.not_found)(request, response)
        return response

    def _wrap(self, handler: Handler) -> Handler:
        for middleware in reversed(self._middlewares):
            handler = middleware(handler)
        return handler