"""Conditional HTTP requests using ETags and last-modified times.

Supports the ``If-Match``, ``If-None-Match``, ``If-Modified-Since`` and
``If-Unmodified-Since`` request headers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

_WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_ZERO_TIME_TEXT = "Mon, 01 Jan 0001 00:00:00 GMT"


@dataclass
class ErrorDetail:
    """Details about one error: what went wrong, where, and the bad value."""

    message: str = ""
    location: str = ""
    value: Any = None

    def __str__(self) -> str:
        return f"{self.message} ({self.location}: {self.value})"


class StatusError(Exception):
    """An error carrying the HTTP status code to respond with."""

    def __init__(
        self, status: int, detail: str = "", errors: list[ErrorDetail] | None = None
    ) -> None:
        super().__init__(detail or HTTPStatus(status).phrase)
        self.status = status
        self.title = HTTPStatus(status).phrase
        self.detail = detail
        self.errors = list(errors or [])


def _trim_etag(value: str) -> str:
    if value.startswith("W/") and len(value) > 2:
        value = value[2:]
    return value.strip('"')


def _utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _after(moment: datetime | None, other: datetime) -> bool:
    if moment is None:
        return False
    return _utc(moment) > _utc(other)


def _http_date(moment: datetime | None) -> str:
    if moment is None:
        return _ZERO_TIME_TEXT
    m = _utc(moment)
    return (
        f"{_DAYS[m.weekday()]}, {m.day:02d} {_MONTHS[m.month - 1]} {m.year:04d} "
        f"{m.hour:02d}:{m.minute:02d}:{m.second:02d} GMT"
    )


@dataclass
class Params:
    """Conditional request headers sent by a client.

    Reads that fail a precondition get a 304 Not Modified; writes get a
    412 Precondition Failed with details of each failed check.
    """

    if_match: list[str] = field(default_factory=list)
    if_none_match: list[str] = field(default_factory=list)
    if_modified_since: datetime | None = None
    if_unmodified_since: datetime | None = None
    is_write: bool = field(default=False, repr=False)

    def resolve(self, method: str) -> None:
        """Mark the request as a write when the method modifies resources."""
        if method.upper() in _WRITE_METHODS:
            self.is_write = True

    def has_conditional_params(self) -> bool:
        """Return True if any conditional header was sent."""
        return bool(
            self.if_match
            or self.if_none_match
            or self.if_modified_since is not None
            or self.if_unmodified_since is not None
        )

    def precondition_failed(self, etag: str, modified: datetime | None) -> None:
        """Raise :class:`StatusError` if the conditions fail for this resource.

        ``etag`` is the resource's current ETag ("" if none exists) and
        ``modified`` its last-modified time, or None if unknown.
        """
        failed = False
        details: list[ErrorDetail] = []
        found = f"found resource with ETag {etag}" if etag else "found no existing resource"

        for match in self.if_none_match:
            trimmed = _trim_etag(match)
            if trimmed == etag or (trimmed == "*" and etag != ""):
                if self.is_write:
                    details.append(
                        ErrorDetail(
                            message=f"If-None-Match: {match} precondition failed, {found}",
                            location="headers.If-None-Match",
                            value=match,
                        )
                    )
                failed = True

        if self.if_match and not any(_trim_etag(m) == etag for m in self.if_match):
            if self.is_write:
                details.append(
                    ErrorDetail(
                        message=f"If-Match precondition failed, {found}",
                        location="headers.If-Match",
                        value=list(self.if_match),
                    )
                )
            failed = True

        if self.if_modified_since is not None and not _after(
            modified, self.if_modified_since
        ):
            if self.is_write:
                since = _http_date(self.if_modified_since)
                details.append(
                    ErrorDetail(
                        message=(
                            f"If-Modified-Since: {since} precondition failed, "
                            f"resource was modified at {_http_date(modified)}"
                        ),
                        location="headers.If-Modified-Since",
                        value=since,
                    )
                )
            failed = True

        if self.if_unmodified_since is not None and _after(
            modified, self.if_unmodified_since
        ):
            if self.is_write:
                since = _http_date(self.if_unmodified_since)
                details.append(
                    ErrorDetail(
                        message=(
                            f"If-Unmodified-Since: {since} precondition failed, "
                            f"resource was modified at {_http_date(modified)}"
                        ),
                        location="headers.If-Unmodified-Since",
                        value=since,
                    )
                )
            failed = True

        if failed:
            if self.is_write:
                status = HTTPStatus.PRECONDITION_FAILED
                raise StatusError(int(status), status.phrase, details)
            raise StatusError(int(HTTPStatus.NOT_MODIFIED))