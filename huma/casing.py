"""Convert identifiers between CamelCase, snake_case, kebab-case and others.

The central piece is :func:`split`, which breaks almost any input into words
that can then be re-joined with any casing style.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable, Iterable, Sequence

TransformFunc = Callable[[str], str]

COMMON_INITIALISMS = frozenset(
    {
        "ACL", "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML",
        "HTTP", "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS",
        "RPC", "SLA", "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP", "UI",
        "UID", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XMPP", "XSRF",
        "XSS",
        # Media initialisms
        "1080P", "2D", "3D", "4K", "8K", "AAC", "AC3", "CDN", "DASH", "DRM",
        "DVR", "EAC3", "FPS", "GOP", "H264", "H265", "HD", "HLS", "MJPEG",
        "MP2T", "MP3", "MP4", "MPEG2", "MPEG4", "NTSC", "PCM", "RGB", "RGBA",
        "RTMP", "RTP", "SCTE", "SCTE35", "SMPTE", "UPID", "UPIDS", "VOD",
        "YUV420", "YUV422", "YUV444",
    }
)

COMMON_SUFFIXES = frozenset(
    {
        "D",  # 2D, 3D
        "GB",  # 100GB
        "K",  # 4K, 8K
        "KB",  # 100KB
        "KBPS",  # 64kbps
        "MB",  # 100MB
        "MPBS",  # 2500mbps
        "P",  # 1080P
        "TB",  # 100TB
    }
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Split states.
_NONE, _LOWER, _FIRST_UPPER, _UPPER, _SYMBOL = range(5)


def identity(part: str) -> str:
    """Return the part as a plain string, with its text unchanged."""
    return str(part)


def initialism(part: str) -> str:
    """Upper-case common initialisms such as ID or HTTP."""
    upper = part.upper()
    return upper if upper in COMMON_INITIALISMS else part


def _category(c: str) -> str:
    return unicodedata.category(c)


def _is_upper(c: str) -> bool:
    return _category(c) == "Lu"


def _is_lower(c: str) -> bool:
    return _category(c) == "Ll"


def _is_letter(c: str) -> bool:
    return _category(c).startswith("L")


def _is_break(c: str) -> bool:
    return c.isspace() or _category(c).startswith("P")


def split(value: str) -> list[str]:
    """Split a value into words, honouring casing, numbers and symbols.

    >>> split("HTTPServer_2020")
    ['HTTP', 'Server', '2020']
    """
    results: list[str] = []
    start = 0
    state = _NONE

    for i, c in enumerate(value):
        if _is_break(c):
            if i > start:
                results.append(value[start:i])
            start = i + 1
            state = _NONE
            continue

        upper = _is_upper(c)
        if state not in (_FIRST_UPPER, _UPPER) and upper:
            if start != i:
                results.append(value[start:i])
                start = i
            state = _FIRST_UPPER
        elif state == _FIRST_UPPER and upper:
            state = _UPPER
        elif state != _SYMBOL and not _is_letter(c):
            if start != i:
                results.append(value[start:i])
                start = i
            state = _SYMBOL
        elif state != _LOWER and _is_lower(c):
            if state == _UPPER:
                # The last upper-case letter begins the lower-case word,
                # e.g. HTTPServer.
                if i > 0 and start != i - 1:
                    results.append(value[start : i - 1])
                    start = i - 1
            elif state != _FIRST_UPPER:
                if i > 0 and start != i:
                    results.append(value[start:i])
                    start = i
            state = _LOWER

    if start < len(value):
        results.append(value[start:])

    return results


def join(parts: Iterable[str], sep: str, *transforms: TransformFunc) -> str:
    """Join parts with ``sep`` after applying each transform in order.

    A part that a transform turns into the empty string is dropped.
    """
    kept: list[str] = []
    for part in parts:
        for transform in transforms:
            part = transform(part)
            if part == "":
                break
        else:
            kept.append(part)
    return sep.join(kept)


def _is_int(part: str) -> bool:
    if not _INT_RE.fullmatch(part):
        return False
    return _INT64_MIN <= int(part) <= _INT64_MAX


def merge_numbers(parts: Sequence[str], *suffixes: str) -> list[str]:
    """Merge number parts with adjacent letter parts.

    This gives ``h264`` instead of ``h_264``. Suffixes right-align a number
    with the following word, e.g. ``K`` gives ``MODE_4K``. With no suffixes a
    common default set is used; pass an empty string to disable it.
    """
    if suffixes:
        lookup = {word.upper() for word in suffixes}
    else:
        lookup = set(COMMON_SUFFIXES)

    results: list[str] = []
    prev_num = False
    parts = list(parts)
    i = 0
    while i < len(parts):
        part = parts[i]
        if _is_int(part):
            if i < len(parts) - 1 and parts[i + 1].upper() in lookup:
                results.append(part + parts[i + 1])
                i += 2
                continue
            if not prev_num:
                if i == 0:
                    results.append(part)
                else:
                    results[-1] += part
                prev_num = True
                i += 1
                continue
            prev_num = True
        else:
            if i == 1 and prev_num:
                results[0] += part
                prev_num = False
                i += 1
                continue
            prev_num = False
        results.append(part)
        i += 1

    return results


def _is_title_separator(c: str) -> bool:
    if c.isascii():
        return not (c.isalnum() or c == "_")
    if _is_letter(c) or _category(c) == "Nd":
        return False
    return c.isspace()


def _title(value: str) -> str:
    out: list[str] = []
    prev = " "
    for c in value:
        if _is_title_separator(prev):
            titled = c.title()
            out.append(titled if len(titled) == 1 else c)
        else:
            out.append(c)
        prev = c
    return "".join(out)


def _defaults(transforms: tuple[TransformFunc, ...]) -> tuple[TransformFunc, ...]:
    return transforms if transforms else (str.lower,)


def camel(value: str, *transforms: TransformFunc) -> str:
    """Return a CamelCase version of the input.

    Parts are lower-cased unless other transforms are given; pass
    :func:`identity` to keep them as they are.
    """
    return join(split(value), "", *_defaults(transforms), _title)


def lower_camel(value: str, *transforms: TransformFunc) -> str:
    """Return a lowerCamelCase version of the input."""
    result = camel(value, *transforms)
    if not result:
        return result
    first = result[0].lower()
    if len(first) != 1:
        first = result[0]
    return first + result[1:]


def snake(value: str, *transforms: TransformFunc) -> str:
    """Return a snake_case version of the input."""
    return join(merge_numbers(split(value)), "_", *_defaults(transforms))


def kebab(value: str, *transforms: TransformFunc) -> str:
    """Return a kebab-case version of the input."""
    return join(merge_numbers(split(value)), "-", *_defaults(transforms))