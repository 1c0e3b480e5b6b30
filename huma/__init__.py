"""Building blocks for HTTP APIs: casing, middleware chains, cookies,
conditional requests, routing, body formats and merge patches."""

__version__ = "0.1.0"

__all__ = [
    "api",
    "autoconfig",
    "autopatch",
    "casing",
    "chain",
    "conditional",
    "cookie",
    "flow",
    "formats",
]