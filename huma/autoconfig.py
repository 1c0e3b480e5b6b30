"""CLI auto-configuration settings advertised through an OpenAPI extension.

An :class:`AutoConfig` belongs in the OpenAPI extensions map under the key
``x-cli-config``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AutoConfigVar:
    """A variable the user is prompted for during auto-configuration."""

    description: str = ""
    example: str = ""
    default: Any = None
    enum: list[Any] = field(default_factory=list)
    # Exclude the value from being sent to the server; it is then only used
    # in param templates.
    exclude: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, leaving out empty fields."""
        out: dict[str, Any] = {}
        if self.description:
            out["description"] = self.description
        if self.example:
            out["example"] = self.example
        if self.default is not None:
            out["default"] = self.default
        if self.enum:
            out["enum"] = list(self.enum)
        if self.exclude:
            out["exclude"] = True
        return out


@dataclass
class AutoConfig:
    """An API's automatic configuration settings for the CLI."""

    security: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    prompt: dict[str, AutoConfigVar] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, leaving out empty optional fields."""
        out: dict[str, Any] = {"security": self.security}
        if self.headers:
            out["headers"] = dict(self.headers)
        if self.prompt:
            out["prompt"] = {k: v.to_dict() for k, v in self.prompt.items()}
        out["params"] = dict(self.params)
        return out