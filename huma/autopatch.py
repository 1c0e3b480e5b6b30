"""Helpers for generating PATCH operations from a resource's GET and PUT.

A generated PATCH accepts a partial body, so its schema is the PUT schema
with every property made optional. Partial updates are applied as JSON Merge
Patch documents.
"""

from __future__ import annotations

import copy
from typing import Any

from huma.casing import join, split

Schema = dict[str, Any]

# Schema keywords carried over unchanged into the optional schema.
_COPIED_KEYS = (
    "type",
    "title",
    "description",
    "format",
    "contentEncoding",
    "default",
    "examples",
    "additionalProperties",
    "enum",
    "minimum",
    "exclusiveMinimum",
    "maximum",
    "exclusiveMaximum",
    "multipleOf",
    "minLength",
    "maxLength",
    "pattern",
    "patternDescription",
    "minItems",
    "maxItems",
    "uniqueItems",
    "minProperties",
    "maxProperties",
    "readOnly",
    "writeOnly",
    "deprecated",
    "dependentRequired",
    "discriminator",
)

_SCHEMA_LISTS = ("oneOf", "anyOf", "allOf")
_NAME_PREFIXES = frozenset({"get", "fetch"})


def make_optional_schema(schema: Schema | None) -> Schema | None:
    """Return a copy of ``schema`` in which no property is required.

    Nested schemas under ``items``, ``properties``, ``oneOf``, ``anyOf``,
    ``allOf`` and ``not`` are made optional too. Extension keys (``x-...``)
    are kept; ``required`` is dropped at every level.
    """
    if schema is None:
        return None

    optional: Schema = {key: schema[key] for key in _COPIED_KEYS if key in schema}
    optional.update(
        (key, value) for key, value in schema.items() if key.startswith("x-")
    )

    if schema.get("items") is not None:
        optional["items"] = make_optional_schema(schema["items"])

    if schema.get("properties") is not None:
        optional["properties"] = {
            name: make_optional_schema(sub)
            for name, sub in schema["properties"].items()
        }

    for key in _SCHEMA_LISTS:
        if schema.get(key) is not None:
            optional[key] = [make_optional_schema(sub) for sub in schema[key]]

    if schema.get("not") is not None:
        optional["not"] = make_optional_schema(schema["not"])

    return optional


def patch_name(operation_id: str) -> str:
    """Guess a resource name from a GET operation ID.

    A leading ``get`` or ``fetch`` word is dropped when other words follow,
    so ``get-thing`` gives ``thing``.
    """
    parts = split(operation_id)
    if len(parts) > 1 and parts[0].lower() in _NAME_PREFIXES:
        parts = parts[1:]
    return join(parts, "-")


def merge_patch(original: Any, patch: Any) -> Any:
    """Apply a JSON Merge Patch (RFC 7386) and return the new document.

    Neither argument is modified. A ``None`` value in an object patch
    removes the key; a patch that is not an object replaces the target.
    """
    if not isinstance(patch, dict):
        return copy.deepcopy(patch)

    target = copy.deepcopy(original) if isinstance(original, dict) else {}
    for key, value in patch.items():
        if value is None:
            target.pop(key, None)
        else:
            target[key] = merge_patch(target.get(key), value)
    return target