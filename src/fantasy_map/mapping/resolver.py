from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from fantasy_map.mapping.fields import MISSING, Direct, Field, FieldSpec


def lookup_path(document: Mapping[str, Any], path: str) -> Any:
    """Read `path` from `document`, returning MISSING when it is not there.

    An exact top-level key wins; otherwise `path` is treated as dotted, walking
    mappings by key and sequences by integer index.
    """

    if path in document:
        return document[path]
    if "." not in path:
        return MISSING

    value: Any = document
    for part in path.split("."):
        if isinstance(value, Mapping):
            if part not in value:
                return MISSING
            value = value[part]
        elif isinstance(value, Sequence) and not isinstance(value, str | bytes):
            try:
                value = value[int(part)]
            except (ValueError, IndexError):
                return MISSING
        else:
            return MISSING
    return value


def resolve_field(
    target: str,
    spec: FieldSpec,
    document: Mapping[str, Any],
    partial: Mapping[str, Any],
    params: Mapping[str, Any],
) -> Any:
    """Produce the value of one target field, or MISSING to leave it off the result."""

    if isinstance(spec, Direct):
        return lookup_path(document, spec.source)

    if not isinstance(spec, Field):
        raise TypeError(f"Unsupported field spec for {target!r}: {type(spec)}")

    raw = lookup_path(document, spec.key or target)

    if spec.parse is not None:
        value = spec.parse(None if raw is MISSING else raw, partial, document, params)
        return MISSING if value is None else value

    if raw is MISSING and spec.has_default:
        return spec.default
    return raw
