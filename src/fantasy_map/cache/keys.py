from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

IdentityKey: TypeAlias = tuple[Any, ...]


def build_identity_key(
    id_params: Sequence[str],
    params: Mapping[str, Any] | None,
) -> IdentityKey | None:
    """Derive a cache key from the identity params, in declaration order.

    Returns None when the entity declares no identity params or any of them is
    missing/None; such entities are always built fresh.
    """

    if not id_params or params is None:
        return None

    values: list[Any] = []
    for name in id_params:
        value = params.get(name)
        if value is None:
            return None
        values.append(value)
    return tuple(values)


def serialize_identity_key(id_params: Sequence[str], key: IdentityKey | None) -> str:
    """Render a key as `id=7;seasonId=2023;` for logs and error context."""

    if key is None:
        return "<uncacheable>"
    return "".join(f"{name}={value};" for name, value in zip(id_params, key, strict=True))
