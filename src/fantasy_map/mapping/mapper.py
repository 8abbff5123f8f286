from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from fantasy_map.mapping.fields import MISSING, ResponseMap
from fantasy_map.mapping.resolver import resolve_field
from fantasy_map.providers.base.errors import ProviderMappingError


def flatten_document(
    document: Mapping[str, Any],
    containers: Iterable[str] = (),
) -> dict[str, Any]:
    """Merge one level of nested containers into a shallow copy of `document`.

    With no `containers` given, every mapping-valued child is treated as one.
    Keys already present at the top level are never overwritten, and grandchildren
    stay nested.
    """

    names = tuple(containers)
    if not names:
        names = tuple(k for k, v in document.items() if isinstance(v, Mapping))

    flat = dict(document)
    for name in names:
        nested = document.get(name)
        if not isinstance(nested, Mapping):
            continue
        for key, value in nested.items():
            flat.setdefault(key, value)
    return flat


def map_document(
    fields: ResponseMap,
    document: Any,
    params: Mapping[str, Any] | None = None,
    *,
    flatten: bool = False,
    containers: Iterable[str] = (),
) -> dict[str, Any]:
    """Run every field spec over `document` in declaration order.

    Transforms see the fields mapped so far, so later entries may build on earlier
    ones. Fields that resolve to nothing are left off the result. Any error raised
    by a transform aborts the whole mapping.
    """

    if not isinstance(document, Mapping):
        raise ProviderMappingError(
            f"Expected a JSON object to map, got {type(document).__name__}",
        )

    working = flatten_document(document, containers) if flatten else document
    view_params = MappingProxyType(dict(params or {}))

    result: dict[str, Any] = {}
    partial = MappingProxyType(result)

    for target, spec in fields.items():
        try:
            value = resolve_field(target, spec, working, partial, view_params)
        except Exception as e:
            raise ProviderMappingError(
                f"Failed to resolve field {target!r}: {type(e).__name__}: {e}",
                context={"field": target},
            ) from e

        if value is not MISSING:
            result[target] = value

    return result
