from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from fantasy_map.mapping.fields import Transform


def lookup(table: Mapping[Any, Any]) -> Transform:
    """Transform translating a provider code through `table`."""

    def parse(value: Any, *_: Any) -> Any:
        if value is None:
            return None
        return table.get(value)

    return parse


def lookup_each(table: Mapping[Any, Any]) -> Transform:
    """Transform translating a list of provider codes; unknown codes become None."""

    def parse(value: Any, *_: Any) -> Any:
        if not isinstance(value, list | tuple):
            return None
        return [table.get(code) for code in value]

    return parse


def to_int(value: Any, *_: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def from_epoch_ms(value: Any, *_: Any) -> datetime | None:
    if not isinstance(value, int | float) or isinstance(value, bool) or not value:
        return None
    return datetime.fromtimestamp(value / 1000.0, tz=UTC)
