from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final, TypeAlias


class _Missing:
    """Marker for a value the raw document never supplied."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

# (raw value at key, fields mapped so far, raw document, constructor params) -> value
Transform: TypeAlias = Callable[
    [Any, Mapping[str, Any], Mapping[str, Any], Mapping[str, Any]],
    Any,
]


@dataclass(frozen=True)
class Direct:
    """Copy one source key onto the target field as-is."""

    source: str


@dataclass(frozen=True)
class Field:
    """Structured field spec.

    - `key`: source key to read; defaults to the target field name.
    - `parse`: transform computing the final value. It is fully responsible for
      absent values; returning None (or MISSING) omits the field.
    - `default`: used when the source key is absent and no transform is set.
    """

    key: str | None = None
    parse: Transform | None = None
    default: Any = MISSING

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


FieldSpec: TypeAlias = Direct | Field
ResponseMap: TypeAlias = Mapping[str, FieldSpec]


def response_map(entries: Mapping[str, FieldSpec | str]) -> ResponseMap:
    """Normalize and freeze a response map, keeping declaration order.

    Bare strings become `Direct` lookups.
    """

    normalized: dict[str, FieldSpec] = {}
    for target, spec in entries.items():
        if not isinstance(target, str) or not target:
            raise TypeError(f"Response map target names must be non-empty strings, got {target!r}")
        if isinstance(spec, str):
            normalized[target] = Direct(spec)
        elif isinstance(spec, Direct | Field):
            normalized[target] = spec
        else:
            raise TypeError(f"Unsupported field spec for {target!r}: {type(spec)}")
    return MappingProxyType(normalized)
