from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from fantasy_map.mapping.fields import ResponseMap, response_map
from fantasy_map.mapping.mapper import map_document
from fantasy_map.providers.base.errors import ProviderMappingError


@dataclass(frozen=True, eq=False)
class EntityType:
    """
    Everything the engine needs to know about one kind of entity.

    - `response_map`: ordered target field -> field spec.
    - `flatten`: merge nested containers into the top level before mapping.
    - `flatten_containers`: names of those containers (empty = every nested mapping).
    - `id_params`: constructor params that identify an instance; empty means the
      entity is never cached.

    Hashed by identity, so two descriptors never share cache entries.
    """

    display_name: str
    response_map: ResponseMap
    flatten: bool = False
    flatten_containers: tuple[str, ...] = ()
    id_params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "response_map", response_map(self.response_map))
        clashes = sorted(set(self.response_map) & reserved_field_names())
        if clashes:
            raise ValueError(
                f"{self.display_name}: field names {clashes} clash with MappedObject attributes"
            )
        object.__setattr__(self, "flatten_containers", tuple(self.flatten_containers))
        object.__setattr__(self, "id_params", tuple(self.id_params))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self.response_map)

    @property
    def cacheable(self) -> bool:
        return bool(self.id_params)

    def map_fields(
        self, document: Any, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Map `document` to a plain dict of fields, naming this entity on failure."""

        try:
            return map_document(
                self.response_map,
                document,
                params,
                flatten=self.flatten,
                containers=self.flatten_containers,
            )
        except ProviderMappingError as e:
            raise ProviderMappingError(
                f"Could not build {self.display_name}: {e.message}",
                context={
                    "entity": self.display_name,
                    "params": dict(params or {}),
                    **(e.context or {}),
                },
            ) from e

    def build(self, document: Any, params: Mapping[str, Any] | None = None) -> MappedObject:
        """Build a fresh, uncached instance."""

        return MappedObject(self, self.map_fields(document, params), params)

    def __repr__(self) -> str:
        return f"EntityType({self.display_name!r})"


@dataclass(eq=False)
class MappedObject:
    """The populated result of mapping one raw document onto an entity type."""

    entity_type: EntityType
    _fields: dict[str, Any] = field(default_factory=dict)
    params: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        self._fields = dict(self._fields)
        self.params = MappingProxyType(dict(self.params or {}))

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not regular attributes.
        fields = self.__dict__.get("_fields", {})
        if name in fields:
            return fields[name]
        raise AttributeError(
            f"{self.__dict__.get('entity_type', type(self).__name__)!r} has no field {name!r}"
        )

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def get(self, name: str, default: Any = None) -> Any:
        return self._fields.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._fields)

    def replace_fields(
        self, fields: Mapping[str, Any], params: Mapping[str, Any] | None = None
    ) -> None:
        """Swap in freshly mapped fields while keeping this object's identity."""

        self._fields.clear()
        self._fields.update(fields)
        if params is not None:
            self.params = MappingProxyType(dict(params))

    def __repr__(self) -> str:
        return f"{self.entity_type.display_name}({self._fields!r})"


def reserved_field_names() -> frozenset[str]:
    """Names attribute access on a MappedObject can never resolve to a field."""

    names = {f.name for f in fields(MappedObject)}
    names.update(n for n in vars(MappedObject) if not n.startswith("__"))
    return frozenset(names)

