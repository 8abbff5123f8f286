from fantasy_map.cache.keys import build_identity_key, serialize_identity_key
from fantasy_map.cache.store import EntityCache, entity_cache
from fantasy_map.mapping.entity import EntityType, MappedObject
from fantasy_map.mapping.fields import MISSING, Direct, Field, response_map
from fantasy_map.mapping.mapper import flatten_document, map_document
from fantasy_map.mapping.resolver import resolve_field
from fantasy_map.providers.base.errors import ProviderMappingError

__all__ = [
    "MISSING",
    "Direct",
    "EntityCache",
    "EntityType",
    "Field",
    "MappedObject",
    "ProviderMappingError",
    "build_identity_key",
    "entity_cache",
    "flatten_document",
    "map_document",
    "resolve_field",
    "response_map",
    "serialize_identity_key",
]
