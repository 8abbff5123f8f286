from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from fantasy_map.cache.keys import IdentityKey, build_identity_key, serialize_identity_key
from fantasy_map.core.config import settings
from fantasy_map.mapping.entity import EntityType, MappedObject
from fantasy_map.providers.base.errors import ProviderMappingError

logger = logging.getLogger(__name__)

CacheSlot = tuple[EntityType, IdentityKey]


@dataclass
class _KeyLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


@dataclass
class EntityCache:
    """
    Process-wide identity map for mapped entities.

    - Keyed by (entity type, identity key); no eviction beyond `evict`/`clear`.
    - At most one construction per key is in flight: callers racing on the same key
      wait for the first one and get its object.
    - A failed mapping stores nothing.
    - `evict`/`clear` drop stored objects only. A construction already in flight
      still stores its result, and callers waiting on that key receive it.
    """

    enabled: bool = True

    _store: dict[CacheSlot, MappedObject] = field(default_factory=dict, repr=False)
    # Only holds locks some caller is holding or waiting on.
    _key_locks: dict[CacheSlot, _KeyLock] = field(default_factory=dict, repr=False)
    _guard: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __len__(self) -> int:
        with self._guard:
            return len(self._store)

    @contextmanager
    def _locked(self, slot: CacheSlot) -> Iterator[None]:
        with self._guard:
            entry = self._key_locks.get(slot)
            if entry is None:
                entry = self._key_locks[slot] = _KeyLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._key_locks[slot]

    def _slot(self, entity_type: EntityType, params: Mapping[str, Any] | None) -> CacheSlot | None:
        if not self.enabled:
            return None
        key = build_identity_key(entity_type.id_params, params)
        if key is None:
            return None
        try:
            hash(key)
        except TypeError as e:
            raise ProviderMappingError(
                f"Could not build {entity_type.display_name}: identity params must be hashable ({e})",
                context={"entity": entity_type.display_name, "params": dict(params or {})},
            ) from e
        return (entity_type, key)

    def get_or_create(
        self,
        entity_type: EntityType,
        document: Any,
        params: Mapping[str, Any] | None = None,
        *,
        refresh: bool = False,
    ) -> MappedObject:
        """Return the cached instance for `params`, building it from `document` on a miss.

        On a hit `document` is ignored unless `refresh` is set, in which case the
        cached object is re-mapped in place and keeps its identity.
        """

        slot = self._slot(entity_type, params)
        if slot is None:
            logger.debug("Building uncached %s", entity_type.display_name)
            return entity_type.build(document, params)

        label = serialize_identity_key(entity_type.id_params, slot[1])

        with self._locked(slot):
            with self._guard:
                cached = self._store.get(slot)
            if cached is not None and not refresh:
                logger.debug("Cache hit for %s %s", entity_type.display_name, label)
                return cached

            fields = entity_type.map_fields(document, params)

            if cached is not None:
                logger.debug("Refreshing cached %s %s", entity_type.display_name, label)
                cached.replace_fields(fields, params)
                return cached

            logger.debug("Cache miss for %s %s", entity_type.display_name, label)
            obj = MappedObject(entity_type, fields, params)
            with self._guard:
                self._store[slot] = obj
            return obj

    def get(
        self, entity_type: EntityType, params: Mapping[str, Any] | None
    ) -> MappedObject | None:
        """Peek at the cache without building anything."""

        slot = self._slot(entity_type, params)
        if slot is None:
            return None
        with self._guard:
            return self._store.get(slot)

    def evict(self, entity_type: EntityType, params: Mapping[str, Any] | None) -> bool:
        slot = self._slot(entity_type, params)
        if slot is None:
            return False
        with self._guard:
            return self._store.pop(slot, None) is not None

    def clear(self, entity_type: EntityType | None = None) -> None:
        """Drop every cached instance, or only those of `entity_type`."""

        with self._guard:
            if entity_type is None:
                self._store.clear()
                return
            for slot in [s for s in self._store if s[0] is entity_type]:
                del self._store[slot]


entity_cache = EntityCache(enabled=settings.entity_cache_enabled)
