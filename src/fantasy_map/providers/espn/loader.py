from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from fantasy_map.cache.store import EntityCache, entity_cache
from fantasy_map.mapping.entity import MappedObject
from fantasy_map.providers.espn.free_agent import FREE_AGENT
from fantasy_map.providers.espn.player import PLAYER

ApiItem = dict[str, Any]


def _player_params(
    item: Any, *, season_id: int | None, scoring_period_id: int | None
) -> dict[str, Any]:
    if not isinstance(item, Mapping):
        # Left to the mapper, which rejects it with the entity and params attached.
        return {"seasonId": season_id, "scoringPeriodId": scoring_period_id}
    player = item.get("player")
    player_id = item.get("id")
    if player_id is None and isinstance(player, dict):
        player_id = player.get("id")
    return {"id": player_id, "seasonId": season_id, "scoringPeriodId": scoring_period_id}


def load_players(
    items: Iterable[ApiItem],
    *,
    season_id: int | None,
    scoring_period_id: int | None,
    cache: EntityCache | None = None,
    refresh: bool = False,
) -> list[MappedObject]:
    """Map raw player pool items to (shared) Player objects."""

    cache = entity_cache if cache is None else cache
    return [
        cache.get_or_create(
            PLAYER,
            item,
            _player_params(item, season_id=season_id, scoring_period_id=scoring_period_id),
            refresh=refresh,
        )
        for item in items
    ]


def load_free_agents(
    items: Iterable[ApiItem],
    *,
    season_id: int | None,
    scoring_period_id: int | None,
) -> list[MappedObject]:
    params = {"seasonId": season_id, "scoringPeriodId": scoring_period_id}
    return [FREE_AGENT.build(item, params) for item in items]
