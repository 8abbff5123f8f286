from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fantasy_map.mapping.entity import EntityType
from fantasy_map.mapping.fields import Field
from fantasy_map.mapping.transforms import from_epoch_ms, lookup, lookup_each, to_int
from fantasy_map.providers.espn.constants import (
    NFL_TEAM_ID_TO_ABBREVIATION,
    NFL_TEAM_ID_TO_NAME,
    SLOT_ID_TO_POSITION,
    STAT_SOURCE_ACTUAL,
    STAT_SPLIT_SCORING_PERIOD,
    STAT_SPLIT_SEASON,
)
from fantasy_map.providers.espn.stats import parse_player_stats


def total_points(
    stats: Any,
    _partial: Mapping[str, Any],
    _document: Mapping[str, Any],
    params: Mapping[str, Any],
) -> Any:
    """Actual fantasy points for the season/period named in the constructor params.

    With a scoring period this is that period's total; without one, the season total.
    """

    scoring_period_id = params.get("scoringPeriodId")
    return parse_player_stats(
        stats,
        season_id=params.get("seasonId"),
        scoring_period_id=scoring_period_id,
        stat_key="appliedTotal",
        stat_source_id=STAT_SOURCE_ACTUAL,
        stat_split_type_id=(
            STAT_SPLIT_SEASON if scoring_period_id is None else STAT_SPLIT_SCORING_PERIOD
        ),
    )


# An NFL player, independent of any fantasy team. Raw items come from the player pool
# with the player nested under "player".
PLAYER = EntityType(
    display_name="Player",
    flatten=True,
    flatten_containers=("player",),
    id_params=("id", "seasonId", "scoringPeriodId"),
    response_map={
        "id": "id",
        "firstName": "firstName",
        "fullName": "fullName",
        "lastName": "lastName",
        "jerseyNumber": Field(key="jersey", parse=to_int),
        "proTeam": Field(key="proTeamId", parse=lookup(NFL_TEAM_ID_TO_NAME)),
        "proTeamAbbreviation": Field(key="proTeamId", parse=lookup(NFL_TEAM_ID_TO_ABBREVIATION)),
        "defaultPosition": Field(key="defaultPositionId", parse=lookup(SLOT_ID_TO_POSITION)),
        "totalPoints": Field(key="stats", parse=total_points),
        "eligiblePositions": Field(key="eligibleSlots", parse=lookup_each(SLOT_ID_TO_POSITION)),
        "averageDraftPosition": "ownership.averageDraftPosition",
        "auctionValueAverage": "ownership.auctionValueAverage",
        "locked": "lineupLocked",
        "percentChange": "ownership.percentChange",
        "percentStarted": "ownership.percentStarted",
        "percentOwned": "ownership.percentOwned",
        "acquiredDate": Field(key="acquisitionDate", parse=from_epoch_ms),
        "availabilityStatus": "status",
        "isDroppable": "droppable",
        "isInjured": "injured",
        "injuryStatus": "injuryStatus",
        "outlooksByWeek": "outlooks.outlooksByWeek",
    },
)
