from __future__ import annotations

from fantasy_map.mapping.entity import EntityType
from fantasy_map.mapping.fields import Field
from fantasy_map.providers.espn.player import total_points

# One entry of the league's player pool as seen by a fantasy team. Never cached: the
# same player's availability differs between leagues.
FREE_AGENT = EntityType(
    display_name="FreeAgentPlayer",
    response_map={
        "playerId": "id",
        "onTeamId": Field(key="onTeamId", default=0),
        "availabilityStatus": "status",
        "isRosterLocked": Field(key="rosterLocked", default=False),
        "isTradeLocked": Field(key="tradeLocked", default=False),
        "keeperValue": "keeperValue",
        "totalPoints": Field(key="player.stats", parse=total_points),
    },
)
