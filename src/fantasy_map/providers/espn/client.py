from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fantasy_map.core.config import settings
from fantasy_map.providers.base.client import BaseHttpClient
from fantasy_map.providers.base.errors import ProviderResponseError

ApiItem = dict[str, Any]


def make_http_client() -> BaseHttpClient:
    return BaseHttpClient(
        base_url=settings.espn_base_url,
        timeout_s=settings.http_timeout_s,
        cookies=settings.require_league_cookies(),
    )


@dataclass
class EspnClient:
    http: BaseHttpClient

    def get_league(
        self,
        *,
        season_id: int,
        league_id: int,
        views: list[str],
        scoring_period_id: int | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"view": views}
        if scoring_period_id is not None:
            params["scoringPeriodId"] = scoring_period_id

        data = self.http.get_json(
            f"/seasons/{season_id}/segments/0/leagues/{league_id}", params=params
        )

        messages = data.get("messages") or []
        if messages:
            raise ProviderResponseError(f"espn returned messages: {messages}")

        return data

    def get_player_pool(
        self,
        *,
        season_id: int,
        league_id: int,
        scoring_period_id: int | None = None,
    ) -> list[ApiItem]:
        """Raw player pool items (`kona_player_info` view); each nests the player under "player"."""

        data = self.get_league(
            season_id=season_id,
            league_id=league_id,
            views=["kona_player_info"],
            scoring_period_id=scoring_period_id,
        )
        items = data.get("players")
        if not isinstance(items, list):
            raise ProviderResponseError(f"Expected 'players' list, got: {type(items)}")
        return [i for i in items if isinstance(i, dict)]
