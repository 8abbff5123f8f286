from __future__ import annotations

from typing import Any


def _find_stat_row(
    stats: list[Any],
    *,
    season_id: int | None,
    scoring_period_id: int | None,
    stat_source_id: int,
    stat_split_type_id: int,
) -> dict[str, Any] | None:
    for row in stats:
        if not isinstance(row, dict):
            continue
        if season_id is not None and row.get("seasonId") != season_id:
            continue
        if row.get("statSourceId") != stat_source_id:
            continue
        if row.get("statSplitTypeId") != stat_split_type_id:
            continue
        if scoring_period_id is not None and row.get("scoringPeriodId") != scoring_period_id:
            continue
        return row
    return None


def parse_player_stats(
    stats: Any,
    *,
    season_id: int | None,
    scoring_period_id: int | None,
    stat_key: str,
    stat_source_id: int,
    stat_split_type_id: int,
) -> Any:
    """Pick one value out of a player's `stats` list.

    Rows are matched on season, source (actual/projected), split type (season total or
    single scoring period) and, when given, scoring period. Returns None when nothing
    matches so callers can leave the field off.
    """

    if not isinstance(stats, list):
        return None

    row = _find_stat_row(
        stats,
        season_id=season_id,
        scoring_period_id=scoring_period_id,
        stat_source_id=stat_source_id,
        stat_split_type_id=stat_split_type_id,
    )
    if row is None:
        return None
    return row.get(stat_key)
