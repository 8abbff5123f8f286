from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Any

import typer

from fantasy_map.cli.common import dump_objects, espn_client_scope
from fantasy_map.providers.base.errors import ProviderError
from fantasy_map.providers.espn.loader import load_free_agents, load_players

app = typer.Typer(help="Map raw fantasy API payloads onto entities.")


class EntityChoice(StrEnum):
    PLAYER = "player"
    FREE_AGENT = "free-agent"


def _read_items(path: Path) -> list[dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and isinstance(data.get("players"), list):
        data = data["players"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise typer.BadParameter(f"Expected a JSON object or list in {path}")
    return data


@app.command("file")
def map_file_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved JSON payload."),
    entity: EntityChoice = typer.Option(EntityChoice.PLAYER, "--entity", help="Entity to map."),
    season_id: int | None = typer.Option(None, "--season-id", help="Season (e.g. 2023)."),
    scoring_period_id: int | None = typer.Option(
        None, "--scoring-period-id", help="Scoring period / week (e.g. 1)."
    ),
) -> None:
    """Map a saved payload (object, list, or {"players": [...]}) and print JSON."""

    items = _read_items(path)
    try:
        if entity is EntityChoice.PLAYER:
            objects = load_players(
                items, season_id=season_id, scoring_period_id=scoring_period_id
            )
        else:
            objects = load_free_agents(
                items, season_id=season_id, scoring_period_id=scoring_period_id
            )
    except ProviderError as e:
        typer.echo(f"Mapping failed: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(dump_objects(objects))


@app.command("players")
def map_players_cmd(
    league_id: int = typer.Option(..., "--league-id", help="ESPN league id."),
    season_id: int = typer.Option(..., "--season-id", help="Season (e.g. 2023)."),
    scoring_period_id: int | None = typer.Option(
        None, "--scoring-period-id", help="Scoring period / week (e.g. 1)."
    ),
) -> None:
    """Fetch a league's player pool and print the mapped players."""

    try:
        with espn_client_scope() as client:
            items = client.get_player_pool(
                season_id=season_id,
                league_id=league_id,
                scoring_period_id=scoring_period_id,
            )
        objects = load_players(items, season_id=season_id, scoring_period_id=scoring_period_id)
    except ProviderError as e:
        typer.echo(f"Request failed: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(dump_objects(objects))
