from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fantasy_map.cache.store import entity_cache
from fantasy_map.cli.app import app


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "map" in result.stdout


def test_cli_maps_saved_player_pool(tmp_path: Path) -> None:
    entity_cache.clear()
    payload = {
        "players": [
            {
                "id": 15847,
                "status": "FREEAGENT",
                "player": {"id": 15847, "fullName": "Travis Kelce", "proTeamId": 12, "jersey": "87"},
            }
        ]
    }
    path = tmp_path / "pool.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(
        app, ["map", "file", str(path), "--season-id", "2023", "--scoring-period-id", "1"]
    )

    assert result.exit_code == 0, result.output
    (player,) = json.loads(result.stdout)
    assert player["fullName"] == "Travis Kelce"
    assert player["proTeam"] == "Kansas City Chiefs"
    assert player["jerseyNumber"] == 87
    entity_cache.clear()


@pytest.mark.parametrize(
    ("entity", "display_name"), [("player", "Player"), ("free-agent", "FreeAgentPlayer")]
)
def test_cli_reports_mapping_failures(tmp_path: Path, entity: str, display_name: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1, 2]), encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["map", "file", str(path), "--entity", entity])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Mapping failed" in result.output
    assert display_name in result.output
