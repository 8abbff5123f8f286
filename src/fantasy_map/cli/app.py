from __future__ import annotations

import typer

from fantasy_map.cli.common import configure_logging
from fantasy_map.cli.map import app as map_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(map_app, name="map")


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Overrides LOG_LEVEL."),
) -> None:
    configure_logging(log_level)
