from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from fantasy_map.core.config import settings
from fantasy_map.mapping.entity import MappedObject
from fantasy_map.providers.espn.client import EspnClient, make_http_client


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@contextmanager
def espn_client_scope() -> Iterator[EspnClient]:
    """
    Context-managed ESPN client for CLI commands.
    Ensures the underlying HTTP connection pool is closed.
    """
    http = make_http_client()
    try:
        yield EspnClient(http=http)
    finally:
        http.close()


def dump_objects(objects: Sequence[MappedObject]) -> str:
    return json.dumps([o.to_dict() for o in objects], indent=2, default=str)
