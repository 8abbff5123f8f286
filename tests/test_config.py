from __future__ import annotations

import pytest

from fantasy_map.core.config import Settings


def test_league_cookies_empty_for_public_league() -> None:
    assert Settings(_env_file=None, espn_s2=None, espn_swid=None).require_league_cookies() == {}


def test_league_cookies_require_both_values() -> None:
    cfg = Settings(_env_file=None, espn_s2="s2", espn_swid=None)
    with pytest.raises(RuntimeError, match="ESPN_S2 and ESPN_SWID"):
        cfg.require_league_cookies()

    cfg = Settings(_env_file=None, espn_s2="s2", espn_swid="{swid}")
    assert cfg.require_league_cookies() == {"espn_s2": "s2", "SWID": "{swid}"}


def test_secrets_are_hidden_from_repr() -> None:
    cfg = Settings(_env_file=None, espn_s2="secret-cookie", espn_swid="{swid}")
    assert "secret-cookie" not in repr(cfg)
