from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # espn
    espn_base_url: str = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl"
    espn_s2: str | None = Field(default=None, repr=False)
    espn_swid: str | None = Field(default=None, repr=False)
    http_timeout_s: float = 30.0

    # mapping
    entity_cache_enabled: bool = True
    log_level: str = "WARNING"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_league_cookies(self) -> dict[str, str]:
        """Cookies for private leagues; empty when neither is set (public league)."""
        if not self.espn_s2 and not self.espn_swid:
            return {}
        if not self.espn_s2 or not self.espn_swid:
            raise RuntimeError(
                "ESPN_S2 and ESPN_SWID must be set together. Set both in the environment or .env file."
            )
        return {"espn_s2": self.espn_s2, "SWID": self.espn_swid}


settings = Settings()
