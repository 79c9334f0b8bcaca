"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class WikiSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WIKISEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    api_url: HttpUrl = Field(
        default="https://terraria.wiki.gg/api.php",
        description="MediaWiki api.php endpoint queried with list=search.",
    )
    article_base_url: HttpUrl = Field(
        default="https://terraria.wiki.gg/wiki/",
        description="Prefix that percent-encoded article titles are appended to.",
    )
    user_agent: str = Field(
        default="PowerToys/Community.PowerToys.Run.Plugin.TerrariaWiki",
        min_length=1,
    )
    icon_path: str = "Images/favicon.png"
    # None keeps the request unbounded, like the launcher plugin did.
    request_timeout_seconds: float | None = Field(default=None, gt=0)

    def search_endpoint(self) -> str:
        return str(self.api_url)

    def article_prefix(self) -> str:
        return str(self.article_base_url).rstrip("/") + "/"


@lru_cache
def get_settings() -> WikiSearchSettings:
    """Return cached settings instance."""

    return WikiSearchSettings()


__all__ = ["WikiSearchSettings", "get_settings"]
