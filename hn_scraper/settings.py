from __future__ import annotations

from typing import Literal, get_args

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class ScraperSettings(BaseSettings):
    """
    Environment-driven settings for the Hacker News listing scraper.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # ---- Crawling ----
    base_url: str = Field(default="https://news.ycombinator.com/news", alias="HN_BASE_URL")

    request_timeout_sec: float = Field(default=15.0, alias="HN_REQUEST_TIMEOUT_SEC")
    request_delay_sec: float = Field(default=0.5, alias="HN_REQUEST_DELAY_SEC")

    # Upper bound on listing pages per run, regardless of how many posts were found.
    max_pages: int = Field(default=10, alias="HN_MAX_PAGES")

    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        alias="HN_USER_AGENT",
    )

    # ---- Logging ----
    log_level: LogLevel = Field(default="INFO", alias="HN_LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def load_settings() -> ScraperSettings:
    return ScraperSettings()
