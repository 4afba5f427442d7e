from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://pub-513149f63c494eefba758cd3927e2285.r2.dev"
DEFAULT_MAX_LOOKBACK_DAYS = 30


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SLATE_",
        extra="ignore",
    )

    # object storage origin
    base_url: str = DEFAULT_BASE_URL
    max_lookback_days: int = Field(default=DEFAULT_MAX_LOOKBACK_DAYS, ge=0)

    # http
    timeout_s: float = 20.0
    connect_timeout_s: float = 10.0
    user_agent: str = "slate-ecosystem/0.1"

    log_level: str = "INFO"


settings = Settings()
