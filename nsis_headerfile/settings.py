from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .rendering.engine import DEFAULT_DATE_FORMAT, DEFAULT_TIME_FORMAT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NSIS_", case_sensitive=False)

    headerfile: Path | None = None
    encoding: str = "utf-8"
    date_format: str = DEFAULT_DATE_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    actor: str | None = None
