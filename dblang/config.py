"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal
import re

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def default_data_dir() -> Path:
    return Path.home() / ".local" / "share" / "dblang"


class DatabaseSettings(BaseModel):
    dsn: str | None = Field(
        default=None,
        description="SQLAlchemy DSN. Defaults to a SQLite file inside data_dir.",
    )
    echo: bool = False


class LangSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DBLANG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    data_dir: Path = Field(default_factory=default_data_dir)
    db_name: str = "lang.sqlite"
    fallback_culture: str = "en-US"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @field_validator("db_name")
    @classmethod
    def _sanitize_db_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Empty string is not allowed.")
        return _INVALID_FILENAME_CHARS.sub("_", value)

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.db_name

    @property
    def dsn(self) -> str:
        return self.database.dsn or f"sqlite:///{self.database_path}"


@lru_cache
def get_settings() -> LangSettings:
    """Return cached settings instance."""

    return LangSettings()


__all__ = [
    "DatabaseSettings",
    "LangSettings",
    "default_data_dir",
    "get_settings",
]
