# autotagger/common/settings.py
from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from autotagger.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class DBConfig(BaseModel):
    echo: bool = False

    url: str = "sqlite:///autotagger.db"

    @field_validator("echo", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class AutoTagConfig(BaseModel):
    # Native path separator of the library host; a trailing backslash in a
    # name is only a literal when this is not a backslash.
    path_separator: str = Field(default=os.sep, min_length=1, max_length=1)
    include_aliases: bool = True
    kinds: str = "scene,image,gallery"

    @field_validator("include_aliases", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)

    @property
    def kind_list(self) -> List[str]:
        return csv_to_list(self.kinds, lower=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "autotagger"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    db: DBConfig = DBConfig()
    autotag: AutoTagConfig = AutoTagConfig()

    # Optional flat override for the database URL (DATABASE_URL)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from autotagger.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
