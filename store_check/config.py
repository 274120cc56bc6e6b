"""
Configuration settings for store-check.

Uses Pydantic Settings to load environment variables for the store connection,
the verification entry, and logging. `DATABASE_URL` wins over the discrete
`DB_*` fields when both are present.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

import psycopg
from psycopg.conninfo import conninfo_to_dict
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    database_url: Optional[str] = Field(None, alias="DATABASE_URL")
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: str = Field("postgres", alias="DB_PASSWORD")
    db_name: str = Field("store_check", alias="DB_NAME")
    db_connect_timeout: int = Field(10, alias="DB_CONNECT_TIMEOUT")

    # Store
    store_table: str = Field("Test", alias="STORE_TABLE")
    store_entry_name: str = Field("Test Entry", alias="STORE_ENTRY_NAME")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def dsn(self) -> str:
        """Connection string for this configuration."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    def masked_target(self) -> str:
        """
        Human-readable store target as `user@host:port/dbname`, never the password.

        Accepts both URL and keyword (`host=... password=...`) connection strings.
        """
        if self.database_url:
            try:
                params = conninfo_to_dict(self.database_url)
            except psycopg.ProgrammingError:
                return "<unparseable DATABASE_URL>"
            location = (
                f"{params.get('host', 'localhost')}:{params.get('port', 5432)}"
                f"/{params.get('dbname', '')}"
            )
            user = params.get("user")
            return f"{user}@{location}" if user else location
        return f"{self.db_user}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
