"""API service configuration.

All settings come from environment variables (or a local `.env` file) and are
validated once at startup. Route handlers and the app factory read them
through `get_settings()`.

Environment variables:
    DATABASE_URL       SQLAlchemy URL (Postgres in deployment, SQLite locally)
    LOG_LEVEL          root log level, default INFO
    LOG_DIR            optional directory for timestamped log files
    CORS_ORIGINS       comma separated list of allowed browser origins
    CREATE_TABLES      create `players`/`sessions` at startup if missing
    DB_POOL_PRE_PING   pre-ping pooled connections (default true)
    HOST / PORT        bind address for `ledger-api`
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    database_url: str = "sqlite:///./poker_ledger.db"
    log_level: str = "INFO"
    log_dir: str | None = None
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    create_tables: bool = True
    pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (parsed once)."""
    return Settings()
