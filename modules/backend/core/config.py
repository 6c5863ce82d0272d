"""
Configuration Management.

Server settings come from YAML files in config/settings/, each validated
by its schema in config_schema.py. The only secret, the PostgreSQL
password, comes from config/.env (DB_PASSWORD) via pydantic-settings.

    application.yaml   identity, API prefix, server, CORS, pagination,
                       monitor defaults, timeouts
    database.yaml      driver (sqlite or postgresql) and pool settings
    logging.yaml       level, format, handlers

The project root is the nearest parent directory holding a
``.project_root`` marker, so commands work from any subdirectory.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)

PROJECT_MARKER = ".project_root"


def find_project_root() -> Path:
    """
    Walk up from the working directory to the ``.project_root`` marker.

    Raises:
        RuntimeError: If no parent directory has the marker
    """
    for directory in (Path.cwd(), *Path.cwd().parents):
        if (directory / PROJECT_MARKER).exists():
            return directory
    raise RuntimeError(f"Project root not found. Ensure {PROJECT_MARKER} file exists.")


def validate_project_root() -> Path:
    """find_project_root for entry scripts: exits with the error instead of raising."""
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Read config/settings/<filename>; an empty file is an empty dict."""
    config_path = find_project_root() / "config" / "settings" / filename
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type[BaseModel], filename: str) -> Any:
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e


class Settings(BaseSettings):
    """Secrets from config/.env."""

    db_password: str = ""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppConfig:
    """
    The validated YAML settings, one typed section per file.

    Construction fails with ValueError naming the file when any section
    has missing keys, wrong types or unknown fields.
    """

    def __init__(self) -> None:
        self.application: ApplicationSchema = _load_validated(ApplicationSchema, "application.yaml")
        self.database: DatabaseSchema = _load_validated(DatabaseSchema, "database.yaml")
        self.logging: LoggingSchema = _load_validated(LoggingSchema, "logging.yaml")


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=str(find_project_root() / "config" / ".env"))


@lru_cache
def get_app_config() -> AppConfig:
    return AppConfig()


def get_database_url() -> str:
    """
    Async SQLAlchemy URL for the configured driver.

    SQLite paths are relative to the project root; PostgreSQL takes its
    password from the secrets.
    """
    db = get_app_config().database
    if db.driver == "sqlite":
        return f"sqlite+aiosqlite:///{find_project_root() / db.sqlite_path}"

    password = get_settings().db_password
    return f"postgresql+asyncpg://{db.user}:{password}@{db.host}:{db.port}/{db.name}"
