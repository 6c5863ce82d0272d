"""
CLI Configuration.

Connection settings live in a small JSON file in the user's home
directory (``~/.uptime-kuma-cli.json``). ``UPTIME_KUMA_CLI_CONFIG``
points to another file, which tests use to stay out of the real home.

File format:
    {"url": "http://localhost:3001", "auth": {"username": "admin", "password": ""}}
"""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

DEFAULT_URL = "http://localhost:3001"
DEFAULT_USERNAME = "admin"
CONFIG_ENV_VAR = "UPTIME_KUMA_CLI_CONFIG"
CONFIG_FILENAME = ".uptime-kuma-cli.json"


class CliConfigError(Exception):
    """Raised when the config file exists but cannot be read or written."""


class CliAuth(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = DEFAULT_USERNAME
    password: str = ""


class CliConfig(BaseModel):
    """Persisted connection settings."""

    model_config = ConfigDict(extra="ignore")

    url: str = DEFAULT_URL
    auth: CliAuth = CliAuth()

    @property
    def api_base_url(self) -> str:
        return f"{self.url.rstrip('/')}/api/v2"


def get_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> CliConfig:
    """
    Load the CLI config. A missing file yields the defaults.

    Raises:
        CliConfigError: If the file is unreadable or not a valid config
    """
    path = path or get_config_path()
    if not path.exists():
        return CliConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return CliConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise CliConfigError(f"Error loading config {path}: {e}") from e


def save_config(config: CliConfig, path: Path | None = None) -> Path:
    """
    Write the CLI config as pretty JSON and return the path written.

    Raises:
        CliConfigError: If the file cannot be written
    """
    path = path or get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.model_dump(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise CliConfigError(f"Error saving config {path}: {e}") from e
    return path
