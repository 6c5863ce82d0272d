"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project files (YAML configs, .env).
Failure scenarios use tmp_path to create controlled filesystems.
"""

import pytest

from modules.backend.core.config import (
    AppConfig,
    find_project_root,
    get_app_config,
    get_database_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from modules.backend.core.config_schema import ApplicationSchema, DatabaseSchema


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


def _write_project(root, application: str | None = None) -> None:
    (root / ".project_root").touch()
    settings = root / "config" / "settings"
    settings.mkdir(parents=True)
    real = find_project_root() / "config" / "settings"
    for name in ("application.yaml", "database.yaml", "logging.yaml"):
        (settings / name).write_text((real / name).read_text())
    if application is not None:
        (settings / "application.yaml").write_text(application)


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()

    def test_validate_exits_when_marker_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            validate_project_root()


class TestAppConfig:
    """Tests for the validated YAML configuration."""

    def test_loads_typed_sections(self):
        config = get_app_config()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.database, DatabaseSchema)
        assert config.application.api_prefix == "/api/v2"

    def test_monitor_defaults(self):
        defaults = get_app_config().application.monitor_defaults

        assert defaults.interval == 60
        assert defaults.retry_interval == 60
        assert defaults.maxretries == 0
        assert defaults.weight == 2000
        assert defaults.active is True

    def test_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_rejected(self, tmp_path, monkeypatch):
        real = (find_project_root() / "config" / "settings" / "application.yaml").read_text()
        _write_project(tmp_path, application=real + "\nsurprise: true\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="application.yaml"):
            AppConfig()

    def test_missing_file(self, tmp_path, monkeypatch):
        (tmp_path / ".project_root").touch()
        monkeypatch.chdir(tmp_path)

        with pytest.raises(FileNotFoundError):
            load_yaml_config("application.yaml")


class TestDerivedUrls:
    """Tests for URLs built from configuration."""

    def test_sqlite_url_is_under_project_root(self):
        url = get_database_url()

        assert url.startswith("sqlite+aiosqlite:///")
        assert str(find_project_root()) in url
