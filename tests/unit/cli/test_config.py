"""Unit tests for the CLI config file."""

import json

import pytest

from modules.cli.config import CliConfigError, CliConfig, get_config_path, load_config, save_config


class TestCliConfig:
    """Tests for loading and saving ~/.uptime-kuma-cli.json."""

    def test_env_var_overrides_path(self, cli_config_path) -> None:
        assert get_config_path() == cli_config_path

    def test_missing_file_gives_defaults(self) -> None:
        config = load_config()

        assert config.url == "http://localhost:3001"
        assert config.auth.username == "admin"
        assert config.auth.password == ""

    def test_round_trip(self, cli_config_path) -> None:
        save_config(CliConfig.model_validate(
            {"url": "http://kuma:3001", "auth": {"username": "ops", "password": "pw"}}
        ))

        assert json.loads(cli_config_path.read_text()) == {
            "url": "http://kuma:3001",
            "auth": {"username": "ops", "password": "pw"},
        }
        assert load_config().auth.username == "ops"

    def test_partial_file_uses_defaults(self, cli_config_path) -> None:
        cli_config_path.write_text(json.dumps({"url": "http://other:3001"}))

        config = load_config()

        assert config.url == "http://other:3001"
        assert config.auth.username == "admin"

    def test_corrupt_file(self, cli_config_path) -> None:
        cli_config_path.write_text("{not json")

        with pytest.raises(CliConfigError):
            load_config()
