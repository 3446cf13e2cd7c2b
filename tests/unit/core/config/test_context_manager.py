"""Unit tests for the application context and configuration loading."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.settings import EnvironmentVariables
from src.catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    load_config,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_with_context_override_single_field(self):
        original_config = get_config()
        original_size = original_config.pagination.default_page_size

        override = ConfigData()
        override.pagination.default_page_size = 3

        with with_context(override):
            assert get_config().pagination.default_page_size == 3
            # Fields not set on the override are inherited
            assert get_config().database.url == original_config.database.url

        assert get_config() is original_config
        assert get_config().pagination.default_page_size == original_size

    def test_nested_overrides(self):
        outer = ConfigData()
        outer.app.host = "outer"
        inner = ConfigData()
        inner.app.port = 9001

        with with_context(outer):
            with with_context(inner):
                assert get_config().app.host == "outer"
                assert get_config().app.port == 9001
            assert get_config().app.host == "outer"
            assert get_config().app.port != 9001

    def test_none_override_keeps_context(self):
        before = get_config()
        with with_context(None):
            assert get_config() is before

    def test_invalid_override_type(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"host": "x"}}):
                pass


class TestLoadConfig:
    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables(CONFIG_FILE=str(tmp_path / "absent.yaml"))
            config = load_config(env_vars)

        defaults = ConfigData()
        assert config.database.url == defaults.database.url
        assert config.pagination == defaults.pagination
        assert config.app.environment == "development"

    def test_environment_wins_over_file(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  database:\n    url: sqlite:///./file.db\n")

        with patch.dict(
            os.environ,
            {"DATABASE_URL": "sqlite:///./env.db", "LOG_LEVEL": "DEBUG"},
            clear=True,
        ):
            config = load_config(EnvironmentVariables(CONFIG_FILE=str(config_file)))

        assert config.database.url == "sqlite:///./env.db"
        assert config.logging.level == "DEBUG"
