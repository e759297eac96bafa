"""Tests for settings models and the YAML loader."""

import pytest

from pitu import logging_plugin
from pitu.config import BotConfig, BotSettings, ConfigLoader
from pitu.core.errors import ConfigError


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "pitu.yaml"
    path.write_text(
        "bot:\n"
        "  default_start_node: main.welcome\n"
        "  strict: true\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    return path


def test_load_valid_file(settings_file, monkeypatch):
    """
    GIVEN a valid settings file
    WHEN loaded
    THEN bot and logging sections are parsed
    """
    monkeypatch.delenv("PITU_LOG_LEVEL", raising=False)

    settings = ConfigLoader.load(settings_file)

    assert settings.bot.default_start_node == "main.welcome"
    assert settings.bot.strict is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.log_file is None


def test_logging_section_is_optional(tmp_path, monkeypatch):
    monkeypatch.delenv("PITU_LOG_LEVEL", raising=False)
    path = tmp_path / "pitu.yaml"
    path.write_text("bot:\n  default_start_node: main.welcome\n", encoding="utf-8")

    settings = ConfigLoader.load(path)

    assert settings.logging.level == "INFO"
    assert settings.bot.strict is False


def test_env_overrides_log_level(settings_file, monkeypatch):
    monkeypatch.setenv("PITU_LOG_LEVEL", "warning")

    settings = ConfigLoader.load(settings_file)

    assert settings.logging.level == "WARNING"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load(tmp_path / "missing.yaml")


def test_missing_start_node_raises_config_error(tmp_path):
    path = tmp_path / "pitu.yaml"
    path.write_text("bot: {}\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration schema"):
        ConfigLoader.load(path)


def test_invalid_yaml_raises_config_error(tmp_path):
    path = tmp_path / "pitu.yaml"
    path.write_text("bot: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader.load(path)


def test_non_mapping_raises_config_error(tmp_path):
    path = tmp_path / "pitu.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader.load(path)


def test_bot_settings_to_bot_config():
    plugin = logging_plugin()
    settings = BotSettings(default_start_node="main.welcome", strict=True)

    config = settings.to_bot_config(plugins=[plugin])

    assert isinstance(config, BotConfig)
    assert config.default_start_node == "main.welcome"
    assert config.strict is True
    assert config.plugins == (plugin,)
