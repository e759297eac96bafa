"""Configuration models and loading."""

from pitu.config.loader import ConfigLoader
from pitu.config.models import BotConfig, BotSettings, LoggingSettings, PituSettings

__all__ = ["BotConfig", "BotSettings", "ConfigLoader", "LoggingSettings", "PituSettings"]
