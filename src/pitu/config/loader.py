"""Config loader for YAML settings files."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pitu.config.models import PituSettings
from pitu.core.errors import ConfigError

LOG_LEVEL_ENV = "PITU_LOG_LEVEL"


class ConfigLoader:
    """Load PituSettings from YAML files."""

    @staticmethod
    def load(path: Path | str) -> PituSettings:
        """Load settings from a YAML file.

        ``PITU_LOG_LEVEL`` overrides ``logging.level`` when set.

        Args:
            path: Path to the settings file

        Returns:
            Parsed PituSettings instance

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file is not valid YAML or fails validation
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {config_path}")

        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            data.setdefault("logging", {})
            data["logging"] = {**(data["logging"] or {}), "level": env_level.upper()}

        try:
            return PituSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration schema: {e}") from e
