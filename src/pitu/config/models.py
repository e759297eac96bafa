"""Configuration models for Pitu.

Defined using Pydantic for validation and YAML support.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BotConfig(BaseModel):
    """Runtime configuration of a Bot. Immutable after construction."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    default_start_node: str = Field(description="Qualified id of the node new conversations start on")
    plugins: tuple[Any, ...] = Field(
        default=(), description="Plugins in declaration order, outermost first"
    )
    strict: bool = Field(
        default=False,
        description="Reject duplicate node ids and raise on unknown nodes instead of ignoring them",
    )


class BotSettings(BaseModel):
    """Serializable part of BotConfig (plugins are code, not configuration)."""

    default_start_node: str = Field(description="Qualified id of the start node")
    strict: bool = Field(default=False, description="Enable strict node checks")

    def to_bot_config(self, plugins: list[Any] | None = None) -> BotConfig:
        """Combine these settings with plugins into a BotConfig."""
        return BotConfig(
            default_start_node=self.default_start_node,
            strict=self.strict,
            plugins=tuple(plugins or ()),
        )


class LoggingSettings(BaseModel):
    """Logging configuration section."""

    level: LogLevel = Field(default="INFO", description="Log level for the 'pitu' logger")
    log_file: str | None = Field(default=None, description="Optional rotating JSON log file")


class PituSettings(BaseModel):
    """Top-level settings file schema."""

    bot: BotSettings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
