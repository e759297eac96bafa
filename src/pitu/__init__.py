"""Pitu - a minimal conversational state-machine runtime.

Bots are built from flows of nodes. Each node may greet the user when the
conversation enters it and react to messages received while it is active.
Plugins wrap every execution to transform context and responses.

Quick start:
    from pitu import Bot, BotConfig

    bot = Bot(BotConfig(default_start_node="main.welcome"))
    bot.flow("main", lambda flow: flow.node("welcome", {
        "on_enter": lambda args: args.send("Welcome!"),
    }))

    response = await bot.run(context={})
    # response.messages == ["Welcome!"], response.next == "main.welcome"
"""

from pitu.__version__ import __version__
from pitu.config.models import BotConfig
from pitu.core.bot import Bot
from pitu.core.errors import (
    ConfigError,
    DuplicateNodeError,
    FlowError,
    PituError,
    UnknownNodeError,
)
from pitu.core.flow import Flow, resolve_node_id
from pitu.core.types import FlowResponse, NodeDefinition, OnEnterArgs, OnReceiveArgs, RunArgs
from pitu.plugins import BotPlugin, Plugin, logging_plugin, twilio_plugin

__all__ = [
    "__version__",
    # High-level API
    "Bot",
    "BotConfig",
    "Flow",
    "resolve_node_id",
    # Types
    "FlowResponse",
    "NodeDefinition",
    "OnEnterArgs",
    "OnReceiveArgs",
    "RunArgs",
    # Plugins
    "BotPlugin",
    "Plugin",
    "logging_plugin",
    "twilio_plugin",
    # Errors
    "PituError",
    "ConfigError",
    "FlowError",
    "UnknownNodeError",
    "DuplicateNodeError",
]
