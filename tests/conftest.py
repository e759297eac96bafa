"""Shared fixtures for Pitu tests."""

import logging
from typing import Any

import pytest

from pitu import Bot, BotConfig


@pytest.fixture
def make_bot():
    """
    Factory fixture creating a Bot with a given start node and plugins.

    Usage:
        def test_something(make_bot):
            bot = make_bot("main.welcome", plugins=[...])
    """

    def _create(start: str = "main.welcome", **kwargs: Any) -> Bot:
        return Bot(BotConfig(default_start_node=start, **kwargs))

    return _create


@pytest.fixture
def scenario_bot(make_bot) -> Bot:
    """Bot with a welcome node and a terminal bye node in the 'main' flow."""
    bot = make_bot("main.welcome")

    def on_receive(args):
        if args.message == "x":
            args.transition("bye")

    def build(flow):
        flow.node(
            "welcome",
            {"on_enter": lambda args: args.send("hi"), "on_receive": on_receive},
        )
        flow.node("bye", {"end": True, "on_enter": lambda args: args.send("later")})

    bot.flow("main", build)
    return bot


@pytest.fixture(autouse=True)
def restore_pitu_logger():
    """Undo setup_logging() changes so caplog keeps seeing 'pitu' records."""
    logger = logging.getLogger("pitu")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
