"""Plugins wrapping bot execution."""

from pitu.plugins.base import BotPlugin, Plugin, build_chain
from pitu.plugins.logging import logging_plugin
from pitu.plugins.twilio import render_twiml, twilio_plugin

__all__ = [
    "BotPlugin",
    "Plugin",
    "build_chain",
    "logging_plugin",
    "render_twiml",
    "twilio_plugin",
]
