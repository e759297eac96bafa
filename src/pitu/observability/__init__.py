"""Observability module for Pitu."""

from pitu.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
