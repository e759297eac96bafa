"""Plugin logging each bot execution."""

import logging
from typing import Any

from pitu.core.types import FlowResponse
from pitu.plugins.base import NextFn, Plugin


def logging_plugin(logger: logging.Logger | logging.LoggerAdapter | None = None) -> Plugin:
    """Create a plugin that logs the start, result and failures of each run.

    Failures are logged and re-raised.

    Args:
        logger: Logger to write to. Defaults to ``pitu.plugins.logging``.
    """
    log = logger or logging.getLogger(__name__)

    async def intercept(context: Any, next: NextFn) -> FlowResponse:
        log.info("Bot execution started")
        try:
            result = await next()
        except Exception:
            log.exception("Bot execution failed")
            raise
        log.info(
            f"Bot execution completed: next={result.next} done={result.done} "
            f"messages={len(result.messages)}"
        )
        return result

    return Plugin(intercept=intercept, name="logging")
