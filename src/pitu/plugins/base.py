"""Plugin interface and interception chain construction."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from pitu.core.types import FlowResponse

NextFn = Callable[[], Awaitable[FlowResponse]]
InterceptFn = Callable[[Any, NextFn], Awaitable[FlowResponse]]


class BotPlugin(Protocol):
    """Middleware wrapping a single bot execution (DIP).

    ``intercept`` receives the conversation context and a ``next`` callable.
    It must await ``next()`` to continue the chain; returning without doing
    so short-circuits execution and its return value becomes the response.
    """

    intercept: InterceptFn | None


@dataclass(frozen=True)
class Plugin:
    """Plugin built from a plain intercept function."""

    intercept: InterceptFn | None = None
    name: str = "plugin"


def get_intercept(plugin: Any) -> InterceptFn | None:
    """Return the plugin's intercept callable, or None for no-op plugins."""
    if plugin is None:
        return None
    intercept = getattr(plugin, "intercept", None)
    return intercept if callable(intercept) else None


def build_chain(plugins: Sequence[Any], context: Any, base_run: NextFn) -> NextFn:
    """Wrap ``base_run`` with the plugins' interceptors.

    The first plugin is the outermost wrapper and the last one sits closest
    to ``base_run``. Plugins without an intercept are skipped.

    Args:
        plugins: Plugins in declaration order.
        context: Conversation context forwarded to every interceptor.
        base_run: Zero-argument coroutine function running the engine.

    Returns:
        Zero-argument coroutine function running the whole chain.
    """
    handler = base_run
    for plugin in reversed(plugins):
        intercept = get_intercept(plugin)
        if intercept is None:
            continue
        handler = _wrap(intercept, context, handler)
    return handler


def _wrap(intercept: InterceptFn, context: Any, inner: NextFn) -> NextFn:
    async def call() -> FlowResponse:
        return await intercept(context, inner)

    return call
