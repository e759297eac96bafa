"""Flow builder and transition target resolution."""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pitu.core.registry import NodeRegistry
from pitu.core.types import FLOW_SEPARATOR, NodeDefinition

logger = logging.getLogger(__name__)

T = TypeVar("T")


def flow_name_of(node_id: str) -> str:
    """Return the flow segment of a qualified node id."""
    return node_id.split(FLOW_SEPARATOR, 1)[0]


def resolve_node_id(current_flow: str, target: str) -> str:
    """Resolve a transition target to a qualified node id.

    A target that already contains the separator is treated as qualified and
    returned unchanged; a bare target is placed in ``current_flow``.

    Examples:
        >>> resolve_node_id("main", "bye")
        'main.bye'
        >>> resolve_node_id("main", "help.start")
        'help.start'
    """
    if FLOW_SEPARATOR in target:
        return target
    return f"{current_flow}{FLOW_SEPARATOR}{target}"


class Flow(Generic[T]):
    """A named group of nodes, handed to the builder passed to ``Bot.flow``.

    Usage:
        bot.flow("booking", lambda flow: flow.node("start", {"on_enter": ask}))
    """

    def __init__(self, name: str, registry: NodeRegistry) -> None:
        self.name = name
        self._registry = registry

    def node(self, node_id: str, definition: NodeDefinition | Mapping[str, Any]) -> str:
        """Define a node within this flow.

        Args:
            node_id: Node id local to this flow.
            definition: A NodeDefinition or a mapping with ``end``,
                ``on_enter`` and ``on_receive`` keys.

        Returns:
            The qualified id the node was registered under.
        """
        qualified_id = f"{self.name}{FLOW_SEPARATOR}{node_id}"
        self._registry.register(qualified_id, NodeDefinition.coerce(definition))
        logger.debug(f"Registered node '{qualified_id}'")
        return qualified_id

    define_node = node
