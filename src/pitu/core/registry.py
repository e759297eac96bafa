"""Node registry keyed by qualified node id."""

import logging
from collections.abc import Iterator

from pitu.core.errors import DuplicateNodeError
from pitu.core.types import NodeDefinition

logger = logging.getLogger(__name__)


class NodeRegistry:
    """Registry of node definitions owned by a single Bot.

    Keys are qualified ``"flow.node"`` ids; the Flow builder is the only
    writer and always prefixes the flow name.

    Usage:
        registry = NodeRegistry()
        registry.register("main.welcome", NodeDefinition(on_enter=greet))
        node = registry.get("main.welcome")
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._nodes: dict[str, NodeDefinition] = {}

    def register(self, node_id: str, definition: NodeDefinition) -> None:
        """Register a node definition.

        Re-registering an id replaces the previous definition unless the
        registry is strict.

        Raises:
            DuplicateNodeError: If strict and ``node_id`` is already registered.
        """
        if node_id in self._nodes:
            if self.strict:
                raise DuplicateNodeError(node_id)
            logger.warning(f"Node '{node_id}' registered twice, replacing previous definition")
        self._nodes[node_id] = definition

    def get(self, node_id: str) -> NodeDefinition | None:
        """Get a node definition, or None if it was never registered."""
        return self._nodes.get(node_id)

    def node_ids(self) -> list[str]:
        """List registered node ids in registration order."""
        return list(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)
