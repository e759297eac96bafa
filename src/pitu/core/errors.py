"""Core runtime errors."""


class PituError(Exception):
    """Base class for all Pitu errors."""

    pass


class ConfigError(PituError):
    """Raised when configuration is invalid."""


class FlowError(PituError):
    """Raised when flow execution fails."""

    pass


class UnknownNodeError(FlowError):
    """Raised in strict mode when a node id has no registry entry."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Unknown node: {node_id}")
        self.node_id = node_id


class DuplicateNodeError(FlowError):
    """Raised in strict mode when a node id is registered twice."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node already registered: {node_id}")
        self.node_id = node_id
