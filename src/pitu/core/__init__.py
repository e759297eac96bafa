"""Core runtime: node registry, flows and the execution engine."""

from pitu.core.errors import (
    ConfigError,
    DuplicateNodeError,
    FlowError,
    PituError,
    UnknownNodeError,
)
from pitu.core.types import (
    FLOW_SEPARATOR,
    FlowResponse,
    NodeDefinition,
    OnEnterArgs,
    OnReceiveArgs,
    RunArgs,
)
from pitu.core.registry import NodeRegistry
from pitu.core.flow import Flow, flow_name_of, resolve_node_id
from pitu.core.bot import Bot

__all__ = [
    "FLOW_SEPARATOR",
    "Bot",
    "ConfigError",
    "DuplicateNodeError",
    "Flow",
    "FlowError",
    "FlowResponse",
    "NodeDefinition",
    "NodeRegistry",
    "OnEnterArgs",
    "OnReceiveArgs",
    "PituError",
    "RunArgs",
    "UnknownNodeError",
    "flow_name_of",
    "resolve_node_id",
]
