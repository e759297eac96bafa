"""Core type definitions for the Pitu runtime."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from pitu.core.errors import FlowError

# Separator between the flow and node segments of a qualified id
FLOW_SEPARATOR = "."

T = TypeVar("T")

NODE_KEYS = frozenset({"end", "on_enter", "on_receive"})

SendFn = Callable[[str], None]
TransitionFn = Callable[[str], None]


@dataclass(frozen=True)
class OnEnterArgs(Generic[T]):
    """Arguments passed to a node's ``on_enter`` handler."""

    context: T
    send: SendFn
    transition: TransitionFn


@dataclass(frozen=True)
class OnReceiveArgs(Generic[T]):
    """Arguments passed to a node's ``on_receive`` handler.

    ``message`` is the user input that triggered the handler.
    """

    message: str
    context: T
    send: SendFn
    transition: TransitionFn


# Handlers may be sync or async; the engine awaits awaitable results.
EnterHandler = Callable[[OnEnterArgs[Any]], Awaitable[None] | None]
ReceiveHandler = Callable[[OnReceiveArgs[Any]], Awaitable[None] | None]


@dataclass(frozen=True)
class NodeDefinition:
    """Behaviour of a single conversation node.

    Attributes:
        end: Marks the node as terminal. A run ending here reports
            ``done=True`` and no next node.
        on_enter: Called when the conversation enters the node.
        on_receive: Called when a message arrives while in the node.
    """

    end: bool = False
    on_enter: EnterHandler | None = None
    on_receive: ReceiveHandler | None = None

    @classmethod
    def coerce(cls, value: "NodeDefinition | Mapping[str, Any]") -> "NodeDefinition":
        """Build a definition from a mapping, or return it unchanged.

        Raises:
            FlowError: If the mapping has keys other than end, on_enter and on_receive.
        """
        if isinstance(value, NodeDefinition):
            return value
        unknown = set(value) - NODE_KEYS
        if unknown:
            raise FlowError(f"Unknown node definition keys: {', '.join(sorted(unknown))}")
        return cls(
            end=bool(value.get("end", False)),
            on_enter=value.get("on_enter"),
            on_receive=value.get("on_receive"),
        )


@dataclass
class RunArgs(Generic[T]):
    """Arguments for a single ``Bot.run`` call."""

    context: T
    node: str | None = None
    message: str | None = None


class FlowResponse(BaseModel):
    """Result of one conversation step."""

    messages: list[str] = Field(default_factory=list, description="Outgoing messages in send order")
    next: str | None = Field(
        default=None, description="Qualified id of the next node, None when the conversation ended"
    )
    done: bool = Field(default=False, description="Whether the final node is terminal")
