"""Bot: node registration and per-request execution."""

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pitu.config.models import BotConfig
from pitu.core.errors import UnknownNodeError
from pitu.core.flow import Flow, flow_name_of, resolve_node_id
from pitu.core.registry import NodeRegistry
from pitu.core.types import (
    FlowResponse,
    NodeDefinition,
    OnEnterArgs,
    OnReceiveArgs,
    RunArgs,
)
from pitu.plugins.base import build_chain

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Bot(Generic[T]):
    """Conversational state machine built from flows of nodes.

    Conversation state is owned by the caller: every ``run`` receives the
    current node and context and returns the node to pass on the next call.

    Usage:
        bot = Bot(BotConfig(default_start_node="main.welcome"))

        def build(flow):
            flow.node("welcome", {"on_enter": lambda a: a.send("Hi!")})

        bot.flow("main", build)
        response = await bot.run(context={})
    """

    def __init__(self, config: BotConfig | Mapping[str, Any]) -> None:
        if not isinstance(config, BotConfig):
            config = BotConfig.model_validate(dict(config))
        self.config = config
        self.registry = NodeRegistry(strict=config.strict)

    def flow(self, name: str, builder: Callable[[Flow[T]], None]) -> Flow[T]:
        """Define a flow by calling ``builder`` with a Flow bound to ``name``."""
        flow: Flow[T] = Flow(name, self.registry)
        builder(flow)
        return flow

    define_flow = flow

    async def run(
        self,
        args: RunArgs[T] | None = None,
        *,
        context: T | None = None,
        node: str | None = None,
        message: str | None = None,
    ) -> FlowResponse:
        """Execute one conversation step through the plugin chain.

        Either pass a RunArgs or the keyword arguments.

        Args:
            args: Bundled run arguments.
            context: Caller-owned context, passed by reference to handlers.
            node: Current node; omit to start at ``default_start_node``.
            message: Incoming user message, if any.

        Returns:
            FlowResponse with messages, next node and completion flag.
        """
        if args is None:
            args = RunArgs(context=context, node=node, message=message)  # type: ignore[arg-type]

        async def base_run() -> FlowResponse:
            return await self._execute(args)

        handler = build_chain(self.config.plugins, args.context, base_run)
        return await handler()

    def _lookup(self, node_id: str) -> NodeDefinition | None:
        definition = self.registry.get(node_id)
        if definition is None:
            if self.config.strict:
                raise UnknownNodeError(node_id)
            logger.warning(f"Node '{node_id}' is not registered, treating it as empty")
        return definition

    async def _execute(self, args: RunArgs[T]) -> FlowResponse:
        is_first_run = not args.node
        current_node_id = args.node or self.config.default_start_node
        current_flow = flow_name_of(current_node_id)
        current_node = self._lookup(current_node_id)

        messages: list[str] = []
        next_node_id: str | None = None

        def send(text: str) -> None:
            messages.append(text)

        def transition(target: str) -> None:
            nonlocal next_node_id
            next_node_id = resolve_node_id(current_flow, target)
            logger.debug(f"Transition requested from '{current_node_id}' to '{next_node_id}'")

        logger.debug(f"Running node '{current_node_id}' (first_run={is_first_run})")

        if args.message and current_node is not None and current_node.on_receive is not None:
            await _call(
                current_node.on_receive,
                OnReceiveArgs(
                    message=args.message,
                    context=args.context,
                    send=send,
                    transition=transition,
                ),
            )

        transitioned = next_node_id is not None
        final_node_id = next_node_id or current_node_id
        final_node = current_node if final_node_id == current_node_id else self._lookup(final_node_id)

        # Single step: a transition issued by on_enter is reported, not followed.
        if (is_first_run or transitioned) and final_node is not None and final_node.on_enter:
            await _call(
                final_node.on_enter,
                OnEnterArgs(context=args.context, send=send, transition=transition),
            )

        done = final_node is not None and final_node.end
        response = FlowResponse(
            messages=messages,
            next=None if done else (next_node_id or current_node_id),
            done=done,
        )
        logger.debug(
            f"Node '{final_node_id}' finished: next={response.next} done={response.done} "
            f"messages={len(messages)}"
        )
        return response


async def _call(handler: Callable[[Any], Any], handler_args: Any) -> None:
    result = handler(handler_args)
    if inspect.isawaitable(result):
        await result
