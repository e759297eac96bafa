"""Interactive chat runner for the Pitu CLI."""

import importlib
import os
import sys
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from pitu.config.loader import ConfigLoader
from pitu.core.bot import Bot
from pitu.core.errors import ConfigError
from pitu.core.types import FlowResponse
from pitu.observability.logging import ContextLogger, setup_logging


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    target: str
    config_path: Path | None = None
    session_id: str | None = None
    debug: bool = False
    verbose: bool = False


def load_bot(target: str) -> Bot[Any]:
    """Import a Bot from a ``module:attribute`` target.

    Raises:
        ConfigError: If the target is malformed or does not name a Bot
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ConfigError(f"Expected 'module:attribute', got '{target}'")

    # Ensure cwd is in python path
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_name)
    bot = getattr(module, attribute, None)
    if not isinstance(bot, Bot):
        raise ConfigError(f"'{target}' is not a Bot instance")
    return bot


@dataclass
class ChatSession:
    """Conversation state kept by the caller between turns."""

    node: str | None = None
    context: dict[str, Any] = field(default_factory=dict)
    done: bool = False

    def apply(self, response: FlowResponse) -> None:
        """Advance the session with a step's response."""
        self.node = response.next
        self.done = response.done


class ChatRunner:
    """Interactive chat session runner.

    The bot is stateless between calls, so the runner owns the session:
    it stores the returned ``next`` node and the shared context dict and
    passes them back on every turn.
    """

    def __init__(self, config: ChatConfig, console: Console | None = None):
        """Initialize chat runner.

        Args:
            config: Chat configuration
            console: Console to print to (a new one by default)
        """
        self.config = config
        self.console = console or Console()
        self.bot: Bot[Any] | None = None
        self.session = ChatSession()
        self.session_id = config.session_id or f"cli_{uuid.uuid4().hex[:6]}"
        self.log = ContextLogger(__name__).with_context(session_id=self.session_id)

    def setup(self) -> None:
        """Load environment, logging settings and the bot.

        Raises:
            ConfigError: If the settings file or the bot target is invalid
        """
        load_dotenv()

        level = "DEBUG" if self.config.debug else "WARNING"
        log_file = None
        if self.config.config_path is not None:
            settings = ConfigLoader.load(self.config.config_path)
            if not self.config.debug:
                level = settings.logging.level
            log_file = settings.logging.log_file
        setup_logging(level=level, log_file=log_file)

        self.bot = load_bot(self.config.target)
        if self.config.verbose:
            self.console.print(f"[dim]Loaded bot: {self.config.target}[/]")

    async def step(self, message: str | None = None) -> FlowResponse:
        """Run one turn and print the bot's messages."""
        if self.bot is None:
            raise RuntimeError("ChatRunner not initialized. Call setup() first.")

        response = await self.bot.run(
            context=self.session.context, node=self.session.node, message=message
        )
        self.session.apply(response)
        self.log.debug(f"Turn finished: next={response.next} done={response.done}")

        for text in response.messages:
            self.console.print(f"[bold blue]Bot > [/]{escape(text)}")
        return response

    async def start(self) -> None:
        """Start the interactive session."""
        if self.bot is None:
            self.setup()

        self.console.print(f"Session ID: [green]{self.session_id}[/]")
        self.console.print("Type 'exit' or 'quit' to end session.\n")

        await self.step()
        while not self.session.done:
            try:
                user_input = Prompt.ask("[bold green]You[/]", console=self.console)
            except (KeyboardInterrupt, EOFError):
                break

            if self._is_exit_command(user_input):
                break
            if not user_input.strip():
                continue

            try:
                await self.step(user_input)
            except Exception as e:
                if self.config.debug:
                    self.console.print_exception()
                else:
                    self.console.print(f"[red]Error: {e}[/]")

        self.console.print("\n[yellow]Goodbye![/]")

    def _is_exit_command(self, user_input: str) -> bool:
        """Check if input is an exit command."""
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")


async def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    runner = ChatRunner(config)
    runner.setup()
    await runner.start()
