"""Main CLI entry point for Pitu"""

import asyncio
from pathlib import Path

import typer

from pitu.__version__ import __version__

app = typer.Typer(
    name="pitu",
    help="Pitu - conversational state-machine runtime",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"Pitu version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Pitu - conversational state-machine runtime"""
    pass


@app.command()
def chat(
    target: str = typer.Argument(..., help="Bot to load, as 'module:attribute'"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a pitu.yaml settings file"
    ),
    session: str | None = typer.Option(None, "--session", "-s", help="Session ID"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose mode"),
) -> None:
    """Start an interactive chat with a bot."""
    from pitu.cli.chat_runner import ChatConfig, run_chat_session

    chat_config = ChatConfig(
        target=target,
        config_path=config,
        session_id=session,
        debug=debug,
        verbose=verbose,
    )

    try:
        asyncio.run(run_chat_session(chat_config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
