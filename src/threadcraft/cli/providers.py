"""Provider factory functions for CLI.

Centralizes creation of the generation client from environment variables.
Hides configuration details from command implementations.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from ..llm import DEFAULT_MODEL, DEFAULT_TEMPERATURE, GenerationClient, GenerationConfig
from ..llm.models import MAX_TEMPERATURE, MIN_TEMPERATURE
from ..llm import create_generation_client

# Default console for output
_console = Console()

# Checked in order; API_KEY is accepted for compatibility with older setups
API_KEY_VARIABLES = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


def configure_logging(level: str = "warning", console: Console | None = None) -> None:
    """Route log records through a Rich handler.

    Args:
        level: Log level name (debug, info, warning, error)
        console: Optional Rich console to write to
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def get_generation_config(console: Console | None = None) -> GenerationConfig:
    """Build the generation config from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        GenerationConfig, with api_key None when no key is set

    Environment variables:
        GEMINI_API_KEY / GOOGLE_API_KEY / API_KEY: Gemini API key (first set wins)
        GEMINI_MODEL: Model (default: gemini-2.5-flash)
        THREADCRAFT_TEMPERATURE: Sampling temperature (default: 0.7)
    """
    con = console or _console
    api_key = next((os.getenv(name) for name in API_KEY_VARIABLES if os.getenv(name)), None)
    if not api_key:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, generation disabled[/yellow]")

    temperature = DEFAULT_TEMPERATURE
    raw_temperature = os.getenv("THREADCRAFT_TEMPERATURE")
    if raw_temperature:
        try:
            parsed = float(raw_temperature)
        except ValueError:
            parsed = None
        if parsed is not None and MIN_TEMPERATURE <= parsed <= MAX_TEMPERATURE:
            temperature = parsed
        else:
            con.print(
                f"[yellow]Warning: invalid THREADCRAFT_TEMPERATURE '{raw_temperature}' "
                f"(expected {MIN_TEMPERATURE} to {MAX_TEMPERATURE}), using {DEFAULT_TEMPERATURE}[/yellow]"
            )

    return GenerationConfig(
        api_key=api_key,
        model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        temperature=temperature,
    )


def get_client(console: Console | None = None) -> GenerationClient:
    """Create the generation client from environment variables.

    The client is always returned; without a key every call fails with
    ClientUnavailableError.
    """
    return create_generation_client("gemini", get_generation_config(console))


def require_client(console: Console | None = None) -> GenerationClient:
    """Get the generation client, exiting if no API key is configured.

    Raises:
        SystemExit: If no API key is set
    """
    import typer

    con = console or _console
    config = get_generation_config(con)
    if not config.has_credential:
        con.print("[red]Error: Gemini API key not configured[/red]")
        raise typer.Exit(code=1)
    return create_generation_client("gemini", config)
