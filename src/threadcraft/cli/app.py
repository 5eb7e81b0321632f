"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..errors import ThreadcraftError
from ..session import Message, Role, SessionController
from ..templates import StyleType, TemplateStore
from .providers import configure_logging, get_client, require_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="threadcraft",
    help="Turn messy notes into styled social threads with Gemini",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _print_message(message: Message, index: int) -> None:
    if message.role == Role.USER:
        console.print(Panel(message.content, title=f"[bold]You[/bold] #{index}", border_style="blue"))
    else:
        console.print(Panel(message.content, title=f"[bold]Thread[/bold] #{index}", border_style="magenta"))


@app.command()
def styles():
    """List the available styles."""
    store = TemplateStore.with_defaults()

    table = Table(title="Styles")
    table.add_column("Key", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Description", style="dim")

    for key, config in store.items():
        table.add_row(key, config.name, config.description)

    console.print(table)


@app.command()
def generate(
    text: str = typer.Argument(..., help="Raw text to turn into a thread"),
    style: str = typer.Option(
        StyleType.NATURAL.value,
        "--style",
        "-s",
        help="Style key (see 'threadcraft styles')"
    ),
    refine: list[str] = typer.Option(
        [],
        "--refine",
        "-r",
        help="Follow-up instruction; repeat for several refinements"
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Keep asking for refinements after the first thread"
    ),
    save: bool = typer.Option(
        False,
        "--save",
        help="Save the final response and print its id"
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, error"
    ),
):
    """Generate a thread from TEXT, then apply any refinements."""
    if not text.strip():
        raise typer.BadParameter("Nothing to generate", param_hint="TEXT")

    configure_logging(log_level)

    async def _refine(controller: SessionController, instruction: str) -> None:
        with console.status(f"[dim]Refining: {instruction}[/dim]"):
            ok = await controller.refine(instruction)
        if ok:
            _print_message(controller.transcript[-1], len(controller.transcript))
        else:
            console.print(f"[yellow]Refinement failed: {controller.last_error}[/yellow]")

    async def _generate():
        client = require_client(console)
        try:
            controller = SessionController(client, selected_style=style.upper())
            console.print(f"[dim]Style: {controller.selected_template.name}[/dim]\n")

            with console.status("[dim]Generating...[/dim]"):
                ok = await controller.generate(text)
            for i, message in enumerate(controller.transcript, 1):
                _print_message(message, i)
            if not ok:
                console.print(f"[red]Error: {controller.last_error}[/red]")
                raise typer.Exit(code=1)

            for instruction in refine:
                await _refine(controller, instruction)

            if interactive:
                console.print("[dim]Type 'exit', 'quit', or 'q' to leave\n[/dim]")
                while True:
                    try:
                        user_input = console.input("[bold yellow]Refine:[/bold yellow] ")
                    except (KeyboardInterrupt, EOFError):
                        console.print("\n[dim]Goodbye![/dim]")
                        break

                    if not user_input.strip():
                        continue
                    if user_input.strip().lower() in ("exit", "quit", "q"):
                        console.print("[dim]Goodbye![/dim]")
                        break
                    await _refine(controller, user_input)

            if save:
                last = controller.last_response()
                if last is not None:
                    thread = controller.save(last.id)
                    console.print(
                        f"[green]Saved thread {thread.id} "
                        f"({controller.templates.name_for(thread.style)})[/green]"
                    )

        except ThreadcraftError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await client.close()

    asyncio.run(_generate())


@app.command()
def chat(
    style: str = typer.Option(
        StyleType.NATURAL.value,
        "--style",
        "-s",
        help="Initially selected style key"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level: debug, info, warning, error"
    ),
):
    """Launch the interactive terminal UI."""
    from ..ui import run_textual_tui

    client = get_client(console)
    try:
        asyncio.run(run_textual_tui(client, style=style.upper(), log_level=log_level))
    except ThreadcraftError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
