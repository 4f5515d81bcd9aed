"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..config import LOG_LEVEL_ENV_VAR
from ..models import Category, Failure
from .providers import get_client, get_orchestrator, warn_if_unconfigured

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="contentgen",
    help="Generate short AI stories, jokes and quotes",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def generate(
    category: Category = typer.Option(
        Category.STORY,
        "--category",
        "-c",
        help="Kind of content to generate"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print only the generated text"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        envvar=LOG_LEVEL_ENV_VAR,
        help="Print trace log to stderr: debug (all), info, warning, or error"
    ),
):
    """Generate a single snippet and print it."""
    client = get_client(log_level)
    result = asyncio.run(client.generate(category))

    if isinstance(result, Failure):
        console.print(f"[red]Error: {result.message}[/red]")
        raise typer.Exit(code=1)

    if plain:
        console.print(result.content, markup=False, highlight=False)
    else:
        console.print(Panel(Text(result.content), title=category.label, border_style="cyan"))


@app.command("tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        envvar=LOG_LEVEL_ENV_VAR,
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive generator."""
    async def _tui():
        from ..ui import run_textual_tui

        await run_textual_tui(get_orchestrator(), log_level=log_level)

    warn_if_unconfigured(console)
    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
