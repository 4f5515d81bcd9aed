"""Component factory functions for CLI.

Centralizes creation of the generation client and orchestrator, and how
their debug output reaches the terminal.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape

from ..config import API_KEY_ENV_VARS, Settings
from ..generation import GenerationClient
from ..orchestrator import RequestOrchestrator
from ..ui.config import LogLevel

# Diagnostics go to stderr so generated text on stdout stays clean
_err_console = Console(stderr=True)


def warn_if_unconfigured(console: Console) -> None:
    """Print a warning when no API key is set.

    The key is still read on every request, so a missing key is not fatal
    here; generation reports it as an error instead.
    """
    if not Settings.from_env().api_key:
        names = " or ".join(API_KEY_ENV_VARS)
        console.print(f"[yellow]Warning: {names} not set, generation will fail[/yellow]")


def console_debug_callback(log_level: str, console: Console | None = None) -> Any:
    """Build a debug callback that prints to a Rich console.

    Args:
        log_level: Minimum level to print (debug, info, warning, error)
        console: Console to print to (defaults to stderr)

    Returns:
        Callable(level: str, component: str, message: str)
    """
    con = console or _err_console
    threshold = LogLevel.from_string(log_level)

    def _callback(level: str, component: str, message: str) -> None:
        numeric = LogLevel.from_string(level)
        if numeric < threshold:
            return
        con.print(f"[dim]{LogLevel.name(numeric):<7}[/dim] \\[{component}] {escape(message)}")

    return _callback


def get_client(log_level: str | None = None) -> GenerationClient:
    """Create the generation client, optionally printing its debug output."""
    client = GenerationClient()
    if log_level is not None:
        client.set_debug_callback(console_debug_callback(log_level))
    return client


def get_orchestrator() -> RequestOrchestrator:
    """Create the orchestrator used by the TUI."""
    return RequestOrchestrator(GenerationClient())
