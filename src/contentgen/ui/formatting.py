"""Render functions for the TUI.

Each function takes state and returns Rich markup. Generated text is
escaped so brackets in model output are never read as markup.
"""

from rich.markup import escape

from ..models import Category, HistoryEntry, UIState
from .config import GENERATE_LABEL, GENERATING_LABEL, LOADING_TEXT, PLACEHOLDER_TEXT

CATEGORY_ICONS = {
    Category.STORY: "📖",
    Category.JOKE: "😄",
    Category.QUOTE: "💬",
}


def render_output(state: UIState) -> str:
    """Render the output region.

    Shows the loading message, the error, the content, or the placeholder,
    in that order of precedence.
    """
    if state.loading:
        return f"[italic dim]{LOADING_TEXT}[/]"
    if state.error:
        return f"[bold red]{escape(state.error)}[/]"
    if state.content:
        return escape(state.content)
    return f"[dim]{PLACEHOLDER_TEXT}[/]"


def output_classes(state: UIState) -> str:
    """CSS class for the output region's current condition."""
    if state.loading:
        return "-loading"
    if state.error:
        return "-error"
    if state.content:
        return "-content"
    return "-empty"


def render_generate_label(state: UIState) -> str:
    return GENERATING_LABEL if state.loading else GENERATE_LABEL


def render_history_entry(entry: HistoryEntry) -> str:
    """Render one history entry as a header line plus its text."""
    icon = CATEGORY_ICONS.get(entry.category, "")
    return f"{icon} [bold]{entry.category.label}[/]\n{escape(entry.content)}"
