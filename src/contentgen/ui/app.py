"""Main Textual TUI application.

Wires the widgets to the RequestOrchestrator. The orchestrator owns all
state; the app only forwards user actions and renders state snapshots.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header, Static

from ..models import Category, UIState
from ..orchestrator import RequestOrchestrator
from .config import INTRO_TEXT, LogLevel
from .formatting import render_generate_label
from .styles import APP_CSS
from .themes import CATPPUCCIN_MOCHA
from .widgets import CategorySelector, DebugPanel, HistoryPanel, OutputPanel


class ContentGeneratorApp(App):
    """Textual TUI for the AI content generator."""

    CSS = APP_CSS
    TITLE = "AI Content Generator"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("g", "generate", "Generate"),
        Binding("1", "select_category('story')", "Story", show=False),
        Binding("2", "select_category('joke')", "Joke", show=False),
        Binding("3", "select_category('quote')", "Quote", show=False),
        Binding("ctrl+k", "clear_history", "Clear History"),
        Binding("ctrl+r", "copy_content", "Copy"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(
        self,
        orchestrator: RequestOrchestrator,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._orchestrator = orchestrator
        self._log_level = log_level

    @property
    def orchestrator(self) -> RequestOrchestrator:
        return self._orchestrator

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield Static(INTRO_TEXT, id="intro")
            yield CategorySelector(id="category-selector")
            yield Button(render_generate_label(self._orchestrator.state), id="generate-btn", variant="success")
            yield OutputPanel(id="output")
            yield HistoryPanel(id="history")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(CATPPUCCIN_MOCHA)
        self.theme = "catppuccin-mocha"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._orchestrator.set_debug_callback(log_panel.handle)
        self._orchestrator.set_state_callback(self._render_state)
        self._render_state(self._orchestrator.state)

    def _render_state(self, state: UIState) -> None:
        """Render a state snapshot into the widgets."""
        self.query_one("#category-selector", CategorySelector).set_selected(state.category)

        button = self.query_one("#generate-btn", Button)
        button.disabled = state.loading
        button.label = render_generate_label(state)

        self.query_one("#output", OutputPanel).show_state(state)
        self.query_one("#history", HistoryPanel).show_history(state.history)

    def on_category_selector_selected(self, event: CategorySelector.Selected) -> None:
        self._orchestrator.select_category(event.category)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate-btn":
            self.action_generate()

    def action_generate(self) -> None:
        """Start a generate cycle unless one is already running."""
        # Mirrors the disabled button for the keyboard shortcut
        if self._orchestrator.loading:
            return
        self._run_generate()

    @work(exclusive=False)
    async def _run_generate(self) -> None:
        """Run one generate cycle as a background async worker."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        try:
            state = await self._orchestrator.generate()
        except ValueError as e:
            log_panel.error("TUI", f"Invalid category: {e}")
            raise

        if state.error:
            self.notify(state.error, severity="error", timeout=5)

    def action_select_category(self, value: str) -> None:
        self._orchestrator.select_category(Category(value))

    def action_clear_history(self) -> None:
        """Clear the generation history."""
        self._orchestrator.clear_history()
        self.notify("History cleared", timeout=2)

    def action_copy_content(self) -> None:
        """Copy the current content to clipboard."""
        content = self._orchestrator.state.content
        if content:
            self.copy_to_clipboard(content)
            self.notify("Content copied")
        else:
            self.notify("No content to copy", severity="warning")

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(
    orchestrator: RequestOrchestrator,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        orchestrator: Orchestrator owning the UI state
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ContentGeneratorApp(orchestrator=orchestrator, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
