"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Category button rendering and selection messages
- Output region classes and text
- History list rendering
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Button, RichLog, Static

from ..models import Category, HistoryEntry, UIState
from .config import LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import output_classes, render_history_entry, render_output


class CategorySelector(Horizontal):
    """Row of buttons, one per category. The selected one is highlighted."""

    class Selected(Message):
        """Message sent when the user picks a category."""

        def __init__(self, category: Category) -> None:
            super().__init__()
            self.category = category

    def compose(self):
        for category in Category:
            yield Button(category.label, id=f"category-{category.value}")

    def set_selected(self, category: Category) -> None:
        """Highlight the button for the selected category."""
        for button in self.query(Button):
            selected = button.id == f"category-{category.value}"
            button.variant = "primary" if selected else "default"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("category-"):
            event.stop()
            self.post_message(self.Selected(Category(button_id[len("category-"):])))


class OutputPanel(Static):
    """Output region: loading message, error, content, or placeholder."""

    BORDER_TITLE = "Output"

    def show_state(self, state: UIState) -> None:
        """Render the output region for a state."""
        for css_class in ("-loading", "-error", "-content", "-empty"):
            self.remove_class(css_class)
        self.add_class(output_classes(state))
        self.update(render_output(state))


class HistoryPanel(VerticalScroll):
    """Scrollable list of past generations, newest first."""

    BORDER_TITLE = "History"

    def show_history(self, entries: tuple[HistoryEntry, ...]) -> None:
        """Replace the rendered list with the given entries."""
        self.remove_children()
        if entries:
            self.mount(*[
                Static(render_history_entry(entry), classes="history-item")
                for entry in entries
            ])
        self.border_subtitle = f"{len(entries)} entries"
        self.display = bool(entries)
        self.scroll_home(animate=False)


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, CORE, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "CORE": "green",
            "LLM": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def handle(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point: route a (level, component, message) call."""
        self.add_entry(component, message, LogLevel.from_string(level))

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
