"""Terminal UI module for contentgen.

Provides a Textual-based TUI for the content generator.

Module structure (each module hides a design decision):
- config.py: Display text and log level constants
- formatting.py: Render functions (state in, markup out)
- widgets.py: Category selector, output region, history list, log panel
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- app.py: Application orchestration (user interaction flow)
"""

from .app import ContentGeneratorApp, run_textual_tui
from .config import LogLevel
from .widgets import CategorySelector, DebugPanel, HistoryPanel, OutputPanel

__all__ = [
    "CategorySelector",
    "ContentGeneratorApp",
    "DebugPanel",
    "HistoryPanel",
    "LogLevel",
    "OutputPanel",
    "run_textual_tui",
]
