"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#main {
    width: 100%;
    max-width: 90;
    height: 1fr;
    padding: 0 2;
}

#intro {
    width: 100%;
    text-align: center;
    color: $text-muted;
    margin: 1 0;
}

/* ============================================
   Category Selector
   ============================================ */
#category-selector {
    width: 100%;
    height: 3;
    align: center middle;

    Button {
        margin: 0 1;
        min-width: 12;
    }
}

#generate-btn {
    width: 100%;
    margin: 1 0;

    &:disabled {
        background: $panel;
        color: $text-disabled;
    }
}

/* ============================================
   Output Region
   ============================================ */
#output {
    width: 100%;
    min-height: 7;
    height: auto;
    padding: 1 2;
    content-align: center middle;
    background: $panel;
    border: round $border;
    border-title-color: $primary;
    border-title-style: bold;

    &.-loading {
        border: round $accent;
    }

    &.-error {
        border: round $error;
        background: $error 10%;
    }

    &.-content {
        border: round $success;
    }
}

/* ============================================
   History Panel
   ============================================ */
#history {
    width: 100%;
    display: none;
    height: 1fr;
    margin-top: 1;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}

.history-item {
    width: 100%;
    height: auto;
    padding: 0 1;
    margin-bottom: 1;
    border-left: thick $secondary 50%;
}

/* ============================================
   Debug Panel
   ============================================ */
#debug-panel {
    display: none;
    height: 10;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}
"""
