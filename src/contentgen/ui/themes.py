"""Theme definitions for the TUI.

This module hides the color palette. To add a new theme, define it here
and register it in the app.
"""

from textual.theme import Theme

# Catppuccin Mocha palette
CATPPUCCIN_MOCHA = Theme(
    name="catppuccin-mocha",
    primary="#89b4fa",      # Blue - selected category
    secondary="#cba6f7",    # Mauve - history border
    accent="#f9e2af",       # Yellow - loading highlight
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",      # Green - generate button
    warning="#fab387",
    error="#f38ba8",        # Red - error output
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",
        "footer-foreground": "#bac2de",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",
        "footer-key-background": "#313244",
        "text-muted": "#6c7086",
        "text-disabled": "#45475a",
        "button-foreground": "#cdd6f4",
        "button-color-foreground": "#11111b",
        "button-focus-text-style": "bold reverse",
    },
)
