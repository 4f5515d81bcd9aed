"""UI configuration constants.

Centralizes display text and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Output region text
INTRO_TEXT = "Select a content type and click generate!"
LOADING_TEXT = "Generating content, please wait..."
PLACEHOLDER_TEXT = "Your generated content will appear here."

# Generate button labels
GENERATE_LABEL = "Generate"
GENERATING_LABEL = "Generating..."

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
