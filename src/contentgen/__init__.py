"""
contentgen: generate short AI stories, jokes and quotes.

Each module hides a specific design decision: which service generates the
text, how prompts are chosen, how state and history are kept, and how the
terminal UI renders them.
"""

__version__ = "0.1.0"

from .generation import (
    ContentGenError,
    GenerationClient,
    GenerationFailedError,
    MissingCredentialError,
)
from .history import MAX_HISTORY_ENTRIES, History
from .models import (
    Category,
    Failure,
    FailureKind,
    GenerationResult,
    HistoryEntry,
    Success,
    UIState,
)
from .orchestrator import RequestOrchestrator

__all__ = [
    "MAX_HISTORY_ENTRIES",
    "Category",
    "ContentGenError",
    "Failure",
    "FailureKind",
    "GenerationClient",
    "GenerationFailedError",
    "GenerationResult",
    "History",
    "HistoryEntry",
    "MissingCredentialError",
    "RequestOrchestrator",
    "Success",
    "UIState",
]
