"""Request orchestrator.

Owns the UI state and drives the generate cycle:
Idle -> Loading -> Success(content) | Failure(message) -> Idle.

State changes only through the transition methods below; readers get
immutable UIState snapshots.
"""

from typing import Any

from .generation import GenerationClient
from .history import MAX_HISTORY_ENTRIES, History
from .models import Category, Failure, UIState

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class RequestOrchestrator:
    """Controller for the single-screen generator.

    There is no guard against overlapping ``generate()`` calls; the UI
    disables its trigger while ``loading`` is set.
    """

    def __init__(
        self,
        client: GenerationClient,
        max_history: int = MAX_HISTORY_ENTRIES,
    ) -> None:
        self._client = client
        self._category = Category.STORY
        self._loading = False
        self._error: str | None = None
        self._content = ""
        self._history = History(max_entries=max_history)
        self._debug_callback: Any | None = None
        self._state_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback and propagate it to the client.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._client.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "CORE", message)

    def set_state_callback(self, callback: Any) -> None:
        """Set a callback invoked with a fresh UIState after every transition.

        Args:
            callback: Callable(state: UIState)
        """
        self._state_callback = callback

    def _notify(self) -> None:
        if self._state_callback:
            self._state_callback(self.state)

    @property
    def state(self) -> UIState:
        """Snapshot of the current UI state."""
        return UIState(
            category=self._category,
            loading=self._loading,
            error=self._error,
            content=self._content,
            history=self._history.entries(),
        )

    @property
    def category(self) -> Category:
        return self._category

    @property
    def loading(self) -> bool:
        return self._loading

    def select_category(self, category: Category) -> None:
        """Store the selected category."""
        self._category = Category(category)
        self._debug("debug", f"Category selected: {self._category.value}")
        self._notify()

    def clear_history(self) -> None:
        """Drop all history entries."""
        self._history.clear()
        self._debug("info", "History cleared")
        self._notify()

    def start_generation(self) -> None:
        """Enter Loading: clear the error and content."""
        self._loading = True
        self._error = None
        self._content = ""
        self._debug("info", f"Generating {self._category.value}")
        self._notify()

    def complete_generation(self, category: Category, content: str) -> None:
        """Store the content and prepend it to history."""
        self._content = content
        entry = self._history.record(category, content)
        self._debug("info", f"Generated {category.value} ({entry.id}), history size {len(self._history)}")

    def fail_generation(self, message: str | None) -> None:
        """Store a displayable error message."""
        self._error = message or UNKNOWN_ERROR_MESSAGE
        self._debug("warning", f"Generation failed: {self._error}")

    def finish_generation(self) -> None:
        """Leave Loading. Always the last step of a cycle."""
        self._loading = False
        self._notify()

    async def generate(self) -> UIState:
        """Run one generate cycle for the current category.

        Returns:
            The settled state after the cycle
        """
        category = self._category
        self.start_generation()
        try:
            result = await self._client.generate(category)
            if isinstance(result, Failure):
                self.fail_generation(result.message)
            else:
                self.complete_generation(category, result.content)
        finally:
            self.finish_generation()
        return self.state
