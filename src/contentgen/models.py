"""Core data models.

These models define the content categories, history entries and the UI
state snapshot, independent of how the state is rendered.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Closed set of content kinds a user can request."""

    STORY = "story"
    JOKE = "joke"
    QUOTE = "quote"

    @property
    def label(self) -> str:
        """Capitalized name for buttons and headers."""
        return self.value.capitalize()


class HistoryEntry(BaseModel):
    """Record of a single successful generation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier (ISO creation timestamp)")
    category: Category = Field(description="Category the content was generated for")
    content: str = Field(description="Generated text")
    created_at: int = Field(description="Creation time in milliseconds since the epoch")


class UIState(BaseModel):
    """Immutable snapshot of everything the UI renders."""

    model_config = ConfigDict(frozen=True)

    category: Category = Category.STORY
    loading: bool = False
    error: str | None = None
    content: str = ""
    history: tuple[HistoryEntry, ...] = ()


class FailureKind(str, Enum):
    """Kinds of expected generation failures."""

    MISSING_CREDENTIAL = "missing_credential"
    GENERATION_FAILED = "generation_failed"


@dataclass(frozen=True)
class Success:
    """Generation produced text."""

    content: str


@dataclass(frozen=True)
class Failure:
    """Generation failed with a user-safe message."""

    kind: FailureKind
    message: str


GenerationResult = Success | Failure
