"""Content generation module.

Maps categories to prompts and calls the generation service.
"""

from .client import GenerationClient, default_provider_factory
from .errors import (
    GENERATION_FAILED_MESSAGE,
    ContentGenError,
    GenerationFailedError,
    MissingCredentialError,
)

__all__ = [
    "GENERATION_FAILED_MESSAGE",
    "ContentGenError",
    "GenerationClient",
    "GenerationFailedError",
    "MissingCredentialError",
    "default_provider_factory",
]
