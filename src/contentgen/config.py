"""Environment-backed settings.

Centralizes the environment variable names and fixed values used by the
generation client and the CLI.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .llm.providers.gemini import DEFAULT_MODEL

# Checked in order; API_KEY is kept for existing setups
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")
LOG_LEVEL_ENV_VAR = "CONTENTGEN_LOG_LEVEL"

LLM_PROVIDER = "gemini"


@dataclass(frozen=True)
class Settings:
    """Settings resolved from the environment.

    Attributes:
        api_key: Generation service credential, or None if unset
        model: Fixed model identifier
    """

    api_key: str | None
    model: str = DEFAULT_MODEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from an environment mapping.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        api_key = None
        for name in API_KEY_ENV_VARS:
            value = env.get(name)
            if value:
                api_key = value
                break
        return cls(api_key=api_key)
