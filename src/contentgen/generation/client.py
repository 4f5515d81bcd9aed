"""Generation client.

Turns a category into a prompt, sends it to the generation service and
returns the trimmed text. Service errors never leak to callers: they are
reported through the debug callback and replaced by a generic message.
"""

from collections.abc import Callable, Mapping
from typing import Any

from ..config import LLM_PROVIDER, Settings
from ..llm import ChatMessage, LLMProvider, create_llm_provider
from ..models import Category, Failure, FailureKind, GenerationResult, Success
from ..prompts import get_prompt
from .errors import GenerationFailedError, MissingCredentialError

ProviderFactory = Callable[[Settings], LLMProvider]


def default_provider_factory(settings: Settings) -> LLMProvider:
    """Create the Gemini provider for the given settings."""
    return create_llm_provider(LLM_PROVIDER, api_key=settings.api_key, model=settings.model)


class GenerationClient:
    """Client for category-based content generation.

    Hidden design decisions:
    - Which prompt is used for each category
    - Where the credential comes from (read on every call)
    - Which provider and model serve the request
    """

    def __init__(
        self,
        provider_factory: ProviderFactory | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            provider_factory: Builds a provider from settings (defaults to Gemini)
            environ: Environment mapping to read the credential from
                (defaults to os.environ)
        """
        self._provider_factory = provider_factory or default_provider_factory
        self._environ = environ
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "LLM", message)

    async def generate_content(self, category: Category) -> str:
        """Generate a snippet for a category.

        Args:
            category: Content category

        Returns:
            Generated text with surrounding whitespace removed

        Raises:
            ValueError: If category is not a Category member
            MissingCredentialError: If no API key is configured
            GenerationFailedError: If the service call fails for any reason
                or the response carries no text
        """
        prompt = get_prompt(category)

        settings = Settings.from_env(self._environ)
        if not settings.api_key:
            self._debug("error", "API key not configured, request not sent")
            raise MissingCredentialError()

        self._debug("info", f"Requesting {category.value} from {settings.model}")
        try:
            provider = self._provider_factory(settings)
            async with provider:
                response = await provider.chat_completion(
                    [ChatMessage(role="user", content=prompt)],
                    model=settings.model,
                )
        except Exception as e:
            self._debug("error", f"Error generating content: {type(e).__name__}: {e}")
            raise GenerationFailedError() from e

        if response.content is None:
            self._debug("error", "Error generating content: response contained no text")
            raise GenerationFailedError()

        content = response.content.strip()
        self._debug("debug", f"Received {len(content)} characters")
        return content

    async def generate(self, category: Category) -> GenerationResult:
        """Generate a snippet and report the outcome as a result value.

        Expected failures become ``Failure`` values. An invalid category
        still raises ValueError.
        """
        try:
            content = await self.generate_content(category)
        except MissingCredentialError as e:
            return Failure(kind=FailureKind.MISSING_CREDENTIAL, message=str(e))
        except GenerationFailedError as e:
            return Failure(kind=FailureKind.GENERATION_FAILED, message=str(e))
        return Success(content=content)
