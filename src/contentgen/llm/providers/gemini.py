"""Google Gemini provider implementation.

Uses the official Google GenAI SDK for async content generation.
Reference: https://github.com/googleapis/python-genai

Each request is a single attempt: no streaming, no retries and no timeout
beyond whatever the SDK applies.
"""

from typing import Any

from google import genai
from google.genai import types

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiProvider(LLMProvider):
    """Google Gemini provider.

    Hidden design decisions:
    - Google GenAI client initialization
    - Message format conversion
    - Text extraction from candidates
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model name
            **client_kwargs: Additional kwargs for genai.Client
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    def _convert_messages(self, messages: list[ChatMessage]) -> list[types.Content]:
        """Convert chat messages to Gemini contents."""
        return [
            types.Content(role=msg.role, parts=[types.Part(text=msg.content)])
            for msg in messages
        ]

    def _extract_content(self, response) -> str | None:
        """Join the text parts of the first candidate.

        Falls back to ``response.text`` when the candidate carries no parts.
        Returns None when the response holds no text at all, for example
        when the prompt was blocked.
        """
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        try:
            return response.text
        except (ValueError, AttributeError):
            return None

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate content with a single Gemini request.

        Args:
            messages: Messages making up the request
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Additional GenerateContentConfig fields

        Returns:
            LLMResponse with generated content
        """
        model_to_use = model or self._model

        config = types.GenerateContentConfig(temperature=temperature, **kwargs)
        if max_tokens is not None:
            config.max_output_tokens = max_tokens

        response = await self._client.aio.models.generate_content(
            model=model_to_use,
            contents=self._convert_messages(messages),
            config=config
        )

        return LLMResponse(
            content=self._extract_content(response),
            model=model_to_use,
        )

    async def close(self) -> None:
        """Close the Gemini client.

        The GenAI client needs no explicit closing; kept for interface
        consistency.
        """
