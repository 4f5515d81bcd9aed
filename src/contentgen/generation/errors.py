"""Generation error taxonomy."""

MISSING_CREDENTIAL_MESSAGE = "API_KEY environment variable not set"
GENERATION_FAILED_MESSAGE = "Failed to generate content from AI. Please try again."


class ContentGenError(Exception):
    """Base class for expected, user-displayable generation failures."""


class MissingCredentialError(ContentGenError):
    """No API credential is configured. Raised before any network call."""

    def __init__(self, message: str = MISSING_CREDENTIAL_MESSAGE):
        super().__init__(message)


class GenerationFailedError(ContentGenError):
    """The generation service call failed.

    The message is always the generic user-safe text; the underlying
    error is available as ``__cause__``.
    """

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)
