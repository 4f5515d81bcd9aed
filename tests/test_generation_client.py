"""Unit tests for the generation client."""
import pytest
from conftest import FakeProvider, RecordingFactory

from contentgen.generation import (
    GENERATION_FAILED_MESSAGE,
    GenerationClient,
    GenerationFailedError,
    MissingCredentialError,
)
from contentgen.models import Category, Failure, FailureKind, Success


class TestGenerateContent:
    """Tests for GenerationClient.generate_content."""

    @pytest.mark.asyncio
    async def test_returns_trimmed_text(self, env_with_key):
        provider = FakeProvider(
            reply=" Why did the chicken cross the road? To get to the other side. "
        )
        client = GenerationClient(provider_factory=RecordingFactory(provider), environ=env_with_key)

        text = await client.generate_content(Category.JOKE)

        assert text == "Why did the chicken cross the road? To get to the other side."

    @pytest.mark.asyncio
    async def test_sends_category_prompt_with_fixed_model(self, client, fake_provider):
        await client.generate_content(Category.QUOTE)

        assert len(fake_provider.requests) == 1
        (message,) = fake_provider.requests[0]
        assert message.role == "user"
        assert "motivational quote" in message.content
        assert fake_provider.models == ["gemini-2.5-flash"]

    @pytest.mark.asyncio
    async def test_closes_provider(self, client, fake_provider):
        await client.generate_content(Category.STORY)
        assert fake_provider.closed

    @pytest.mark.asyncio
    @pytest.mark.parametrize("environ", [{}, {"GEMINI_API_KEY": ""}, {"OTHER": "x"}])
    async def test_missing_credential_makes_no_call(self, environ):
        provider = FakeProvider()
        factory = RecordingFactory(provider)
        client = GenerationClient(provider_factory=factory, environ=environ)

        with pytest.raises(MissingCredentialError):
            await client.generate_content(Category.STORY)

        assert factory.calls == 0
        assert provider.requests == []

    @pytest.mark.asyncio
    async def test_legacy_api_key_variable(self):
        factory = RecordingFactory(FakeProvider())
        client = GenerationClient(provider_factory=factory, environ={"API_KEY": "legacy"})

        await client.generate_content(Category.JOKE)

        assert factory.settings[0].api_key == "legacy"

    @pytest.mark.asyncio
    async def test_credential_read_on_every_call(self):
        environ: dict[str, str] = {}
        factory = RecordingFactory(FakeProvider())
        client = GenerationClient(provider_factory=factory, environ=environ)

        with pytest.raises(MissingCredentialError):
            await client.generate_content(Category.JOKE)

        environ["GEMINI_API_KEY"] = "added-later"
        await client.generate_content(Category.JOKE)

        assert factory.calls == 1

    @pytest.mark.asyncio
    async def test_transport_error_becomes_generic_failure(self, env_with_key):
        provider = FakeProvider(error=ConnectionError("socket reset by peer at 10.0.0.7"))
        client = GenerationClient(provider_factory=RecordingFactory(provider), environ=env_with_key)

        with pytest.raises(GenerationFailedError) as exc_info:
            await client.generate_content(Category.STORY)

        assert str(exc_info.value) == GENERATION_FAILED_MESSAGE
        assert "socket" not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_provider_construction_error_is_generation_failure(self, env_with_key):
        def broken_factory(settings):
            raise RuntimeError("bad client options")

        client = GenerationClient(provider_factory=broken_factory, environ=env_with_key)

        with pytest.raises(GenerationFailedError):
            await client.generate_content(Category.QUOTE)

    @pytest.mark.asyncio
    async def test_error_is_logged_through_debug_callback(self, env_with_key):
        provider = FakeProvider(error=TimeoutError("upstream timed out"))
        client = GenerationClient(provider_factory=RecordingFactory(provider), environ=env_with_key)
        logged: list[tuple[str, str, str]] = []
        client.set_debug_callback(lambda level, component, message: logged.append((level, component, message)))

        with pytest.raises(GenerationFailedError):
            await client.generate_content(Category.STORY)

        errors = [entry for entry in logged if entry[0] == "error"]
        assert errors
        assert errors[-1][1] == "LLM"
        assert "upstream timed out" in errors[-1][2]

    @pytest.mark.asyncio
    async def test_response_without_text_is_generation_failure(self, env_with_key):
        provider = FakeProvider(reply=None)
        client = GenerationClient(provider_factory=RecordingFactory(provider), environ=env_with_key)
        logged: list[tuple[str, str, str]] = []
        client.set_debug_callback(lambda level, component, message: logged.append((level, component, message)))

        with pytest.raises(GenerationFailedError) as exc_info:
            await client.generate_content(Category.STORY)

        assert str(exc_info.value) == GENERATION_FAILED_MESSAGE
        assert len(provider.requests) == 1
        errors = [entry for entry in logged if entry[0] == "error"]
        assert errors
        assert "no text" in errors[-1][2]

    @pytest.mark.asyncio
    async def test_whitespace_only_reply_is_returned_empty(self, env_with_key):
        client = GenerationClient(
            provider_factory=RecordingFactory(FakeProvider(reply="  \n ")),
            environ=env_with_key,
        )

        assert await client.generate_content(Category.JOKE) == ""

    @pytest.mark.asyncio
    async def test_invalid_category_raises_before_anything_else(self):
        factory = RecordingFactory(FakeProvider())
        client = GenerationClient(provider_factory=factory, environ={})

        with pytest.raises(ValueError):
            await client.generate_content("limerick")  # type: ignore[arg-type]

        assert factory.calls == 0


class TestGenerate:
    """Tests for the result-returning GenerationClient.generate."""

    @pytest.mark.asyncio
    async def test_success(self, env_with_key):
        client = GenerationClient(
            provider_factory=RecordingFactory(FakeProvider(reply="\n A quote. \n")),
            environ=env_with_key,
        )

        result = await client.generate(Category.QUOTE)

        assert result == Success(content="A quote.")

    @pytest.mark.asyncio
    async def test_missing_credential_failure(self):
        client = GenerationClient(provider_factory=RecordingFactory(FakeProvider()), environ={})

        result = await client.generate(Category.JOKE)

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.MISSING_CREDENTIAL
        assert result.message

    @pytest.mark.asyncio
    async def test_service_failure(self, env_with_key):
        client = GenerationClient(
            provider_factory=RecordingFactory(FakeProvider(error=OSError("boom"))),
            environ=env_with_key,
        )

        result = await client.generate(Category.JOKE)

        assert result == Failure(kind=FailureKind.GENERATION_FAILED, message=GENERATION_FAILED_MESSAGE)

    @pytest.mark.asyncio
    async def test_response_without_text_failure(self, env_with_key):
        client = GenerationClient(
            provider_factory=RecordingFactory(FakeProvider(reply=None)),
            environ=env_with_key,
        )

        result = await client.generate(Category.QUOTE)

        assert result == Failure(kind=FailureKind.GENERATION_FAILED, message=GENERATION_FAILED_MESSAGE)

    @pytest.mark.asyncio
    async def test_invalid_category_propagates(self, env_with_key):
        client = GenerationClient(provider_factory=RecordingFactory(FakeProvider()), environ=env_with_key)

        with pytest.raises(ValueError):
            await client.generate("limerick")  # type: ignore[arg-type]


class TestDefaultProviderFactory:
    """Tests for the Gemini-backed default factory."""

    def test_builds_gemini_provider(self):
        from contentgen.config import Settings
        from contentgen.generation import default_provider_factory
        from contentgen.llm import GeminiProvider

        provider = default_provider_factory(Settings(api_key="fake-key"))

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-2.5-flash"

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_generate_real_api(self, api_keys):
        """Integration test: generate a joke with the real API."""
        if not api_keys["gemini"]:
            pytest.skip("GEMINI_API_KEY not set")

        client = GenerationClient()
        text = await client.generate_content(Category.JOKE)

        assert text
        assert text == text.strip()
