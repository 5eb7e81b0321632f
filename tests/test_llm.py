"""Unit tests for the llm module."""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from threadcraft.errors import (
    ClientUnavailableError,
    SessionNotStartedError,
    StaleSessionError,
    TransportError,
)
from threadcraft.llm import (
    GeminiGenerationClient,
    GenerationClient,
    GenerationConfig,
    create_generation_client,
)
from threadcraft.prompts import compose_instruction, get_output_directive


def _response(text: str | None = None, parts: list[str] | None = None):
    """Build a minimal stand-in for a GenerateContentResponse."""
    candidates = None
    if parts is not None:
        content = SimpleNamespace(parts=[SimpleNamespace(text=p) for p in parts])
        candidates = [SimpleNamespace(content=content)]
    return SimpleNamespace(candidates=candidates, text=text)


@pytest.fixture
def genai_client():
    """Patch genai.Client and return (client_class_mock, chat_mock)."""
    with patch("threadcraft.llm.providers.gemini.genai.Client") as client_cls:
        chat = MagicMock()
        chat.send_message = AsyncMock(return_value=_response(text="generated"))
        client_cls.return_value.aio.chats.create.return_value = chat
        yield client_cls, chat


@pytest.fixture
def gemini(genai_client):
    return GeminiGenerationClient(GenerationConfig(api_key="fake-key"))


class TestComposeInstruction:
    """Tests for the composed system instruction."""

    def test_layout(self):
        instruction = compose_instruction("Be a pirate.", "Input: hi Output: arr")

        assert instruction == (
            "Be a pirate.\n\n"
            "### EXAMPLES OF DESIRED OUTPUT ###\nInput: hi Output: arr\n\n"
            f"### IMPORTANT ###\n{get_output_directive()}"
        )

    def test_directive_forbids_filler(self):
        directive = get_output_directive()
        assert "Do not output conversational filler" in directive
        assert not directive.endswith("\n")

    def test_client_exposes_same_composition(self):
        assert GenerationClient.compose_instruction("a", "b") == compose_instruction("a", "b")


class TestGenerationConfig:
    """Tests for GenerationConfig model."""

    def test_defaults(self):
        config = GenerationConfig()
        assert config.api_key is None
        assert config.model == "gemini-2.5-flash"
        assert config.temperature == 0.7
        assert not config.has_credential

    def test_api_key_hidden_from_repr(self):
        assert "secret" not in repr(GenerationConfig(api_key="secret"))

    def test_temperature_out_of_range_fails(self):
        with pytest.raises(ValueError):
            GenerationConfig(temperature=3.0)


class TestGeminiGenerationClient:
    """Tests for GeminiGenerationClient with a mocked SDK."""

    def test_client_is_abstract(self):
        with pytest.raises(TypeError):
            GenerationClient()  # type: ignore

    def test_no_session_initially(self, gemini):
        assert not gemini.has_active_session()
        assert gemini.current_handle is None

    def test_start_session_binds_chat(self, gemini, genai_client):
        client_cls, _ = genai_client
        handle = gemini.start_session("Persona", "Examples")

        create = client_cls.return_value.aio.chats.create
        create.assert_called_once()
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["config"].system_instruction == compose_instruction("Persona", "Examples")
        assert kwargs["config"].temperature == 0.7

        assert gemini.has_active_session()
        assert gemini.current_handle == handle
        assert handle.instruction == compose_instruction("Persona", "Examples")

    def test_start_session_rebinds(self, gemini):
        first = gemini.start_session("A", "a")
        second = gemini.start_session("B", "b")
        assert first.id != second.id
        assert gemini.current_handle == second

    @pytest.mark.asyncio
    async def test_send_message_returns_text(self, gemini, genai_client):
        _, chat = genai_client
        handle = gemini.start_session("Persona", "Examples")

        reply = await gemini.send_message("i love mondays", handle)

        assert reply == "generated"
        chat.send_message.assert_awaited_once_with("i love mondays")

    @pytest.mark.asyncio
    async def test_send_message_joins_candidate_parts(self, gemini, genai_client):
        _, chat = genai_client
        chat.send_message.return_value = _response(parts=["first ", "second"])
        handle = gemini.start_session("Persona", "Examples")

        assert await gemini.send_message("hi", handle) == "first second"

    @pytest.mark.asyncio
    async def test_send_message_empty_response(self, gemini, genai_client):
        """A response without text yields an empty string."""
        _, chat = genai_client
        chat.send_message.return_value = _response(text=None)
        handle = gemini.start_session("Persona", "Examples")

        assert await gemini.send_message("hi", handle) == ""

    @pytest.mark.asyncio
    async def test_send_before_start_raises(self, gemini):
        from threadcraft.llm import SessionHandle

        with pytest.raises(SessionNotStartedError):
            await gemini.send_message("hi", SessionHandle(instruction="x"))

    @pytest.mark.asyncio
    async def test_stale_handle_raises(self, gemini, genai_client):
        _, chat = genai_client
        old = gemini.start_session("A", "a")
        gemini.start_session("B", "b")

        with pytest.raises(StaleSessionError):
            await gemini.send_message("hi", old)
        chat.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rebind_during_flight_is_detected(self, gemini, genai_client):
        """A session rebound while a request is in flight invalidates its reply."""
        _, chat = genai_client
        handle = gemini.start_session("A", "a")

        async def rebind_then_reply(text):
            gemini.start_session("B", "b")
            return _response(text="late")

        chat.send_message.side_effect = rebind_then_reply

        with pytest.raises(StaleSessionError):
            await gemini.send_message("hi", handle)

    @pytest.mark.asyncio
    async def test_upstream_failure_wrapped(self, gemini, genai_client):
        _, chat = genai_client
        boom = RuntimeError("503 unavailable")
        chat.send_message.side_effect = boom
        handle = gemini.start_session("A", "a")

        with pytest.raises(TransportError) as exc_info:
            await gemini.send_message("hi", handle)

        assert exc_info.value.original is boom
        assert exc_info.value.__cause__ is boom
        assert chat.send_message.await_count == 1

    @pytest.mark.asyncio
    async def test_missing_key_fails_every_call(self):
        with patch("threadcraft.llm.providers.gemini.genai.Client") as client_cls:
            client = GeminiGenerationClient(GenerationConfig())
            client_cls.assert_not_called()

        assert not client.available
        with pytest.raises(ClientUnavailableError):
            client.start_session("A", "a")

        from threadcraft.llm import SessionHandle

        with pytest.raises(ClientUnavailableError):
            await client.send_message("hi", SessionHandle(instruction="x"))

    @pytest.mark.asyncio
    async def test_context_manager_drops_session(self, gemini):
        async with gemini as client:
            client.start_session("A", "a")
            assert client.has_active_session()
        assert not gemini.has_active_session()

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_real_api(self, api_keys):
        """Integration test: one turn against the real API."""
        if not api_keys["gemini"]:
            pytest.skip("GEMINI_API_KEY not set")

        client = GeminiGenerationClient(GenerationConfig(api_key=api_keys["gemini"]))
        handle = client.start_session("Reply with one short sentence.", "Input: hi\nOutput: hello there.")
        reply = await client.send_message("hi", handle)
        assert isinstance(reply, str)


class TestGenerationFactory:
    """Tests for create_generation_client."""

    def test_creates_gemini_client(self, genai_client):
        client = create_generation_client("gemini", GenerationConfig(api_key="k"))
        assert isinstance(client, GeminiGenerationClient)

    def test_default_config_is_unconfigured(self):
        client = create_generation_client()
        assert isinstance(client, GeminiGenerationClient)
        assert not client.available

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_generation_client("llama")
