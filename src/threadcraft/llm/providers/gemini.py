"""Google Gemini generation client.

Uses the official Google GenAI SDK's async chat sessions.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return responses without any text (safety filtering,
empty candidates). Those are reported as an empty reply, not an error.
"""

import logging

from google import genai
from google.genai import types

from ...errors import (
    ClientUnavailableError,
    SessionNotStartedError,
    StaleSessionError,
    TransportError,
)
from ..base import GenerationClient
from ..models import GenerationConfig, SessionHandle

logger = logging.getLogger(__name__)


class GeminiGenerationClient(GenerationClient):
    """Gemini implementation of GenerationClient.

    Hidden design decisions:
    - Google GenAI client initialization
    - Chat session creation with system instruction and temperature
    - Text extraction from responses that may carry no text
    - Mapping SDK failures to TransportError
    """

    def __init__(self, config: GenerationConfig, **client_kwargs):
        """Initialize the client.

        Args:
            config: Credential, model and temperature
            **client_kwargs: Additional kwargs for genai.Client
        """
        self._config = config
        self._client: genai.Client | None = None
        self._chat = None
        self._handle: SessionHandle | None = None

        if config.has_credential:
            self._client = genai.Client(api_key=config.api_key, **client_kwargs)
        else:
            logger.warning("No Gemini API key configured; generation is unavailable")

    @property
    def model(self) -> str:
        """Get the model name used for new sessions."""
        return self._config.model

    @property
    def available(self) -> bool:
        return self._client is not None

    @property
    def current_handle(self) -> SessionHandle | None:
        return self._handle

    def has_active_session(self) -> bool:
        return self._chat is not None

    def start_session(self, system_prompt: str, examples: str) -> SessionHandle:
        if self._client is None:
            raise ClientUnavailableError()

        instruction = self.compose_instruction(system_prompt, examples)
        self._chat = self._client.aio.chats.create(
            model=self._config.model,
            config=types.GenerateContentConfig(
                system_instruction=instruction,
                temperature=self._config.temperature,
            ),
        )
        self._handle = SessionHandle(instruction=instruction)
        logger.debug("Started session %s on %s", self._handle.id, self._config.model)
        return self._handle

    def _check_handle(self, handle: SessionHandle) -> None:
        current = self._handle
        if current is None or current.id != handle.id:
            raise StaleSessionError(handle.id, current.id if current else None)

    def _extract_content(self, response) -> str:
        """Extract text content from a Gemini response.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Text content or empty string
        """
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        # response.text may raise or return None
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    async def send_message(self, text: str, handle: SessionHandle) -> str:
        if self._client is None:
            raise ClientUnavailableError()
        if self._chat is None:
            raise SessionNotStartedError()
        self._check_handle(handle)

        chat = self._chat
        try:
            response = await chat.send_message(text)
        except Exception as e:
            logger.error("Error sending message to Gemini: %s", e)
            raise TransportError(str(e), original=e) from e

        # A newer session may have been bound while the call was in flight
        self._check_handle(handle)

        content = self._extract_content(response)
        logger.info("Gemini reply received (len=%d)", len(content))
        return content

    async def close(self) -> None:
        """Close the client.

        The Google GenAI client doesn't require explicit closing; the bound
        session is simply dropped.
        """
        self._chat = None
        self._handle = None
