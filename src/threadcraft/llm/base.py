from abc import ABC, abstractmethod
from typing import Any

from ..prompts import compose_instruction
from .models import SessionHandle


class GenerationClient(ABC):
    """Abstract base class for session-oriented text generation.

    This module hides the design decision of which generation API is used.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Binding a chat session to a system instruction
    - Wrapping upstream failures in TransportError

    State machine:
        Uninitialized -> Ready -> Bound -> (send_message)* -> Bound
    start_session is also valid from Bound and rebinds. Sessions are
    abandoned rather than closed.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            handle = client.start_session(prompt, examples)
            reply = await client.send_message("text", handle)
    """

    @staticmethod
    def compose_instruction(system_prompt: str, examples: str) -> str:
        """Build the system instruction a session is bound to."""
        return compose_instruction(system_prompt, examples)

    @abstractmethod
    def start_session(self, system_prompt: str, examples: str) -> SessionHandle:
        """Bind a new session, replacing any prior one.

        Args:
            system_prompt: Persona instructions
            examples: Few-shot examples

        Returns:
            Handle identifying the new session

        Raises:
            ClientUnavailableError: If no credential is configured
        """

    @abstractmethod
    async def send_message(self, text: str, handle: SessionHandle) -> str:
        """Send one user turn within the bound session.

        Args:
            text: User message
            handle: The session the caller expects to be talking to

        Returns:
            Generated reply text, or "" when the response has no text

        Raises:
            ClientUnavailableError: If no credential is configured
            SessionNotStartedError: If start_session was never called
            StaleSessionError: If a newer session has been started
            TransportError: On network or API failure (not retried)
        """

    @abstractmethod
    def has_active_session(self) -> bool:
        """Whether a session is currently bound."""

    @property
    @abstractmethod
    def current_handle(self) -> SessionHandle | None:
        """Handle of the bound session, or None."""

    async def close(self) -> None:
        """Release any open connections or resources."""

    async def __aenter__(self) -> "GenerationClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup."""
        await self.close()
