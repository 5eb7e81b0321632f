"""Pytest configuration and shared fixtures."""
import os

import pytest

from threadcraft.errors import SessionNotStartedError
from threadcraft.llm import GenerationClient, SessionHandle
from threadcraft.saved import SavedOutputStore
from threadcraft.session import SessionController
from threadcraft.templates import TemplateStore


class StubClient(GenerationClient):
    """In-memory GenerationClient that records calls and returns canned replies."""

    def __init__(self, replies: list[str] | None = None, error: Exception | None = None):
        self.replies = list(replies or ["stub reply"])
        self.error = error
        self.started: list[tuple[str, str]] = []
        self.sent: list[tuple[str, SessionHandle]] = []
        self._handle: SessionHandle | None = None

    def start_session(self, system_prompt: str, examples: str) -> SessionHandle:
        self.started.append((system_prompt, examples))
        self._handle = SessionHandle(instruction=self.compose_instruction(system_prompt, examples))
        return self._handle

    async def send_message(self, text: str, handle: SessionHandle) -> str:
        self.sent.append((text, handle))
        if self.error is not None:
            raise self.error
        if self._handle is None:
            raise SessionNotStartedError()
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]

    def has_active_session(self) -> bool:
        return self._handle is not None

    @property
    def current_handle(self) -> SessionHandle | None:
        return self._handle


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"gemini": os.getenv("GEMINI_API_KEY")}


@pytest.fixture
def stub_client_cls():
    """Return the stub client class for tests that need custom instances."""
    return StubClient


@pytest.fixture
def stub_client():
    """Stub client replying with 'stub reply'."""
    return StubClient()


@pytest.fixture
def templates():
    """Template store seeded with the built-in styles."""
    return TemplateStore.with_defaults()


@pytest.fixture
def saved():
    return SavedOutputStore()


@pytest.fixture
def clipboard():
    """Fake clipboard collecting copied text."""
    copied: list[str] = []
    return copied


@pytest.fixture
def controller(stub_client, templates, saved, clipboard):
    """SessionController wired to the stub client and fresh stores."""
    return SessionController(
        stub_client,
        templates=templates,
        saved=saved,
        clipboard=clipboard.append,
    )
