"""
threadcraft: turn messy notes into styled social threads with Gemini.

Each module hides a specific design decision: templates own persona
storage, llm hides the generation API, session owns the live
conversation, and saved keeps outputs the user wants to keep.
"""

__version__ = "0.1.0"

from .errors import (
    ClientUnavailableError,
    GenerationError,
    GenerationInProgressError,
    MessageNotFoundError,
    SessionNotStartedError,
    StaleSessionError,
    TemplateNotFoundError,
    ThreadcraftError,
    TransportError,
)
from .llm import GenerationClient, GenerationConfig, SessionHandle, create_generation_client
from .saved import SavedOutputStore, SavedThread
from .session import Message, Role, SessionController
from .templates import StyleType, TemplateConfig, TemplateStore

__all__ = [
    "ClientUnavailableError",
    "GenerationClient",
    "GenerationConfig",
    "GenerationError",
    "GenerationInProgressError",
    "Message",
    "MessageNotFoundError",
    "Role",
    "SavedOutputStore",
    "SavedThread",
    "SessionController",
    "SessionHandle",
    "SessionNotStartedError",
    "StaleSessionError",
    "StyleType",
    "TemplateConfig",
    "TemplateNotFoundError",
    "TemplateStore",
    "ThreadcraftError",
    "TransportError",
    "create_generation_client",
]
