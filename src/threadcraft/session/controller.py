"""Conversation controller.

Sequences the two user-facing operations against the generation client:
- generate: start a fresh session for the selected style
- refine: continue the bound session with a follow-up turn

Also routes the copy/save actions and template mutations issued by the
presentation layer, so that layer only ever talks to this object.
"""

import logging
from collections.abc import Callable

from ..errors import GenerationInProgressError, MessageNotFoundError, SessionNotStartedError
from ..llm import GenerationClient, SessionHandle
from ..saved import SavedOutputStore, SavedThread
from ..templates import StyleType, TemplateConfig, TemplateStore
from .models import GENERATION_ERROR_MESSAGE, Message, Role

logger = logging.getLogger(__name__)

ChangeCallback = Callable[["SessionController"], None]
Clipboard = Callable[[str], None]


class SessionController:
    """Owns the single live conversation.

    At most one generate/refine call runs at a time: a second call while
    one is in flight raises GenerationInProgressError. Whitespace-only
    input is ignored before that check, and leaves all state untouched.
    """

    def __init__(
        self,
        client: GenerationClient,
        templates: TemplateStore | None = None,
        saved: SavedOutputStore | None = None,
        clipboard: Clipboard | None = None,
        on_change: ChangeCallback | None = None,
        selected_style: str = StyleType.NATURAL.value,
    ) -> None:
        self._client = client
        self._templates = templates if templates is not None else TemplateStore.with_defaults()
        self._saved = saved if saved is not None else SavedOutputStore()
        self._clipboard = clipboard
        self._listeners: list[ChangeCallback] = [on_change] if on_change else []

        self._templates.get(selected_style)
        self._selected_style = selected_style
        self._transcript: list[Message] = []
        self._in_flight = False
        self._handle: SessionHandle | None = None
        self._last_error: str | None = None

    # -- state -------------------------------------------------------------

    @property
    def client(self) -> GenerationClient:
        return self._client

    @property
    def templates(self) -> TemplateStore:
        return self._templates

    @property
    def saved(self) -> SavedOutputStore:
        return self._saved

    @property
    def selected_style(self) -> str:
        return self._selected_style

    @property
    def selected_template(self) -> TemplateConfig:
        return self._templates.get(self._selected_style)

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def handle(self) -> SessionHandle | None:
        """Session the transcript belongs to, or None before a generation."""
        return self._handle

    @property
    def last_error(self) -> str | None:
        """Message of the most recent generate/refine failure."""
        return self._last_error

    @property
    def has_history(self) -> bool:
        return bool(self._transcript)

    def subscribe(self, callback: ChangeCallback) -> None:
        """Register a callback fired after every state transition."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self)

    def _begin(self) -> None:
        if self._in_flight:
            raise GenerationInProgressError()
        self._in_flight = True
        self._last_error = None

    # -- generation --------------------------------------------------------

    async def generate(self, raw_input: str, style_key: str | None = None) -> bool:
        """Start a fresh session and generate a reply to `raw_input`.

        The transcript is replaced. On failure it ends with a fixed apology
        message instead of a reply, and the error is logged, not raised.

        Args:
            raw_input: Unstructured user text
            style_key: Style to use; defaults to the selected style

        Returns:
            True if a reply was produced and the input was consumed

        Raises:
            GenerationInProgressError: If another call is in flight
        """
        if not raw_input.strip():
            return False

        self._begin()
        user_msg = Message.user_turn(raw_input)
        self._transcript = [user_msg]
        self._handle = None
        try:
            self._notify()
            key = style_key or self._selected_style
            template = self._templates.get(key)
            self._selected_style = key
            self._handle = self._client.start_session(template.system_prompt, template.examples)
            reply = await self._client.send_message(raw_input, self._handle)
        except Exception as e:
            logger.exception("Generation failed")
            self._last_error = str(e)
            self._transcript = [user_msg, Message.model_turn(GENERATION_ERROR_MESSAGE)]
            return False
        else:
            self._transcript = [user_msg, Message.model_turn(reply)]
            return True
        finally:
            self._in_flight = False
            self._notify()

    async def refine(self, text: str) -> bool:
        """Send a follow-up turn within the current session.

        The user turn is always appended. On failure no reply is appended;
        the error is logged and exposed through `last_error`.

        Returns:
            True if a reply was appended

        Raises:
            GenerationInProgressError: If another call is in flight
        """
        if not text.strip():
            return False

        self._begin()
        self._transcript.append(Message.user_turn(text))
        try:
            self._notify()
            if self._handle is None:
                raise SessionNotStartedError("generate a thread before refining it")
            reply = await self._client.send_message(text, self._handle)
        except Exception as e:
            logger.exception("Refinement failed")
            self._last_error = str(e)
            return False
        else:
            self._transcript.append(Message.model_turn(reply))
            return True
        finally:
            self._in_flight = False
            self._notify()

    # -- message actions ---------------------------------------------------

    def find_message(self, message_id: str) -> Message:
        for message in self._transcript:
            if message.id == message_id:
                return message
        raise MessageNotFoundError(message_id)

    def last_response(self) -> Message | None:
        """Most recent model message, if any."""
        for message in reversed(self._transcript):
            if message.role == Role.MODEL:
                return message
        return None

    def copy(self, message_id: str) -> str:
        """Hand a message's content to the clipboard and return it."""
        content = self.find_message(message_id).content
        if self._clipboard is not None:
            self._clipboard(content)
        else:
            logger.debug("No clipboard configured; copy is a no-op")
        return content

    def save(self, message_id: str) -> SavedThread:
        """Save a model message under the selected style."""
        message = self.find_message(message_id)
        if message.role != Role.MODEL:
            raise ValueError("Only model responses can be saved")
        thread = self._saved.save(message.content, self._selected_style)
        self._notify()
        return thread

    def delete_saved(self, thread_id: str) -> None:
        self._saved.remove(thread_id)
        self._notify()

    # -- template actions --------------------------------------------------

    def select_style(self, style_key: str) -> TemplateConfig:
        template = self._templates.get(style_key)
        self._selected_style = style_key
        self._notify()
        return template

    def edit_template(self, style_key: str, system_prompt: str, examples: str) -> TemplateConfig:
        """Replace a style's prompt and examples, keeping name and description."""
        current = self._templates.get(style_key)
        updated = current.model_copy(update={"system_prompt": system_prompt, "examples": examples})
        self._templates.upsert(style_key, updated)
        self._notify()
        return updated

    def rename_style(self, style_key: str, new_name: str) -> TemplateConfig:
        renamed = self._templates.rename(style_key, new_name)
        self._notify()
        return renamed

    def add_style(self) -> str:
        """Add a placeholder style and select it."""
        key = self._templates.add_style()
        self._selected_style = key
        self._notify()
        return key
