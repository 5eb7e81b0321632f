"""Exception hierarchy for threadcraft.

Every error the library raises on purpose derives from ThreadcraftError,
so callers (the CLI, the TUI) can catch one type at their boundary.
"""


class ThreadcraftError(Exception):
    """Base class for threadcraft errors."""


class GenerationError(ThreadcraftError):
    """Base class for errors raised by a generation client."""


class ClientUnavailableError(GenerationError):
    """No credential was configured when the client was built."""

    def __init__(self, message: str = "no API key configured"):
        super().__init__(f"Generation client unavailable: {message}")


class SessionNotStartedError(GenerationError):
    """send_message was called before start_session."""

    def __init__(self, message: str = "call start_session first"):
        super().__init__(f"Session not started: {message}")


class StaleSessionError(GenerationError):
    """The caller's session handle was superseded by a newer session."""

    def __init__(self, expected: str, current: str | None):
        super().__init__(
            f"Stale session: handle {expected} is no longer bound (current: {current})"
        )
        self.expected = expected
        self.current = current


class TransportError(GenerationError):
    """The upstream API call failed. Not retried."""

    def __init__(self, message: str, original: BaseException | None = None):
        super().__init__(f"Transport error: {message}")
        self.original = original


class TemplateNotFoundError(ThreadcraftError, KeyError):
    """A style key did not resolve to a template."""

    def __init__(self, style_key: str):
        super().__init__(f"Unknown style: {style_key}")
        self.style_key = style_key

    def __str__(self) -> str:
        return self.args[0]


class MessageNotFoundError(ThreadcraftError, KeyError):
    """A message id is not part of the current transcript."""

    def __init__(self, message_id: str):
        super().__init__(f"Unknown message: {message_id}")
        self.message_id = message_id

    def __str__(self) -> str:
        return self.args[0]


class GenerationInProgressError(ThreadcraftError):
    """A generate or refine call is already in flight."""

    def __init__(self):
        super().__init__("A generation is already in progress")
