from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0


class GenerationConfig(BaseModel):
    """Configuration for a generation client.

    A missing api_key is allowed: the client is built anyway and fails
    every call with ClientUnavailableError.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, description="Provider API key", repr=False)
    model: str = Field(default=DEFAULT_MODEL, description="Model used for new sessions")
    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        ge=MIN_TEMPERATURE,
        le=MAX_TEMPERATURE,
        description="Sampling temperature for every session"
    )

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


class SessionHandle(BaseModel):
    """Opaque identity of one bound chat session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    instruction: str = Field(description="Composed system instruction the session is bound to")
    created_at: datetime = Field(default_factory=datetime.now)
