"""Data models for the conversation transcript."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer

GENERATION_ERROR_MESSAGE = "Sorry, I encountered an error generating the thread. Please try again."


class Role(str, Enum):
    """Author of a transcript message."""

    USER = "user"
    MODEL = "model"


class Message(BaseModel):
    """One turn of the transcript. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    role: Role = Field(description="Who wrote the message: 'user' or 'model'")
    content: str = Field(description="Message text")
    timestamp: datetime = Field(default_factory=datetime.now)

    @field_serializer("timestamp")
    def serialize_datetime(self, value: datetime) -> str:
        """Serialize datetime to ISO format."""
        return value.isoformat()

    @classmethod
    def user_turn(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def model_turn(cls, content: str) -> "Message":
        return cls(role=Role.MODEL, content=content)
