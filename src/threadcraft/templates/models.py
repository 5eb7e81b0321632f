"""Data models for style templates."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StyleType(str, Enum):
    """Keys of the built-in styles."""

    NATURAL = "NATURAL"
    PROFESSIONAL = "PROFESSIONAL"
    EDUCATIONAL = "EDUCATIONAL"


class TemplateConfig(BaseModel):
    """A named persona that steers tone and structure of generated text."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name of the style")
    description: str = Field(default="", description="One-line summary shown on the style card")
    system_prompt: str = Field(description="Persona instructions sent as the system instruction")
    examples: str = Field(default="", description="Few-shot Input/Output examples")
