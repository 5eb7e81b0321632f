from .base import GenerationClient
from .factory import create_generation_client
from .models import DEFAULT_MODEL, DEFAULT_TEMPERATURE, GenerationConfig, SessionHandle
from .providers import GeminiGenerationClient

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "GenerationClient",
    "GenerationConfig",
    "GeminiGenerationClient",
    "SessionHandle",
    "create_generation_client",
]
