from .gemini import GeminiGenerationClient

__all__ = ["GeminiGenerationClient"]
