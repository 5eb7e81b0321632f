from typing import Any

from .base import GenerationClient
from .models import GenerationConfig
from .providers import GeminiGenerationClient


def create_generation_client(
    provider: str = "gemini",
    config: GenerationConfig | None = None,
    **client_kwargs: Any
) -> GenerationClient:
    """Create a generation client instance.

    This factory function hides the instantiation logic for providers.

    Args:
        provider: Provider type ('gemini', or its alias 'google')
        config: Credential, model and temperature; defaults to an
            unconfigured GenerationConfig
        **client_kwargs: Provider-specific client kwargs

    Returns:
        Initialized generation client

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_generation_client(
        ...     "gemini",
        ...     GenerationConfig(api_key="...", model="gemini-2.5-flash")
        ... )
    """
    provider_lower = provider.lower()
    config = config or GenerationConfig()

    if provider_lower in ("gemini", "google"):
        return GeminiGenerationClient(config, **client_kwargs)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
