"""Prompt management module.

Externalizes fixed prompt fragments to text files for easy customization.
Prompts can be overridden by placing files in the working directory.
"""

from functools import lru_cache
from pathlib import Path

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent

EXAMPLES_HEADER = "### EXAMPLES OF DESIRED OUTPUT ###"
DIRECTIVE_HEADER = "### IMPORTANT ###"


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: threadcraft/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8")

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8")

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_output_directive() -> str:
    """Get the directive that forbids conversational filler in replies."""
    return load_prompt("output_directive").strip()


def compose_instruction(system_prompt: str, examples: str) -> str:
    """Combine a persona prompt, its examples and the output directive.

    Args:
        system_prompt: Persona instructions
        examples: Few-shot Input/Output examples

    Returns:
        Single system instruction string
    """
    return (
        f"{system_prompt}\n\n"
        f"{EXAMPLES_HEADER}\n{examples}\n\n"
        f"{DIRECTIVE_HEADER}\n{get_output_directive()}"
    )


__all__ = [
    "compose_instruction",
    "get_output_directive",
    "load_prompt",
]
