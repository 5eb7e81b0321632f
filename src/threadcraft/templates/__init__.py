"""Style template module for threadcraft.

Provides the built-in personas and the store that owns them.
"""

from .defaults import DEFAULT_TEMPLATES, NEW_STYLE_TEMPLATE
from .models import StyleType, TemplateConfig
from .store import TemplateStore

__all__ = [
    "DEFAULT_TEMPLATES",
    "NEW_STYLE_TEMPLATE",
    "StyleType",
    "TemplateConfig",
    "TemplateStore",
]
