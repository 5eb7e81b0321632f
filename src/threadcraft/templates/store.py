"""In-memory store mapping style keys to templates.

This module hides how templates are keyed and ordered:
- The mapping from style key to TemplateConfig
- The separate display-order sequence of keys
- How fresh keys for user-added styles are generated
"""

import logging
from collections.abc import Iterator, Mapping
from uuid import uuid4

from ..errors import TemplateNotFoundError
from .defaults import DEFAULT_TEMPLATES, NEW_STYLE_TEMPLATE
from .models import TemplateConfig

logger = logging.getLogger(__name__)


class TemplateStore:
    """Owns every TemplateConfig and the order they are displayed in.

    Records are frozen, so all mutation goes through full-record replacement
    here. There is no delete operation.
    """

    def __init__(self, templates: Mapping[str, TemplateConfig] | None = None):
        self._templates: dict[str, TemplateConfig] = {}
        self._order: list[str] = []
        for key, config in (templates or {}).items():
            self.upsert(key, config)

    @classmethod
    def with_defaults(cls) -> "TemplateStore":
        """Create a store seeded with the built-in styles."""
        return cls(DEFAULT_TEMPLATES)

    def get(self, style_key: str) -> TemplateConfig:
        """Return the template for a style key.

        Raises:
            TemplateNotFoundError: If the key is absent
        """
        try:
            return self._templates[style_key]
        except KeyError:
            raise TemplateNotFoundError(style_key) from None

    def upsert(self, style_key: str, config: TemplateConfig) -> None:
        """Replace the full record, appending new keys to the display order."""
        if style_key not in self._templates:
            self._order.append(style_key)
        self._templates[style_key] = config

    def rename(self, style_key: str, new_name: str) -> TemplateConfig:
        """Replace only the name of a style.

        A name that is blank after trimming is ignored and the current
        record is returned unchanged.
        """
        current = self.get(style_key)
        name = new_name.strip()
        if not name:
            logger.debug("Ignoring blank rename for %s", style_key)
            return current
        if name == current.name:
            return current
        renamed = current.model_copy(update={"name": name})
        self._templates[style_key] = renamed
        return renamed

    def add_style(self) -> str:
        """Insert a placeholder style under a fresh key and return the key."""
        key = f"STYLE_{uuid4().hex}"
        while key in self._templates:
            key = f"STYLE_{uuid4().hex}"
        self.upsert(key, NEW_STYLE_TEMPLATE)
        logger.info("Added style %s", key)
        return key

    def name_for(self, style_key: str, default: str = "Unknown") -> str:
        """Display name for a key, or `default` when it does not resolve."""
        config = self._templates.get(style_key)
        return config.name if config is not None else default

    def keys(self) -> list[str]:
        """Style keys in display order."""
        return list(self._order)

    def items(self) -> list[tuple[str, TemplateConfig]]:
        """(key, template) pairs in display order."""
        return [(key, self._templates[key]) for key in self._order]

    def __contains__(self, style_key: object) -> bool:
        return style_key in self._templates

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
