"""Unit tests for the templates module."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from threadcraft.errors import TemplateNotFoundError
from threadcraft.templates import (
    DEFAULT_TEMPLATES,
    NEW_STYLE_TEMPLATE,
    StyleType,
    TemplateConfig,
    TemplateStore,
)


class TestTemplateConfig:
    """Tests for TemplateConfig model."""

    def test_config_is_frozen(self):
        """Test that templates cannot be mutated in place."""
        config = DEFAULT_TEMPLATES[StyleType.NATURAL.value]
        with pytest.raises(ValueError):
            config.name = "Changed"  # type: ignore[misc]

    def test_defaults_have_three_styles_in_order(self):
        """Test the built-in seed and its display order."""
        assert list(DEFAULT_TEMPLATES) == ["NATURAL", "PROFESSIONAL", "EDUCATIONAL"]
        assert DEFAULT_TEMPLATES["NATURAL"].name == "Natural Flow"
        assert DEFAULT_TEMPLATES["PROFESSIONAL"].name == "Professional"
        assert DEFAULT_TEMPLATES["EDUCATIONAL"].name == "Educational"

    def test_every_default_has_prompt_and_examples(self):
        for config in DEFAULT_TEMPLATES.values():
            assert config.system_prompt
            assert config.examples.startswith("Input:")


class TestTemplateStore:
    """Tests for TemplateStore."""

    def test_with_defaults(self, templates):
        assert templates.keys() == ["NATURAL", "PROFESSIONAL", "EDUCATIONAL"]
        assert len(templates) == 3
        assert "NATURAL" in templates

    def test_get_missing_key_raises(self, templates):
        """Test that unknown keys raise NotFound (also a KeyError)."""
        with pytest.raises(TemplateNotFoundError, match="MISSING"):
            templates.get("MISSING")
        with pytest.raises(KeyError):
            templates.get("MISSING")

    def test_upsert_new_key_appends_once(self, templates):
        config = TemplateConfig(name="Poet", system_prompt="Write in verse.")
        templates.upsert("POET", config)
        templates.upsert("POET", config.model_copy(update={"examples": "Input: x"}))

        assert templates.keys() == ["NATURAL", "PROFESSIONAL", "EDUCATIONAL", "POET"]
        assert templates.get("POET").examples == "Input: x"

    def test_upsert_existing_key_replaces_record(self, templates):
        replacement = TemplateConfig(name="Casual", system_prompt="Be chill.")
        templates.upsert("NATURAL", replacement)

        assert templates.get("NATURAL") == replacement
        assert templates.keys()[0] == "NATURAL"
        assert len(templates) == 3

    def test_rename_trims_and_replaces_only_name(self, templates):
        before = templates.get("PROFESSIONAL")
        renamed = templates.rename("PROFESSIONAL", "  Boardroom  ")

        assert renamed.name == "Boardroom"
        assert renamed.system_prompt == before.system_prompt
        assert renamed.examples == before.examples
        assert renamed.description == before.description
        assert templates.get("PROFESSIONAL") == renamed

    def test_rename_blank_keeps_name(self, templates):
        """Renaming to whitespace leaves the record unchanged."""
        before = templates.get("NATURAL")
        templates.rename("NATURAL", "   ")
        assert templates.get("NATURAL") is before

    @given(st.text(alphabet=" \t\n", max_size=20))
    def test_rename_whitespace_is_noop(self, blank: str):
        """Property test: any whitespace-only name is ignored."""
        store = TemplateStore.with_defaults()
        before = store.get("EDUCATIONAL")
        store.rename("EDUCATIONAL", blank)
        assert store.get("EDUCATIONAL") == before

    def test_rename_to_current_name_is_noop(self, templates):
        before = templates.get("NATURAL")
        templates.rename("NATURAL", before.name)
        assert templates.get("NATURAL") == before

    def test_rename_unknown_key_raises(self, templates):
        with pytest.raises(TemplateNotFoundError):
            templates.rename("MISSING", "Name")

    def test_add_style_inserts_placeholder(self, templates):
        key = templates.add_style()

        assert key.startswith("STYLE_")
        assert templates.get(key) == NEW_STYLE_TEMPLATE
        assert templates.keys()[-1] == key

    @given(st.integers(min_value=1, max_value=20))
    def test_add_style_keys_are_distinct(self, count: int):
        """Property test: every added key is new and grows the order by one."""
        store = TemplateStore.with_defaults()
        keys = []
        for i in range(count):
            before = set(store.keys())
            key = store.add_style()
            assert key not in before
            assert len(store) == 3 + i + 1
            keys.append(key)
        assert len(set(keys)) == count

    def test_name_for_unknown_key(self, templates):
        assert templates.name_for("NATURAL") == "Natural Flow"
        assert templates.name_for("GONE") == "Unknown"

    def test_items_follow_display_order(self, templates):
        key = templates.add_style()
        assert [k for k, _ in templates.items()] == templates.keys()
        assert list(templates)[-1] == key
