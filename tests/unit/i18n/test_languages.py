"""Tests for component_i18n.i18n.languages module."""

import pytest

from component_i18n.i18n import (
    DuplicateLanguageError,
    InvalidConfigError,
    LanguageDefinition,
    LanguageNotFoundError,
    LanguageRegistry,
)


@pytest.mark.unit
class TestLanguageRegistry:
    """Tests for LanguageRegistry."""

    def test_first_language_is_default(self, french, russian):
        """The first registered language becomes the default."""
        registry = LanguageRegistry([french, russian])
        assert registry.get_default() == french

    def test_flagged_default_wins(self, french, english):
        """A language flagged is_default becomes the default."""
        registry = LanguageRegistry([french, english])
        assert registry.get_default() == english

    def test_duplicate_id(self, english):
        """Registering an id twice raises."""
        registry = LanguageRegistry([english])
        with pytest.raises(DuplicateLanguageError):
            registry.register(english)

    def test_duplicate_code(self, english):
        """Registering a code twice raises."""
        registry = LanguageRegistry([english])
        with pytest.raises(DuplicateLanguageError):
            registry.register(LanguageDefinition("en-GB", "en", "British English"))

    def test_register_if_not_exists(self, english):
        """register_if_not_exists() reports whether it added anything."""
        registry = LanguageRegistry()
        assert registry.register_if_not_exists(english)
        assert not registry.register_if_not_exists(english)
        assert len(registry) == 1

    def test_lookups(self, languages):
        """Ids, codes and code lookup reflect registration order."""
        registry = LanguageRegistry(languages)
        assert registry.get_ids() == ["en-US", "fr", "ru"]
        assert registry.get_codes() == ["en", "fr", "ru"]
        assert registry.get_by_code("ru").id == "ru"
        assert registry.get_by_code("de") is None

    def test_get_unknown(self):
        """get() raises for unknown ids."""
        with pytest.raises(LanguageNotFoundError):
            LanguageRegistry().get("de")

    def test_set_default(self, languages):
        """set_default() requires a registered id."""
        registry = LanguageRegistry(languages)
        registry.set_default("ru")
        assert registry.get_default().id == "ru"
        with pytest.raises(LanguageNotFoundError):
            registry.set_default("de")

    def test_matching_code(self, languages):
        """Requested, then user default, then registry default."""
        registry = LanguageRegistry(languages)
        assert registry.get_matching_code(" fr ", "ru") == "fr"
        assert registry.get_matching_code("de", "ru") == "ru"
        assert registry.get_matching_code("de", None) == "en"

    def test_matching_code_without_default(self):
        """No default language is a config error."""
        with pytest.raises(InvalidConfigError):
            LanguageRegistry().get_matching_code("fr")

    def test_clear(self, languages):
        """clear() removes languages and the default."""
        registry = LanguageRegistry(languages)
        registry.clear()
        assert len(registry) == 0
        assert registry.get_default() is None
