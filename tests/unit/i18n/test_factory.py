"""Tests for component_i18n.i18n.factory module."""

import pytest

from component_i18n.core.config import I18nSettings, Settings
from component_i18n.i18n import ComponentConfig, I18nEngine, create_engine


def make_settings(**i18n_values):
    return Settings(i18n=I18nSettings(**i18n_values))


@pytest.mark.unit
class TestCreateEngine:
    """Tests for create_engine()."""

    def test_creates_engine_with_configured_default(self, languages):
        """The configured default language is used when registered."""
        engine = create_engine(languages, make_settings(I18N_DEFAULT_LANGUAGE="fr"))
        assert isinstance(engine, I18nEngine)
        assert engine.current_language == "fr"

    def test_unregistered_default_uses_registry_default(self, languages):
        """An unknown configured default falls back to the registry default."""
        engine = create_engine(languages, make_settings(I18N_DEFAULT_LANGUAGE="de"))
        assert engine.current_language == "en-US"

    def test_fallback_language_from_settings(self, languages, app_component):
        """The configured fallback language is applied."""
        engine = create_engine(languages, make_settings(I18N_FALLBACK_LANGUAGE="en-US"))
        engine.register(app_component)
        assert engine.translate("app", "title", {"site": "X"}, "fr") == "Welcome to X"

    def test_unregistered_fallback_ignored(self, languages):
        """An unknown fallback language is dropped."""
        engine = create_engine(languages, make_settings(I18N_FALLBACK_LANGUAGE="de"))
        assert engine.config.fallback_language is None

    def test_limits_from_settings(self, languages):
        """Size limits come from settings."""
        engine = create_engine(languages, make_settings(I18N_MAX_KEY_LENGTH=5))
        assert engine.config.max_key_length == 5
        assert engine.safe_translate("app", "toolong") == "[app.toolong]"

    def test_constants(self, languages):
        """Engine constants are passed through."""
        engine = create_engine(languages, make_settings(), constants={"site": "Base"})
        engine.register(ComponentConfig(id="c", strings={"en-US": {"t": "{site}"}}))
        assert engine.translate("c", "t") == "Base"

    def test_default_settings(self, languages):
        """Without explicit settings the module singleton is used."""
        engine = create_engine(languages)
        assert engine.has_language("ru")
