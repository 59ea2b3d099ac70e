"""Unit tests for settings."""

import pytest

from component_i18n.core.config import I18nSettings, Settings
from component_i18n.i18n import EngineConfig


@pytest.mark.unit
class TestI18nSettings:
    """Tests for I18nSettings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Defaults match the engine's built-in limits."""
        for name in ("I18N_DEFAULT_LANGUAGE", "I18N_FALLBACK_LANGUAGE", "I18N_MAX_KEY_LENGTH"):
            monkeypatch.delenv(name, raising=False)
        i18n = I18nSettings()

        assert i18n.default_language == "en-US"
        assert i18n.fallback_language is None
        assert i18n.max_template_length == 10000
        assert i18n.max_key_length == 200
        assert i18n.max_component_id_length == 100
        assert i18n.strict_plural_validation is False

    def test_environment_overrides(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "en-US")
        monkeypatch.setenv("I18N_STRICT_PLURAL_VALIDATION", "true")
        i18n = I18nSettings()

        assert i18n.fallback_language == "en-US"
        assert i18n.strict_plural_validation is True


@pytest.mark.unit
class TestSettings:
    """Tests for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        """The i18n section is created automatically."""
        assert isinstance(Settings().i18n, I18nSettings)

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), ("Production", True), ("development", False)],
    )
    def test_is_production(self, environment, expected):
        """is_production compares ENVIRONMENT case-insensitively."""
        assert Settings(ENVIRONMENT=environment).is_production is expected

    def test_engine_config_from_settings(self):
        """EngineConfig.from_settings copies values and applies overrides."""
        i18n = I18nSettings(I18N_MAX_KEY_LENGTH=50, I18N_DEFAULT_LANGUAGE="fr")
        config = EngineConfig.from_settings(i18n, default_language=None)

        assert config.max_key_length == 50
        assert config.default_language is None

    def test_plural_check_settings_reach_engine_config(self, monkeypatch):
        """Plural check flags flow from the environment into EngineConfig."""
        monkeypatch.setenv("I18N_CHECK_UNUSED_PLURAL_FORMS", "true")
        monkeypatch.setenv("I18N_CHECK_PLURAL_VARIABLES", "true")
        config = EngineConfig.from_settings(I18nSettings())

        assert config.check_unused_plural_forms is True
        assert config.check_plural_variables is True
