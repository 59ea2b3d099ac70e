"""Shared fixtures for translation engine tests."""

import pytest

from component_i18n.i18n import (
    ComponentConfig,
    EngineConfig,
    I18nEngine,
    LanguageDefinition,
)


@pytest.fixture
def english():
    return LanguageDefinition(id="en-US", code="en", name="English", is_default=True)


@pytest.fixture
def french():
    return LanguageDefinition(id="fr", code="fr", name="Français")


@pytest.fixture
def russian():
    return LanguageDefinition(id="ru", code="ru", name="Русский")


@pytest.fixture
def languages(english, french, russian):
    """English (default), French and Russian."""
    return [english, french, russian]


@pytest.fixture
def engine(languages):
    """Engine with the three test languages and no components."""
    return I18nEngine(languages)


@pytest.fixture
def app_component():
    """Component with a greeting, a plural and a French gap."""
    return ComponentConfig(
        id="app",
        strings={
            "en-US": {
                "greet": "Hello, {name}!",
                "items": {"one": "{count} item", "other": "{count} items"},
                "title": "Welcome to {site}",
            },
            "fr": {
                "greet": "Bonjour, {name} !",
                "items": {"one": "{count} article", "other": "{count} articles"},
            },
        },
        aliases=("application",),
    )


@pytest.fixture
def engine_with_app(engine, app_component):
    """Engine with the app component registered."""
    engine.register(app_component)
    return engine


@pytest.fixture
def fallback_engine(languages, app_component):
    """Engine that retries missing translations in English."""
    engine = I18nEngine(languages, EngineConfig(fallback_language="en-US"))
    engine.register(app_component)
    return engine
