"""Tests for component_i18n.i18n.context module."""

import pytest

from component_i18n.i18n import (
    ActiveContext,
    ContextManager,
    ContextSpace,
    InvalidConfigError,
    LanguageNotFoundError,
    LanguageRegistry,
)


class Zone:
    def __init__(self, value):
        self.value = value


@pytest.fixture
def registry(languages):
    return LanguageRegistry(languages)


@pytest.mark.unit
class TestActiveContext:
    """Tests for ActiveContext state and notifications."""

    def test_admin_language_defaults_to_language(self):
        """Without an admin language, the user language is used."""
        context = ActiveContext("fr")
        assert context.admin_language == "fr"
        assert context.current_context is ContextSpace.USER

    def test_current_language_follows_space(self):
        """The active space picks which language is current."""
        context = ActiveContext("fr", admin_language="en-US")
        assert context.current_language == "fr"
        context.set_current_context(ContextSpace.ADMIN)
        assert context.current_language == "en-US"

    def test_listener_only_on_change(self):
        """Listeners fire for changes, not for identical values."""
        changes = []
        context = ActiveContext("fr")
        context.subscribe(lambda *args: changes.append(args))

        context.set_language("fr")
        context.set_timezone("UTC")

        assert changes == [("timezone", None, "UTC")]

    def test_as_variables_unwraps_values(self):
        """Wrapper objects contribute their value."""
        context = ActiveContext(
            "fr", currency_code="EUR", timezone=Zone("Europe/Paris"), admin_timezone="UTC"
        )
        variables = context.as_variables()

        assert variables["currency"] == "EUR"
        assert variables["currencyCode"] == "EUR"
        assert variables["timezone"] == "Europe/Paris"
        assert variables["userTimezone"] == "Europe/Paris"
        assert variables["adminTimezone"] == "UTC"
        assert variables["currentContext"] == "user"

    def test_as_variables_omits_unset_values(self):
        """Unset optional values are absent."""
        assert "currency" not in ActiveContext("fr").as_variables()


@pytest.mark.unit
class TestContextManager:
    """Tests for ContextManager."""

    def test_rejects_unregistered_language(self, registry):
        """Only registered languages can be set."""
        manager = ContextManager(registry, "en-US")
        with pytest.raises(LanguageNotFoundError):
            manager.set_admin_language("de")
        assert manager.context.admin_language == "en-US"

    def test_no_context_without_default(self):
        """Reading the context without any language raises."""
        manager = ContextManager(LanguageRegistry(), None)
        assert not manager.has_context
        with pytest.raises(InvalidConfigError):
            manager.current_language()

    def test_set_language_creates_context(self, registry):
        """Setting a language creates the missing context."""
        manager = ContextManager(registry, None)
        manager.set_language("ru")
        assert manager.current_language() == "ru"

    def test_switching_space_keeps_languages(self, registry):
        """switch_to_admin/user only change the active space."""
        manager = ContextManager(registry, "en-US")
        manager.set_language("fr")
        manager.switch_to_admin()

        assert manager.current_language() == "en-US"
        assert manager.context.language == "fr"
        manager.switch_to_user()
        assert manager.current_language() == "fr"

    def test_reset(self, registry):
        """reset() restores the default language in user space."""
        manager = ContextManager(registry, "en-US")
        manager.set_language("fr")
        manager.switch_to_admin()
        manager.reset()

        assert manager.current_language() == "en-US"
        assert manager.context.current_context is ContextSpace.USER
