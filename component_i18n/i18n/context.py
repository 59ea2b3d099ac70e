"""Active language context.

ActiveContext is a plain mutable object whose setters notify listeners of
every change. ContextManager owns one per engine and guards the invariant
that both language fields name a registered language.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.errors import InvalidConfigError, LanguageNotFoundError
from component_i18n.i18n.interpolation import extract_value
from component_i18n.i18n.languages import LanguageRegistry

logger = get_module_logger()

ContextListener = Callable[[str, Any, Any], None]


class ContextSpace(str, Enum):
    """Which language an unqualified call uses."""

    USER = "user"
    ADMIN = "admin"


class ActiveContext:
    """Current language state plus optional locale-adjacent values.

    Attributes:
        language: User-facing language id.
        admin_language: Administrative language id.
        current_context: Active ContextSpace.
        currency_code: Optional currency (plain string or object with
            ``value``).
        timezone: Optional user timezone.
        admin_timezone: Optional administrative timezone.
    """

    def __init__(
        self,
        language: str,
        admin_language: Optional[str] = None,
        current_context: ContextSpace = ContextSpace.USER,
        currency_code: Any = None,
        timezone: Any = None,
        admin_timezone: Any = None,
    ):
        self._language = language
        self._admin_language = admin_language or language
        self._current_context = ContextSpace(current_context)
        self._currency_code = currency_code
        self._timezone = timezone
        self._admin_timezone = admin_timezone
        self._listeners: List[ContextListener] = []

    def subscribe(self, listener: ContextListener) -> Callable[[], None]:
        """Register ``listener(field, old, new)``; returns an unsubscribe."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set(self, name: str, value: Any) -> None:
        attribute = f"_{name}"
        old = getattr(self, attribute)
        if old == value:
            return
        setattr(self, attribute, value)
        for listener in list(self._listeners):
            listener(name, old, value)

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> None:
        self._set("language", language)

    @property
    def admin_language(self) -> str:
        return self._admin_language

    def set_admin_language(self, language: str) -> None:
        self._set("admin_language", language)

    @property
    def current_context(self) -> ContextSpace:
        return self._current_context

    def set_current_context(self, space: ContextSpace) -> None:
        self._set("current_context", ContextSpace(space))

    @property
    def currency_code(self) -> Any:
        return self._currency_code

    def set_currency_code(self, currency_code: Any) -> None:
        self._set("currency_code", currency_code)

    @property
    def timezone(self) -> Any:
        return self._timezone

    def set_timezone(self, timezone: Any) -> None:
        self._set("timezone", timezone)

    @property
    def admin_timezone(self) -> Any:
        return self._admin_timezone

    def set_admin_timezone(self, timezone: Any) -> None:
        self._set("admin_timezone", timezone)

    @property
    def current_language(self) -> str:
        if self._current_context is ContextSpace.ADMIN:
            return self._admin_language
        return self._language

    def as_variables(self) -> Dict[str, Any]:
        """Template variables contributed by this context."""
        variables: Dict[str, Any] = {
            "language": self._language,
            "adminLanguage": self._admin_language,
            "currentContext": self._current_context.value,
        }
        if self._currency_code is not None:
            currency = extract_value(self._currency_code)
            variables["currencyCode"] = currency
            variables["currency"] = currency
        if self._timezone is not None:
            timezone = extract_value(self._timezone)
            variables["timezone"] = timezone
            variables["userTimezone"] = timezone
        if self._admin_timezone is not None:
            variables["adminTimezone"] = extract_value(self._admin_timezone)
        return variables

    def snapshot(self) -> Dict[str, Any]:
        return {
            "language": self._language,
            "admin_language": self._admin_language,
            "current_context": self._current_context.value,
            "currency_code": self._currency_code,
            "timezone": self._timezone,
            "admin_timezone": self._admin_timezone,
        }

    def __repr__(self) -> str:
        return f"ActiveContext({self.snapshot()!r})"


class ContextManager:
    """Per-engine language context.

    Setters reject languages the registry does not know, so the context
    always names registered languages. Switching space never touches
    either language value.
    """

    def __init__(self, languages: LanguageRegistry, default_language: Optional[str]):
        self._languages = languages
        self._default_language = default_language
        self._context: Optional[ActiveContext] = (
            ActiveContext(default_language) if default_language else None
        )

    @property
    def context(self) -> ActiveContext:
        """Raises:
        InvalidConfigError: If the engine was built without any language.
        """
        if self._context is None:
            raise InvalidConfigError("No default language configured")
        return self._context

    @property
    def has_context(self) -> bool:
        return self._context is not None

    def _require_registered(self, language: str) -> None:
        if not self._languages.has(language):
            logger.warning("context_language_rejected", language=language)
            raise LanguageNotFoundError(language)

    def set_language(self, language: str) -> None:
        self._require_registered(language)
        if self._context is None:
            self._default_language = language
            self._context = ActiveContext(language)
            return
        self._context.set_language(language)

    def set_admin_language(self, language: str) -> None:
        self._require_registered(language)
        if self._context is None:
            self._default_language = language
            self._context = ActiveContext(language)
            return
        self._context.set_admin_language(language)

    def switch_to_admin(self) -> None:
        self.context.set_current_context(ContextSpace.ADMIN)

    def switch_to_user(self) -> None:
        self.context.set_current_context(ContextSpace.USER)

    def current_language(self) -> str:
        return self.context.current_language

    def reset(self) -> None:
        """Restore the context to the default language in user space."""
        self._context = (
            ActiveContext(self._default_language) if self._default_language else None
        )
