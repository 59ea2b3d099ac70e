"""Factory functions for creating translation engines.

Provides a convenience function for building an I18nEngine from the
application settings.
"""

from typing import Any, Mapping, Optional, Sequence

from component_i18n.core.config import Settings
from component_i18n.core.config import settings as default_settings
from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.engine import I18nEngine
from component_i18n.i18n.languages import LanguageRegistry
from component_i18n.i18n.models import EngineConfig, LanguageDefinition

logger = get_module_logger()


def create_engine(
    languages: Sequence[LanguageDefinition],
    settings: Optional[Settings] = None,
    constants: Optional[Mapping[str, Any]] = None,
) -> I18nEngine:
    """Create and configure an I18nEngine.

    The configured default language is used only when it is one of
    ``languages``; otherwise the registry default (first registered, or the
    one flagged ``is_default``) applies. The same rule holds for the
    fallback language.

    Args:
        languages: Languages available to the engine.
        settings: Application settings (default: module singleton).
        constants: Engine-level template constants (lowest precedence).

    Returns:
        I18nEngine: Configured engine instance

    Usage:
        engine = create_engine(
            [LanguageDefinition("en-US", "en", "English", is_default=True)]
        )
    """
    active = settings or default_settings
    registry = LanguageRegistry(list(languages))
    i18n_settings = active.i18n

    default_language = i18n_settings.default_language
    if default_language and not registry.has(default_language):
        logger.warning(
            "configured_default_language_not_registered",
            default_language=default_language,
        )
        default_language = None

    fallback_language = i18n_settings.fallback_language
    if fallback_language and not registry.has(fallback_language):
        logger.warning(
            "configured_fallback_language_not_registered",
            fallback_language=fallback_language,
        )
        fallback_language = None

    config = EngineConfig.from_settings(
        i18n_settings,
        default_language=default_language,
        fallback_language=fallback_language,
        constants=dict(constants or {}),
    )
    engine = I18nEngine(config=config, language_registry=registry)

    logger.info(
        "engine_created",
        languages=registry.get_ids(),
        default_language=engine.current_language if registry.get_ids() else None,
        fallback_language=fallback_language,
        strict_plural_validation=config.strict_plural_validation,
    )
    return engine
