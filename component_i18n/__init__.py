"""Component-based runtime translation engine.

Public API re-exported from component_i18n.i18n. See that package for
the engine, registries and error taxonomy.
"""

from component_i18n.i18n import (
    ComponentConfig,
    EngineConfig,
    I18nEngine,
    I18nError,
    LanguageDefinition,
    StringKeyEnum,
    ValidationResult,
    create_engine,
    create_string_keys,
)

__all__ = [
    "ComponentConfig",
    "EngineConfig",
    "I18nEngine",
    "I18nError",
    "LanguageDefinition",
    "StringKeyEnum",
    "ValidationResult",
    "create_engine",
    "create_string_keys",
]
