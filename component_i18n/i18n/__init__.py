"""i18n system - component-based runtime translation.

Main components:
- engine: I18nEngine orchestrating translation, templates and context
- component_store: per-component string tables and rendering
- constants_registry: per-component constants with ownership tracking
- string_keys: string-key enums and value -> component resolution
- plurals / plural_validation: CLDR plural categories and form checks
- languages / context: language registry and active language context
- errors: typed error taxonomy
"""

from component_i18n.i18n.component_store import ComponentStore, placeholder
from component_i18n.i18n.constants_registry import ConstantsEntry, ConstantsRegistry
from component_i18n.i18n.context import ActiveContext, ContextManager, ContextSpace
from component_i18n.i18n.engine import I18nEngine
from component_i18n.i18n.errors import (
    ComponentNotFoundError,
    ConstantConflictError,
    ConstantsSchemaValidationError,
    DuplicateComponentError,
    DuplicateLanguageError,
    FieldError,
    I18nError,
    I18nErrorCode,
    InvalidConfigError,
    InvalidStringKeyEnumError,
    LanguageNotFoundError,
    StringKeyNotRegisteredError,
    TranslationMissingError,
    UnsafeInputError,
)
from component_i18n.i18n.factory import create_engine
from component_i18n.i18n.languages import LanguageRegistry
from component_i18n.i18n.models import (
    ComponentConfig,
    EngineConfig,
    LanguageDefinition,
    MissingKey,
    ValidationResult,
)
from component_i18n.i18n.plural_validation import (
    PluralValidationResult,
    validate_plural_forms,
)
from component_i18n.i18n.plurals import PluralCategory, category_for
from component_i18n.i18n.string_keys import (
    StringKeyEnum,
    StringKeyResolver,
    create_string_keys,
)

__all__ = [
    "ActiveContext",
    "ComponentConfig",
    "ComponentNotFoundError",
    "ComponentStore",
    "ConstantConflictError",
    "ConstantsEntry",
    "ConstantsRegistry",
    "ConstantsSchemaValidationError",
    "ContextManager",
    "ContextSpace",
    "DuplicateComponentError",
    "DuplicateLanguageError",
    "EngineConfig",
    "FieldError",
    "I18nEngine",
    "I18nError",
    "I18nErrorCode",
    "InvalidConfigError",
    "InvalidStringKeyEnumError",
    "LanguageDefinition",
    "LanguageNotFoundError",
    "LanguageRegistry",
    "MissingKey",
    "PluralCategory",
    "PluralValidationResult",
    "StringKeyEnum",
    "StringKeyNotRegisteredError",
    "StringKeyResolver",
    "TranslationMissingError",
    "UnsafeInputError",
    "ValidationResult",
    "category_for",
    "create_engine",
    "create_string_keys",
    "placeholder",
    "validate_plural_forms",
]
