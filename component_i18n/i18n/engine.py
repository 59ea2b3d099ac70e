"""Translation engine.

Composes the language registry, context manager, component store,
constants registry and string-key resolver. Every call:

1. resolves the effective language (explicit argument, else the context's
   current language for the active space);
2. resolves the component (id, alias, or string-key lookup when no id is
   given);
3. layers variables: engine constants, the constants registry's merged
   view, global context values, then caller variables;
4. delegates rendering to the component store.

Hard entry points (``translate``, ``translate_string_key``) raise typed
errors. Safe entry points (``safe_translate``, ``safe_translate_string_key``)
never raise and return ``[componentId.key]`` or ``[unknown.value]``.

Usage:
    engine = I18nEngine([LanguageDefinition("en-US", "en", "English")])
    engine.register(
        ComponentConfig(id="app", strings={"en-US": {"greet": "Hello, {name}!"}})
    )
    engine.translate("app", "greet", {"name": "Ada"})  # "Hello, Ada!"
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.component_store import ComponentStore, placeholder
from component_i18n.i18n.constants_registry import ConstantsRegistry, ConstantsSchema
from component_i18n.i18n.context import ActiveContext, ContextListener, ContextManager
from component_i18n.i18n.errors import (
    DuplicateComponentError,
    InvalidConfigError,
    LanguageNotFoundError,
    TranslationMissingError,
)
from component_i18n.i18n.interpolation import VARIABLE_PATTERN, extract_value, format_value
from component_i18n.i18n.languages import LanguageRegistry
from component_i18n.i18n.models import (
    ComponentConfig,
    EngineConfig,
    LanguageDefinition,
    StringTable,
    ValidationResult,
)
from component_i18n.i18n.safety import (
    Limits,
    safe_merge,
    validate_component_id,
    validate_key_length,
    validate_object_keys,
    validate_template_length,
)
from component_i18n.i18n.string_keys import StringKeyResolver, enum_members
from component_i18n.operations import OperationResult

logger = get_module_logger()

# Bounded so scanning stays linear on hostile templates.
COMPONENT_MARKER_PATTERN = re.compile(r"\{\{([^}]{1,100})\}\}")

UNKNOWN_COMPONENT = "unknown"

_FALLBACK_ERRORS = (LanguageNotFoundError, TranslationMissingError)


def normalize_legacy_key(raw_key: str) -> Optional[str]:
    """Normalize "Some-Key", "some key" and "someKey" to "some_key"."""
    if not raw_key:
        return None
    normalized = re.sub(r"[-\s]+", "_", raw_key)
    normalized = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", normalized)
    normalized = re.sub(r"__+", "_", normalized).lower()
    return normalized or None


class I18nEngine:
    """Runtime translation engine.

    Args:
        languages: Languages registered into the engine's registry.
        config: Engine options; see EngineConfig.
        language_registry: Optional registry shared with other engines.
        global_context: Optional context whose currency/timezone/language
            values are exposed to every template.

    Raises:
        InvalidConfigError: If ``config.default_language`` names a language
            that is not registered.
    """

    def __init__(
        self,
        languages: Sequence[LanguageDefinition] = (),
        config: Optional[EngineConfig] = None,
        language_registry: Optional[LanguageRegistry] = None,
        global_context: Optional[ActiveContext] = None,
    ):
        self.config = config or EngineConfig()
        validate_object_keys(self.config.constants)

        self._languages = language_registry if language_registry is not None else LanguageRegistry()
        for language in languages:
            self._languages.register_if_not_exists(language)

        default_language = self.config.default_language
        if default_language is None:
            default = self._languages.get_default()
            default_language = default.id if default else None
        elif not self._languages.has(default_language):
            raise InvalidConfigError(
                f"Default language '{default_language}' is not registered"
            )

        self._limits = Limits(
            max_template_length=self.config.max_template_length,
            max_key_length=self.config.max_key_length,
            max_component_id_length=self.config.max_component_id_length,
        )
        self._store = ComponentStore(
            strict_plural_validation=self.config.strict_plural_validation,
            check_unused_plural_forms=self.config.check_unused_plural_forms,
            check_plural_variables=self.config.check_plural_variables,
        )
        self._constants = ConstantsRegistry()
        self._string_keys = StringKeyResolver(self._store.get_all)
        self._context = ContextManager(self._languages, default_language)
        self._global_context = global_context
        self._key_lookup: Dict[str, Dict[str, str]] = {}

        logger.info(
            "engine_initialized",
            default_language=default_language,
            fallback_language=self.config.fallback_language,
            language_count=len(self._languages),
        )

    # Components

    def register(self, config: ComponentConfig) -> ValidationResult:
        """Register a component.

        Returns:
            ValidationResult with advisory warnings for keys missing across
            languages and incomplete plural forms.

        Raises:
            DuplicateComponentError: If the id is already registered or is
                another component's alias.
            InvalidConfigError: If an alias or enum name already names a
                different component.
            UnsafeInputError: If the id is malformed or too long.
            InvalidStringKeyEnumError: If ``config.string_keys`` conflicts
                with an already registered enum.
        """
        validate_component_id(config.id, self._limits)
        self._store.ensure_registrable(config)

        if config.string_keys is not None:
            self._string_keys.register(config.string_keys, config.id)

        validation = self._store.register(config)
        self._register_key_lookup(config)
        self._string_keys.invalidate_scan_cache()
        return validation

    def register_if_not_exists(self, config: ComponentConfig) -> ValidationResult:
        """Register a component unless its id is already registered.

        Raises:
            DuplicateComponentError: If the id is only known as another
                component's alias.
        """
        if self._store.resolve_id(config.id) == config.id:
            return ValidationResult.ok()
        return self.register(config)

    def update_strings(self, component_id: str, strings: StringTable) -> ValidationResult:
        """Merge new language/key entries into a registered component.

        Raises:
            ComponentNotFoundError: If the component is unknown.
        """
        for table in strings.values():
            for key in table:
                validate_key_length(key, self._limits)
        component_id = self._canonical_component_id(component_id)
        validation = self._store.update(component_id, strings)
        self._register_key_lookup(self._store.get(component_id))
        self._string_keys.invalidate_scan_cache()
        return validation

    def has_component(self, component_id: str) -> bool:
        return self._store.has(component_id)

    def get_components(self) -> List[ComponentConfig]:
        return self._store.get_all()

    def validate(self) -> ValidationResult:
        """Re-validate every registered component."""
        result = ValidationResult()
        for component in self._store.get_all():
            result.extend(self._store.validate(component))
        return result

    # Translation

    def translate(
        self,
        component_id: Optional[str],
        key: str,
        variables: Optional[Mapping[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Translate ``key`` from a component.

        ``component_id`` may be an id or alias; when it is None or empty the
        component is resolved from ``key`` as a string-key value.

        Raises:
            ComponentNotFoundError, LanguageNotFoundError,
            TranslationMissingError, InvalidConfigError,
            StringKeyNotRegisteredError, UnsafeInputError
        """
        return self._resolve(component_id, key, variables, language).unwrap()

    def safe_translate(
        self,
        component_id: Optional[str],
        key: str,
        variables: Optional[Mapping[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Like translate(), but returns ``[componentId.key]`` on any failure."""
        result = self._resolve(component_id, key, variables, language)
        if result.is_success:
            return result.data
        logger.debug(
            "safe_translate_fallback",
            component_id=component_id,
            key=key,
            error_code=result.error_code,
        )
        return placeholder(component_id or UNKNOWN_COMPONENT, key)

    def t(
        self,
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Render a free-text template.

        ``{{component.key}}`` markers (component may be an alias or enum
        name) are replaced with safe translations; ``{name}`` markers with
        variables, constants or context values. Unmatched markers are left
        as they are.

        Raises:
            UnsafeInputError: If the template is too long or variables carry
                a dangerous key.
            InvalidConfigError: If no language is available.
        """
        validate_template_length(template, self._limits)
        lang = self._effective_language(language)
        combined = self._build_variables(variables)

        def _translate_marker(match: "re.Match[str]") -> str:
            parts = match.group(1).split(".")
            if len(parts) != 2:
                return match.group(0)
            component_id, key = self._resolve_component_and_key(
                parts[0].strip(), parts[1].strip()
            )
            return self._render(component_id, key, combined, lang).unwrap_or(
                placeholder(component_id, key)
            )

        def _substitute_variable(match: "re.Match[str]") -> str:
            value = combined.get(match.group(1))
            return match.group(0) if value is None else format_value(value)

        result = COMPONENT_MARKER_PATTERN.sub(_translate_marker, template)
        # Runs over translated text too: {name} markers produced by a
        # translation or a variable value are substituted in this pass.
        return VARIABLE_PATTERN.sub(_substitute_variable, result)

    # String keys

    def register_string_key_enum(
        self, enum_obj: Any, component_id_override: Optional[str] = None
    ) -> str:
        """Register a string-key enum and return its component id.

        Raises:
            InvalidStringKeyEnumError: If no component id can be determined.
        """
        component_id = self._string_keys.register(enum_obj, component_id_override)
        lookup = self._key_lookup.setdefault(component_id, {})
        for name, value in enum_members(enum_obj).items():
            self._add_key_variant(lookup, name, value)
        return component_id

    def has_string_key_enum(self, enum_obj: Any) -> bool:
        return self._string_keys.has(enum_obj)

    def resolve_string_key(self, value: str) -> str:
        """Raises:
        StringKeyNotRegisteredError: If no component owns ``value``.
        """
        return self._string_keys.resolve_component_id(value)

    def translate_string_key(
        self,
        value: str,
        variables: Optional[Mapping[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Translate a string-key value from its owning component.

        Raises:
            StringKeyNotRegisteredError: If no component owns ``value``.
            LanguageNotFoundError, TranslationMissingError: As translate().
        """
        component_id = self._string_keys.resolve_component_id(value)
        return self.translate(component_id, value, variables, language)

    def safe_translate_string_key(
        self,
        value: Any,
        variables: Optional[Mapping[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Never raises. Returns ``[unknown.value]`` if no component owns the
        value, ``[componentId.value]`` if its translation fails."""
        if not isinstance(value, str):
            value = str(value)
        resolved = self._string_keys.resolve(value)
        if not resolved.is_success:
            logger.debug("safe_translate_string_key_unresolved", value=value)
            return placeholder(UNKNOWN_COMPONENT, value)
        return self.safe_translate(resolved.data, value, variables, language)

    # Constants

    def register_constants(
        self,
        component_id: str,
        constants: Mapping[str, Any],
        schema: Optional[ConstantsSchema] = None,
    ) -> None:
        """Register a component's constants (no-op if already registered).

        Raises:
            ConstantConflictError, ConstantsSchemaValidationError,
            UnsafeInputError
        """
        self._constants.register(component_id, constants, schema)

    def register_constants_schema(self, component_id: str, schema: ConstantsSchema) -> None:
        self._constants.register_schema(component_id, schema)

    def update_constants(self, component_id: str, constants: Mapping[str, Any]) -> None:
        """Merge constants; the caller takes ownership of every key given."""
        self._constants.update(component_id, constants)

    def replace_constants(self, component_id: str, constants: Mapping[str, Any]) -> None:
        self._constants.replace(component_id, constants)

    def get_constants(self, component_id: str) -> Optional[Mapping[str, Any]]:
        return self._constants.get(component_id)

    def constants_owner(self, key: str) -> Optional[str]:
        return self._constants.resolve_owner(key)

    @property
    def merged_constants(self) -> Mapping[str, Any]:
        return dict(self._constants.get_merged())

    # Languages and context

    def register_language(self, language: LanguageDefinition) -> None:
        """Raises:
        DuplicateLanguageError: If the id or code is taken.
        """
        self._languages.register(language)

    def has_language(self, language_id: str) -> bool:
        return self._languages.has(language_id)

    @property
    def languages(self) -> List[LanguageDefinition]:
        return self._languages.get_all()

    def set_language(self, language: str) -> None:
        """Raises:
        LanguageNotFoundError: If the language is not registered.
        """
        self._context.set_language(language)

    def set_admin_language(self, language: str) -> None:
        self._context.set_admin_language(language)

    def switch_to_admin(self) -> None:
        self._context.switch_to_admin()

    def switch_to_user(self) -> None:
        self._context.switch_to_user()

    @property
    def current_language(self) -> str:
        """Raises:
        InvalidConfigError: If the engine has no language at all.
        """
        return self._context.current_language()

    @property
    def context(self) -> Dict[str, Any]:
        """Read-only snapshot of the active context."""
        return self._context.context.snapshot()

    def subscribe_context(self, listener: ContextListener):
        """Register ``listener(field, old, new)`` for context changes."""
        return self._context.context.subscribe(listener)

    def reset(self) -> None:
        """Drop every component, alias, constant and string-key enum, and
        restore the default language context. Languages are kept."""
        self._store.clear()
        self._constants.clear()
        self._string_keys.clear()
        self._key_lookup.clear()
        self._context.reset()
        logger.info("engine_reset")

    # Internals

    def _effective_language(self, language: Optional[str]) -> str:
        if language:
            return language
        if not self._context.has_context:
            raise InvalidConfigError("No default language configured")
        return self._context.current_language()

    def _build_variables(self, variables: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        validate_object_keys(variables)
        combined: Dict[str, Any] = {}
        safe_merge(combined, self.config.constants, self._constants.get_merged())
        if self._global_context is not None:
            safe_merge(combined, self._global_context.as_variables())
        if variables:
            safe_merge(
                combined,
                {name: extract_value(value) for name, value in variables.items()},
            )
        return combined

    def _resolve(
        self,
        component_id: Optional[str],
        key: str,
        variables: Optional[Mapping[str, Any]],
        language: Optional[str],
    ) -> OperationResult:
        try:
            validate_key_length(key, self._limits)
            lang = self._effective_language(language)
            combined = self._build_variables(variables)
            if not component_id:
                resolved = self._string_keys.resolve(key)
                if not resolved.is_success:
                    return resolved
                component_id = resolved.data
            component_id = self._canonical_component_id(component_id)
        except Exception as e:  # preparation errors become results
            return OperationResult.failure(e)
        return self._render(component_id, key, combined, lang)

    def _render(
        self,
        component_id: str,
        key: str,
        combined: Mapping[str, Any],
        language: str,
    ) -> OperationResult:
        result = self._store.resolve(component_id, key, combined, language)
        fallback = self.config.fallback_language
        if (
            result.is_success
            or not fallback
            or fallback == language
            or not isinstance(result.error, _FALLBACK_ERRORS)
        ):
            return result

        retried = self._store.resolve(component_id, key, combined, fallback)
        if retried.is_success:
            logger.info(
                "used_fallback_translation",
                component_id=component_id,
                key=key,
                requested_language=language,
                fallback_language=fallback,
            )
            return retried
        return result

    def _canonical_component_id(self, component_id: str) -> str:
        return self._store.resolve_id(component_id) or component_id

    def _register_key_lookup(self, config: ComponentConfig) -> None:
        lookup = self._key_lookup.setdefault(config.id, {})
        if config.strings:
            first_language = next(iter(config.strings))
            for key in config.strings[first_language]:
                self._add_key_variant(lookup, key, key)
        if config.string_keys is not None:
            for name, value in enum_members(config.string_keys).items():
                self._add_key_variant(lookup, name, value)

    @staticmethod
    def _add_key_variant(lookup: Dict[str, str], alias_key: str, canonical_key: str) -> None:
        if not alias_key or not canonical_key:
            return
        lookup[alias_key] = canonical_key
        normalized = normalize_legacy_key(alias_key)
        if normalized and normalized != alias_key:
            lookup.setdefault(normalized, canonical_key)

    def _resolve_component_and_key(self, prefix: str, raw_key: str) -> tuple:
        component_id = self._canonical_component_id(prefix)
        lookup = self._key_lookup.get(component_id)
        if not lookup:
            return component_id, raw_key

        if raw_key in lookup:
            return component_id, lookup[raw_key]

        normalized = normalize_legacy_key(raw_key)
        if normalized and normalized in lookup:
            return component_id, lookup[normalized]

        return component_id, raw_key
