"""Component string tables and final string production.

A component's table maps language -> key -> value, where a value is either
a template string or a plural map. Key lookup is independent of plural
resolution, so one key may be a plain string in one language and a plural
map in another.
"""

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.errors import (
    ComponentNotFoundError,
    DuplicateComponentError,
    InvalidConfigError,
    LanguageNotFoundError,
    TranslationMissingError,
)
from component_i18n.i18n.interpolation import replace_variables
from component_i18n.i18n.models import (
    ComponentConfig,
    MissingKey,
    StringTable,
    StringValue,
    ValidationResult,
)
from component_i18n.i18n.plural_validation import validate_plural_forms
from component_i18n.i18n.plurals import (
    PluralCategory,
    category_for,
    is_plural_value,
    resolve_plural_value,
)
from component_i18n.operations import OperationResult

logger = get_module_logger()


def placeholder(component_id: str, key: str) -> str:
    """Placeholder returned by safe translation on any failure."""
    return f"[{component_id}.{key}]"


def _alternate_names(config: ComponentConfig) -> List[str]:
    """Trimmed aliases and enum name that differ from the component id."""
    names = list(config.aliases or ())
    if config.enum_name:
        names.append(config.enum_name)
    trimmed = (name.strip() for name in names)
    return [name for name in dict.fromkeys(trimmed) if name and name != config.id]


class ComponentStore:
    """Holds registered components and renders their strings.

    Component ids and alternate names (aliases and enum names) share one
    namespace. A real id always wins over an alternate name.

    Attributes:
        strict_plural_validation: Report missing plural forms as errors in
            validation results (registration still succeeds).
        check_unused_plural_forms: Warn about plural forms the language
            never selects.
        check_plural_variables: Warn when plural forms use different
            ``{name}`` placeholders.
    """

    def __init__(
        self,
        strict_plural_validation: bool = False,
        check_unused_plural_forms: bool = False,
        check_plural_variables: bool = False,
    ):
        self.strict_plural_validation = strict_plural_validation
        self.check_unused_plural_forms = check_unused_plural_forms
        self.check_plural_variables = check_plural_variables
        self._components: Dict[str, ComponentConfig] = {}
        self._aliases: Dict[str, str] = {}

    def ensure_registrable(self, config: ComponentConfig) -> None:
        """Check that a component's id and alternate names are free.

        Raises:
            DuplicateComponentError: If the id is already a component id or
                an alias of another component.
            InvalidConfigError: If an alias or enum name already names a
                different component.
        """
        if self.has(config.id):
            raise DuplicateComponentError(config.id)
        for name in _alternate_names(config):
            owner = self.resolve_id(name)
            if owner is not None:
                raise InvalidConfigError(
                    f"Alias '{name}' of component '{config.id}' already "
                    f"names component '{owner}'"
                )

    def register(self, config: ComponentConfig) -> ValidationResult:
        """Store a component's string table.

        Returns:
            ValidationResult whose warnings list every (language, key) pair
            present in one language but missing in another.

        Raises:
            DuplicateComponentError: If the id is already registered.
            InvalidConfigError: If an alternate name is already taken.
        """
        self.ensure_registrable(config)

        config = replace(
            config,
            strings={language: dict(table) for language, table in config.strings.items()},
        )
        validation = self.validate(config)
        self._components[config.id] = config
        for name in _alternate_names(config):
            self._aliases[name] = config.id

        logger.info(
            "component_registered",
            component_id=config.id,
            languages=config.languages,
            warning_count=len(validation.warnings),
        )
        return validation

    def update(self, component_id: str, strings: StringTable) -> ValidationResult:
        """Merge new language/key entries into an existing component.

        Raises:
            ComponentNotFoundError: If the component is unknown.
        """
        existing = self.get(component_id)
        merged: StringTable = {
            language: dict(table) for language, table in existing.strings.items()
        }
        for language, table in strings.items():
            merged.setdefault(language, {}).update(table)

        existing.strings = merged
        logger.info(
            "component_strings_updated",
            component_id=existing.id,
            languages=list(strings.keys()),
        )
        return self.validate(existing)

    def has(self, component_id: str) -> bool:
        return component_id in self._components or component_id in self._aliases

    def resolve_id(self, component_id: str) -> Optional[str]:
        if component_id in self._components:
            return component_id
        return self._aliases.get(component_id)

    def get(self, component_id: str) -> ComponentConfig:
        resolved = self.resolve_id(component_id)
        if resolved is None:
            raise ComponentNotFoundError(component_id)
        return self._components[resolved]

    def get_all(self) -> List[ComponentConfig]:
        return list(self._components.values())

    def lookup(self, component_id: str, key: str, language: str) -> OperationResult:
        """Locate the raw table value for a key.

        Returns:
            Success with the StringValue, or a failure carrying
            ComponentNotFoundError, LanguageNotFoundError or
            TranslationMissingError.
        """
        resolved = self.resolve_id(component_id)
        if resolved is None:
            return OperationResult.failure(ComponentNotFoundError(component_id))

        table = self._components[resolved].strings.get(language)
        if table is None:
            return OperationResult.failure(LanguageNotFoundError(language, resolved))

        value = table.get(key)
        if value is None:
            return OperationResult.failure(
                TranslationMissingError(resolved, key, language)
            )
        return OperationResult.success(value)

    def resolve(
        self,
        component_id: str,
        key: str,
        variables: Optional[Mapping[str, Any]] = None,
        language: str = "en-US",
        constants: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """Look up and render a string without raising."""
        try:
            found = self.lookup(component_id, key, language)
            if not found.is_success:
                return found
            return OperationResult.success(
                self.render(found.data, variables, language, constants)
            )
        except Exception as e:  # rendering errors become results
            logger.warning(
                "render_failed", component_id=component_id, key=key, error=str(e)
            )
            return OperationResult.failure(e)

    def render(
        self,
        value: StringValue,
        variables: Optional[Mapping[str, Any]],
        language: str,
        constants: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve a plural form if needed, then substitute variables.

        Plural maps fall back to "other", then the first form, then "".
        """
        template = value
        if is_plural_value(value):
            count = (variables or {}).get("count")
            category = (
                PluralCategory.OTHER
                if count is None
                else category_for(language, count)
            )
            template = resolve_plural_value(value, category) or ""
        return replace_variables(template, variables, constants)

    def validate(self, config: ComponentConfig) -> ValidationResult:
        """Report cross-language key gaps and plural form problems."""
        result = ValidationResult()

        all_keys: List[str] = []
        seen = set()
        for table in config.strings.values():
            for key in table:
                if key not in seen:
                    seen.add(key)
                    all_keys.append(key)

        for language, table in config.strings.items():
            for key in all_keys:
                if key not in table:
                    result.warnings.append(
                        f"Missing key '{key}' for language '{language}' in "
                        f"component '{config.id}'"
                    )
                    result.missing_keys.append(MissingKey(language, config.id, key))

            for key, value in table.items():
                if not is_plural_value(value):
                    continue
                plural = validate_plural_forms(
                    value,
                    language,
                    key,
                    strict=self.strict_plural_validation,
                    check_unused=self.check_unused_plural_forms,
                    check_variables=self.check_plural_variables,
                )
                result.errors.extend(plural.errors)
                result.warnings.extend(plural.warnings)

        result.is_valid = not result.errors
        return result

    def clear(self) -> None:
        self._components.clear()
        self._aliases.clear()
