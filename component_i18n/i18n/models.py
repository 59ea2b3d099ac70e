"""Data structures shared by the engine and its registries."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Union

if TYPE_CHECKING:
    from component_i18n.core.config import I18nSettings
    from component_i18n.i18n.string_keys import StringKeyEnum

# A table entry is a template string or a {plural category: template} map.
PluralValue = Mapping[str, str]
StringValue = Union[str, PluralValue]
StringTable = Dict[str, Dict[str, StringValue]]


@dataclass(frozen=True)
class LanguageDefinition:
    """A language the engine can translate into.

    Attributes:
        id: Identifier used as the key of component string tables
            (e.g. "en-US").
        code: Short language code (e.g. "en").
        name: Display name.
        is_default: Whether this is the registry's default language.
    """

    id: str
    code: str
    name: str
    is_default: bool = False


@dataclass
class ComponentConfig:
    """A named bundle of localized strings.

    Attributes:
        id: Unique component identifier, immutable once registered.
        strings: language id -> key -> template string or plural map.
        aliases: Alternate names resolving to the same component.
        enum_name: Optional name used by ``{{EnumName.key}}`` template markers.
        string_keys: Optional string-key enum whose members name this
            component's keys; registered alongside the component.
    """

    id: str
    strings: StringTable = field(default_factory=dict)
    aliases: Sequence[str] = field(default_factory=tuple)
    enum_name: Optional[str] = None
    string_keys: Optional["StringKeyEnum"] = None

    @property
    def languages(self) -> List[str]:
        return list(self.strings.keys())

    def keys_for(self, language: str) -> List[str]:
        return list(self.strings.get(language, {}).keys())


@dataclass(frozen=True)
class MissingKey:
    """A key present in one language table but absent from another."""

    language: str
    component_id: str
    key: str


@dataclass
class ValidationResult:
    """Outcome of registering or validating components.

    Warnings are advisory and never block registration.
    """

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    missing_keys: List[MissingKey] = field(default_factory=list)

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.missing_keys.extend(other.missing_keys)
        self.is_valid = not self.errors


@dataclass
class EngineConfig:
    """Engine construction options.

    Attributes:
        default_language: Language for calls that omit one; defaults to the
            registry's default language.
        fallback_language: Optional language retried when a translation is
            missing. Unset means strict lookups.
        constants: Lowest-priority template variables for every call.
        strict_plural_validation: Report missing plural forms as errors.
        check_unused_plural_forms: Warn about plural forms a language never
            selects.
        check_plural_variables: Warn when plural forms of one value use
            different placeholders.
        max_template_length: Longest template accepted by ``t()``.
        max_key_length: Longest string key accepted.
        max_component_id_length: Longest component id accepted.
    """

    default_language: Optional[str] = None
    fallback_language: Optional[str] = None
    constants: Dict[str, Any] = field(default_factory=dict)
    strict_plural_validation: bool = False
    check_unused_plural_forms: bool = False
    check_plural_variables: bool = False
    max_template_length: int = 10000
    max_key_length: int = 200
    max_component_id_length: int = 100

    @classmethod
    def from_settings(cls, settings: "I18nSettings", **overrides: Any) -> "EngineConfig":
        """Build a config from I18nSettings, applying keyword overrides."""
        values: Dict[str, Any] = {
            "default_language": settings.default_language,
            "fallback_language": settings.fallback_language,
            "strict_plural_validation": settings.strict_plural_validation,
            "check_unused_plural_forms": settings.check_unused_plural_forms,
            "check_plural_variables": settings.check_plural_variables,
            "max_template_length": settings.max_template_length,
            "max_key_length": settings.max_key_length,
            "max_component_id_length": settings.max_component_id_length,
        }
        values.update(overrides)
        return cls(**values)
