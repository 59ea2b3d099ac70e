"""Typed errors for the translation engine.

Every error carries a machine-readable ``code`` (an I18nErrorCode), a human
message, and a ``metadata`` dict with the identifiers involved. Hard entry
points raise these unchanged; safe entry points catch them and return a
placeholder string instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from component_i18n.operations.status import OperationStatus


class I18nErrorCode(str, Enum):
    """Machine-readable error codes."""

    COMPONENT_NOT_FOUND = "COMPONENT_NOT_FOUND"
    LANGUAGE_NOT_FOUND = "LANGUAGE_NOT_FOUND"
    TRANSLATION_MISSING = "TRANSLATION_MISSING"
    INVALID_CONFIG = "INVALID_CONFIG"
    DUPLICATE_COMPONENT = "DUPLICATE_COMPONENT"
    DUPLICATE_LANGUAGE = "DUPLICATE_LANGUAGE"
    CONSTANT_CONFLICT = "CONSTANT_CONFLICT"
    CONSTANTS_SCHEMA_VALIDATION_FAILED = "CONSTANTS_SCHEMA_VALIDATION_FAILED"
    STRING_KEY_NOT_REGISTERED = "STRING_KEY_NOT_REGISTERED"
    INVALID_STRING_KEY_ENUM = "INVALID_STRING_KEY_ENUM"


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            engine.translate("app", "greet")
        except I18nError as e:
            logger.error("translation_failed", code=e.code.value, error=str(e))
    """

    code: I18nErrorCode = I18nErrorCode.INVALID_CONFIG
    status: OperationStatus = OperationStatus.PERMANENT_ERROR

    def __init__(self, message: str, metadata: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.metadata: Dict[str, Any] = metadata or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured logs or API payloads."""
        return {
            "code": self.code.value,
            "message": self.message,
            "metadata": dict(self.metadata),
        }


class DuplicateComponentError(I18nError):
    """Raised when a component id is registered twice.

    Example:
        >>> engine.register(ComponentConfig(id="app", strings={...}))
        >>> engine.register(ComponentConfig(id="app", strings={...}))
        Traceback (most recent call last):
        ...
        DuplicateComponentError: Component 'app' already registered
    """

    code = I18nErrorCode.DUPLICATE_COMPONENT
    status = OperationStatus.INVALID_INPUT

    def __init__(self, component_id: str):
        super().__init__(
            f"Component '{component_id}' already registered",
            {"component_id": component_id},
        )
        self.component_id = component_id


class DuplicateLanguageError(I18nError):
    """Raised when a language id or code is registered twice."""

    code = I18nErrorCode.DUPLICATE_LANGUAGE
    status = OperationStatus.INVALID_INPUT

    def __init__(self, language: str):
        super().__init__(
            f"Language '{language}' already registered", {"language": language}
        )
        self.language = language


class ComponentNotFoundError(I18nError):
    """Raised when a component id (or alias) is unknown."""

    code = I18nErrorCode.COMPONENT_NOT_FOUND
    status = OperationStatus.NOT_FOUND

    def __init__(self, component_id: str):
        super().__init__(
            f"Component '{component_id}' not found", {"component_id": component_id}
        )
        self.component_id = component_id


class LanguageNotFoundError(I18nError):
    """Raised when a language is not registered, or a component has no
    string table for it."""

    code = I18nErrorCode.LANGUAGE_NOT_FOUND
    status = OperationStatus.NOT_FOUND

    def __init__(self, language: str, component_id: Optional[str] = None):
        metadata: Dict[str, Any] = {"language": language}
        message = f"Language '{language}' not found"
        if component_id is not None:
            metadata["component_id"] = component_id
            message = f"{message} for component '{component_id}'"
        super().__init__(message, metadata)
        self.language = language
        self.component_id = component_id


class TranslationMissingError(I18nError):
    """Raised when a key is absent from a component's language table."""

    code = I18nErrorCode.TRANSLATION_MISSING
    status = OperationStatus.NOT_FOUND

    def __init__(self, component_id: str, key: str, language: str):
        super().__init__(
            f"Translation missing for '{component_id}.{key}' in language '{language}'",
            {"component_id": component_id, "key": key, "language": language},
        )
        self.component_id = component_id
        self.key = key
        self.language = language


class InvalidConfigError(I18nError):
    """Raised when the engine configuration cannot satisfy a request,
    e.g. no default language exists."""

    code = I18nErrorCode.INVALID_CONFIG
    status = OperationStatus.INVALID_INPUT

    def __init__(self, reason: str):
        super().__init__(reason, {"reason": reason})


class ConstantConflictError(I18nError):
    """Raised when two components register the same constant key with
    different values.

    Example:
        >>> registry.register("lib-a", {"site": "A"})
        >>> registry.register("lib-b", {"site": "B"})
        Traceback (most recent call last):
        ...
        ConstantConflictError: Constant 'site' registered by 'lib-b' conflicts with 'lib-a'
    """

    code = I18nErrorCode.CONSTANT_CONFLICT
    status = OperationStatus.INVALID_INPUT

    def __init__(self, key: str, new_owner: str, existing_owner: str):
        super().__init__(
            f"Constant '{key}' registered by '{new_owner}' conflicts with "
            f"'{existing_owner}'",
            {"key": key, "new_owner": new_owner, "existing_owner": existing_owner},
        )
        self.key = key
        self.new_owner = new_owner
        self.existing_owner = existing_owner


@dataclass(frozen=True)
class FieldError:
    """One field-level schema violation.

    Attributes:
        field: Dotted path of the offending field.
        message: Validator message.
        type: Validator error type (e.g. "string_type", "missing").
    """

    field: str
    message: str
    type: str = "value_error"


class ConstantsSchemaValidationError(I18nError):
    """Raised when constants fail validation against a registered schema."""

    code = I18nErrorCode.CONSTANTS_SCHEMA_VALIDATION_FAILED
    status = OperationStatus.INVALID_INPUT

    def __init__(
        self,
        component_id: str,
        interface_id: str,
        field_errors: Sequence[FieldError],
        detail: Optional[str] = None,
    ):
        fields = ", ".join(error.field for error in field_errors) or "unknown"
        message = (
            f"Constants for component '{component_id}' failed validation "
            f"against '{interface_id}': {fields}"
        )
        super().__init__(
            message,
            {
                "component_id": component_id,
                "interface_id": interface_id,
                "field_errors": [error.__dict__ for error in field_errors],
                "detail": detail,
            },
        )
        self.component_id = component_id
        self.interface_id = interface_id
        self.field_errors: List[FieldError] = list(field_errors)


class StringKeyNotRegisteredError(I18nError):
    """Raised when a string-key value cannot be traced to any component."""

    code = I18nErrorCode.STRING_KEY_NOT_REGISTERED
    status = OperationStatus.NOT_FOUND

    def __init__(self, value: str):
        super().__init__(
            f"String key '{value}' does not belong to any registered component",
            {"value": value},
        )
        self.value = value


class InvalidStringKeyEnumError(I18nError):
    """Raised when a string-key enum carries no component identity and no
    override was supplied."""

    code = I18nErrorCode.INVALID_STRING_KEY_ENUM
    status = OperationStatus.INVALID_INPUT

    def __init__(self, reason: str = "Object is not a recognizable string key enum"):
        super().__init__(reason, {"reason": reason})


class UnsafeInputError(ValueError):
    """Raised before any mutation when input carries a dangerous key or
    exceeds a size limit. Not part of the I18nError taxonomy."""

    status = OperationStatus.INVALID_INPUT
