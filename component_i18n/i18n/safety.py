"""Input guards applied before externally supplied data is used.

Variable and constant mappings are rejected when they carry keys that would
let a caller shadow object internals (``__proto__``, ``constructor``,
``prototype``), and identifiers and templates are bounded in length so that
marker scanning stays linear.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from component_i18n.i18n.errors import UnsafeInputError

DANGEROUS_KEYS = frozenset({"__proto__", "constructor", "prototype"})

COMPONENT_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


@dataclass(frozen=True)
class Limits:
    """Size limits for identifiers and templates."""

    max_template_length: int = 10000
    max_key_length: int = 200
    max_component_id_length: int = 100


DEFAULT_LIMITS = Limits()


def is_dangerous_key(key: Any) -> bool:
    return key in DANGEROUS_KEYS


def validate_object_keys(obj: Optional[Mapping[str, Any]]) -> None:
    """Reject a mapping that contains a dangerous key.

    Args:
        obj: Mapping supplied by a caller (variables, constants).

    Raises:
        UnsafeInputError: If any key is in DANGEROUS_KEYS.
    """
    if not obj:
        return
    for key in obj.keys():
        if is_dangerous_key(key):
            raise UnsafeInputError(f"Dangerous key detected: {key}")


def safe_merge(target: Dict[str, Any], *sources: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy entries from sources into target, skipping dangerous keys."""
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if not is_dangerous_key(key):
                target[key] = value
    return target


def validate_component_id(component_id: str, limits: Limits = DEFAULT_LIMITS) -> None:
    """Raises:
    UnsafeInputError: If the id is too long or holds characters outside
        ``[a-zA-Z0-9_-]``.
    """
    if not isinstance(component_id, str) or not component_id:
        raise UnsafeInputError("Component ID must be a non-empty string")
    if len(component_id) > limits.max_component_id_length:
        raise UnsafeInputError(
            f"Component ID exceeds maximum length of {limits.max_component_id_length}"
        )
    if not COMPONENT_ID_PATTERN.match(component_id):
        raise UnsafeInputError("Component ID contains invalid characters")


def validate_key_length(key: str, limits: Limits = DEFAULT_LIMITS) -> None:
    if len(key) > limits.max_key_length:
        raise UnsafeInputError(
            f"Key exceeds maximum length of {limits.max_key_length}"
        )


def validate_template_length(template: str, limits: Limits = DEFAULT_LIMITS) -> None:
    if len(template) > limits.max_template_length:
        raise UnsafeInputError(
            f"Template exceeds maximum length of {limits.max_template_length}"
        )
