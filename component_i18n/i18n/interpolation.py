"""``{name}`` placeholder substitution."""

import re
from typing import Any, Mapping, Optional

# Names are bounded so scanning stays linear on hostile input.
VARIABLE_PATTERN = re.compile(r"\{(\w{1,50})\}")


def extract_value(value: Any) -> Any:
    """Unwrap objects exposing a non-callable ``value`` (currency, timezone)."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    inner = getattr(value, "value", None)
    if inner is not None and not callable(inner):
        return inner
    return value


def format_value(value: Any) -> str:
    value = extract_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def replace_variables(
    template: str,
    variables: Optional[Mapping[str, Any]] = None,
    constants: Optional[Mapping[str, Any]] = None,
) -> str:
    """Substitute ``{name}`` placeholders.

    Caller variables win over constants. Placeholders with no value, or a
    ``None`` value, are left untouched.

    Args:
        template: Template containing ``{name}`` placeholders.
        variables: Caller-supplied values.
        constants: Shared constants consulted when a variable is absent.

    Returns:
        The rendered string.
    """
    if not isinstance(template, str):
        template = str(template)
    variables = variables or {}
    constants = constants or {}

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in variables and variables[name] is not None:
            return format_value(variables[name])
        if name in constants and constants[name] is not None:
            return format_value(constants[name])
        return match.group(0)

    return VARIABLE_PATTERN.sub(_substitute, template)
