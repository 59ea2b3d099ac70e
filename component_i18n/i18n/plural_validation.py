"""Advisory checks for plural values against a language's plural forms."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from component_i18n.i18n.plurals import (
    PLURAL_CATEGORIES,
    all_plural_forms,
    is_plural_value,
    required_plural_forms,
)

_VARIABLE = re.compile(r"\{(\w{1,50})\}")


@dataclass
class PluralValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_plural_forms(
    value: Any,
    language: str,
    key: str,
    strict: bool = False,
    check_unused: bool = False,
    check_variables: bool = False,
) -> PluralValidationResult:
    """Check a plural value for missing, unknown or inconsistent forms.

    Args:
        value: A string table entry; plain strings always pass.
        language: Language tag whose plural rules apply.
        key: String key, used in messages.
        strict: Report missing required forms as errors instead of warnings.
        check_unused: Warn about forms the language never selects.
        check_variables: Warn when a form lacks variables other forms use.

    Returns:
        PluralValidationResult with errors and warnings.
    """
    result = PluralValidationResult()
    if not is_plural_value(value):
        return result

    for form in required_plural_forms(language):
        if not value.get(form):
            message = (
                f"Missing required plural form '{form}' for language "
                f"'{language}' in key '{key}'"
            )
            (result.errors if strict else result.warnings).append(message)

    for form in value:
        if form not in PLURAL_CATEGORIES:
            result.errors.append(
                f"Invalid plural category '{form}' in key '{key}'. "
                f"Valid categories: {', '.join(PLURAL_CATEGORIES)}"
            )

    if check_unused:
        supported = all_plural_forms(language)
        for form in value:
            if form in PLURAL_CATEGORIES and form not in supported:
                result.warnings.append(
                    f"Unused plural form '{form}' for language '{language}' "
                    f"in key '{key}'"
                )

    if check_variables:
        for form, missing in _find_inconsistent_variables(value).items():
            result.warnings.append(
                f"Plural form '{form}' in key '{key}' missing variables: "
                f"{', '.join(sorted(missing))}"
            )

    result.is_valid = not result.errors
    return result


def _find_inconsistent_variables(value: Dict[str, str]) -> Dict[str, Set[str]]:
    per_form = {
        form: set(_VARIABLE.findall(template or ""))
        for form, template in value.items()
    }
    union: Set[str] = set().union(*per_form.values()) if per_form else set()
    # singular forms may omit {count}
    union.discard("count")
    return {
        form: union - found for form, found in per_form.items() if union - found
    }
