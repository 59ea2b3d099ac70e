"""Cardinal plural rules.

Maps a language tag and a count to one of the CLDR plural categories. Rules
receive the absolute value of the count; callers keep the signed value for
``{count}`` substitution.
"""

import math
from enum import Enum
from numbers import Real
from typing import Any, Callable, Dict, List, Mapping, Optional


class PluralCategory(str, Enum):
    """CLDR cardinal plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PLURAL_CATEGORIES = tuple(category.value for category in PluralCategory)

PluralRule = Callable[[float], PluralCategory]


def _is_integer(n: float) -> bool:
    return n == math.floor(n)


def rule_english(n: float) -> PluralCategory:
    """en, de, es, it, nl, ...: one iff n == 1."""
    return PluralCategory.ONE if n == 1 else PluralCategory.OTHER


def rule_french(n: float) -> PluralCategory:
    """fr, pt-BR, hi: 0 and 1 are both "one"."""
    return PluralCategory.ONE if n in (0, 1) else PluralCategory.OTHER


def rule_no_plural(n: float) -> PluralCategory:
    """ja, zh, ko, tr, ...: a single form."""
    return PluralCategory.OTHER


def rule_russian(n: float) -> PluralCategory:
    """ru, uk: last digit and last two digits decide."""
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and mod100 != 11:
        return PluralCategory.ONE
    if 2 <= mod10 <= 4 and (mod100 < 12 or mod100 > 14):
        return PluralCategory.FEW
    return PluralCategory.MANY


def rule_arabic(n: float) -> PluralCategory:
    if n == 0:
        return PluralCategory.ZERO
    if n == 1:
        return PluralCategory.ONE
    if n == 2:
        return PluralCategory.TWO
    mod100 = n % 100
    if 3 <= mod100 <= 10:
        return PluralCategory.FEW
    if mod100 >= 11:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def rule_polish(n: float) -> PluralCategory:
    if not _is_integer(n):
        return PluralCategory.OTHER
    if n == 1:
        return PluralCategory.ONE
    mod10 = n % 10
    mod100 = n % 100
    if 2 <= mod10 <= 4 and (mod100 < 12 or mod100 > 14):
        return PluralCategory.FEW
    if mod10 in (0, 1) or 5 <= mod10 <= 9 or 12 <= mod100 <= 14:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def rule_scottish_gaelic(n: float) -> PluralCategory:
    if n in (1, 11):
        return PluralCategory.ONE
    if n in (2, 12):
        return PluralCategory.TWO
    if _is_integer(n) and (3 <= n <= 10 or 13 <= n <= 19):
        return PluralCategory.FEW
    return PluralCategory.OTHER


def rule_welsh(n: float) -> PluralCategory:
    return {
        0: PluralCategory.ZERO,
        1: PluralCategory.ONE,
        2: PluralCategory.TWO,
        3: PluralCategory.FEW,
        6: PluralCategory.MANY,
    }.get(n, PluralCategory.OTHER)


def rule_breton(n: float) -> PluralCategory:
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and mod100 not in (11, 71, 91):
        return PluralCategory.ONE
    if mod10 == 2 and mod100 not in (12, 72, 92):
        return PluralCategory.TWO
    if (
        mod10 in (3, 4, 9)
        and not 10 <= mod100 <= 19
        and not 70 <= mod100 <= 79
        and not 90 <= mod100 <= 99
    ):
        return PluralCategory.FEW
    if n != 0 and n % 1000000 == 0:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def rule_slovenian(n: float) -> PluralCategory:
    mod100 = n % 100
    if mod100 == 1:
        return PluralCategory.ONE
    if mod100 == 2:
        return PluralCategory.TWO
    if mod100 in (3, 4):
        return PluralCategory.FEW
    return PluralCategory.OTHER


def rule_czech(n: float) -> PluralCategory:
    if n == 1:
        return PluralCategory.ONE
    if _is_integer(n) and 2 <= n <= 4:
        return PluralCategory.FEW
    if not _is_integer(n):
        return PluralCategory.MANY
    return PluralCategory.OTHER


def rule_lithuanian(n: float) -> PluralCategory:
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and not 11 <= mod100 <= 19:
        return PluralCategory.ONE
    if 2 <= mod10 <= 9 and not 11 <= mod100 <= 19 and _is_integer(n):
        return PluralCategory.FEW
    if not _is_integer(n):
        return PluralCategory.MANY
    return PluralCategory.OTHER


def rule_latvian(n: float) -> PluralCategory:
    if n == 0:
        return PluralCategory.ZERO
    if n % 10 == 1 and n % 100 != 11:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def rule_irish(n: float) -> PluralCategory:
    if n == 1:
        return PluralCategory.ONE
    if n == 2:
        return PluralCategory.TWO
    if _is_integer(n) and 3 <= n <= 6:
        return PluralCategory.FEW
    if _is_integer(n) and 7 <= n <= 10:
        return PluralCategory.MANY
    return PluralCategory.OTHER


def rule_romanian(n: float) -> PluralCategory:
    if n == 1:
        return PluralCategory.ONE
    mod100 = n % 100
    if n == 0 or (_is_integer(n) and 1 <= mod100 <= 19):
        return PluralCategory.FEW
    return PluralCategory.OTHER


LANGUAGE_PLURAL_RULES: Dict[str, PluralRule] = {
    "en": rule_english,
    "en-US": rule_english,
    "en-GB": rule_english,
    "ru": rule_russian,
    "uk": rule_russian,
    "ar": rule_arabic,
    "pl": rule_polish,
    "fr": rule_french,
    "es": rule_english,
    "de": rule_english,
    "ja": rule_no_plural,
    "zh": rule_no_plural,
    "zh-CN": rule_no_plural,
    "gd": rule_scottish_gaelic,
    "cy": rule_welsh,
    "br": rule_breton,
    "sl": rule_slovenian,
    "cs": rule_czech,
    "lt": rule_lithuanian,
    "lv": rule_latvian,
    "ga": rule_irish,
    "ro": rule_romanian,
    "it": rule_english,
    "pt": rule_english,
    "pt-BR": rule_french,
    "nl": rule_english,
    "sv": rule_english,
    "no": rule_english,
    "da": rule_english,
    "fi": rule_english,
    "el": rule_english,
    "he": rule_english,
    "hi": rule_french,
    "tr": rule_no_plural,
    "ko": rule_no_plural,
    "vi": rule_no_plural,
    "th": rule_no_plural,
    "id": rule_no_plural,
    "ms": rule_no_plural,
}

_ONE_OTHER = (("one", "other"), ("zero",))
_OTHER_ONLY = (("other",), ())
_SLAVIC = (("one", "few", "many"), ("zero",))

# language -> (required forms, optional forms)
LANGUAGE_PLURAL_FORMS: Dict[str, tuple] = {
    "en": _ONE_OTHER,
    "en-US": _ONE_OTHER,
    "en-GB": _ONE_OTHER,
    "ru": _SLAVIC,
    "uk": _SLAVIC,
    "ar": (("zero", "one", "two", "few", "many", "other"), ()),
    "pl": (("one", "few", "many"), ("zero", "other")),
    "fr": _ONE_OTHER,
    "es": _ONE_OTHER,
    "de": _ONE_OTHER,
    "ja": _OTHER_ONLY,
    "zh": _OTHER_ONLY,
    "zh-CN": _OTHER_ONLY,
    "gd": (("one", "two", "few", "other"), ()),
    "cy": (("zero", "one", "two", "few", "many", "other"), ()),
    "br": (("one", "two", "few", "many", "other"), ()),
    "sl": (("one", "two", "few", "other"), ()),
    "cs": (("one", "few", "many", "other"), ()),
    "lt": (("one", "few", "many", "other"), ()),
    "lv": (("zero", "one", "other"), ()),
    "ga": (("one", "two", "few", "many", "other"), ()),
    "ro": (("one", "few", "other"), ()),
    "it": _ONE_OTHER,
    "pt": _ONE_OTHER,
    "pt-BR": _ONE_OTHER,
    "nl": _ONE_OTHER,
    "sv": _ONE_OTHER,
    "no": _ONE_OTHER,
    "da": _ONE_OTHER,
    "fi": _ONE_OTHER,
    "el": _ONE_OTHER,
    "he": _ONE_OTHER,
    "hi": _ONE_OTHER,
    "tr": _OTHER_ONLY,
    "ko": _OTHER_ONLY,
    "vi": _OTHER_ONLY,
    "th": _OTHER_ONLY,
    "id": _OTHER_ONLY,
    "ms": _OTHER_ONLY,
}


def _lookup(table: Dict[str, Any], language: str) -> Any:
    """Exact tag, then base subtag ("ru-RU" -> "ru"), then English."""
    if language in table:
        return table[language]
    base = str(language).split("-", 1)[0]
    if base in table:
        return table[base]
    return table["en"]


def category_for(language: str, count: Any) -> PluralCategory:
    """Select the plural category for ``count`` in ``language``.

    Non-numeric, boolean, NaN and infinite counts map to OTHER. The rule is
    applied to ``abs(count)``.
    """
    if isinstance(count, bool) or not isinstance(count, Real):
        return PluralCategory.OTHER
    n = float(count)
    if not math.isfinite(n):
        return PluralCategory.OTHER
    rule: PluralRule = _lookup(LANGUAGE_PLURAL_RULES, language)
    return rule(abs(n))


def required_plural_forms(language: str) -> List[str]:
    return list(_lookup(LANGUAGE_PLURAL_FORMS, language)[0])


def all_plural_forms(language: str) -> List[str]:
    required, optional = _lookup(LANGUAGE_PLURAL_FORMS, language)
    return [*required, *optional]


def has_plural_form(language: str, category: str) -> bool:
    if category not in PLURAL_CATEGORIES:
        return False
    return category in all_plural_forms(language)


def is_plural_value(value: Any) -> bool:
    return isinstance(value, Mapping)


def resolve_plural_value(
    value: Mapping[str, str], category: PluralCategory
) -> Optional[str]:
    """Pick a form: the exact category, then "other", then the first form.

    Returns:
        The template string, or None when the mapping holds no forms.
    """
    exact = value.get(category.value)
    if exact:
        return exact
    other = value.get(PluralCategory.OTHER.value)
    if other:
        return other
    for form in value.values():
        return form
    return None
