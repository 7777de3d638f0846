"""CLDR plural rules implementation using Babel.

Provides plural category selection for single values (cardinal and ordinal)
and for ranges such as "1-3 items".

Point selection uses Babel's ``Locale.plural_form`` / ``Locale.ordinal_form``.
Babel does not ship CLDR pluralRanges data, so range selection computes the
categories of both endpoints and looks the pair up in _RANGE_OVERRIDES, a
transcription of the CLDR table. Pairs missing from it resolve to the
category of the range end, which is the CLDR result for every omitted entry.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal
from typing import TypeAlias

from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from msgengine.enums import PluralCategory, PluralType
from msgengine.locale_utils import get_babel_locale, get_base_language

__all__ = ["select_plural_category", "select_plural_range"]

Number: TypeAlias = int | float | Decimal

# CLDR supplemental pluralRanges, keyed by base language; (start, end) -> result.
# Entries whose result equals the end category are omitted, as are languages
# where every entry does (cs, pl, ru, uk, cy, de, fr, ...).
_RANGE_OVERRIDES: dict[str, dict[tuple[str, str], str]] = {
    **dict.fromkeys(
        ("af", "bg", "ca", "en", "es", "et", "eu", "fi", "nb", "si", "ur"),
        {("other", "one"): "other"},
    ),
    "ar": {
        ("zero", "one"): "zero",
        ("zero", "two"): "zero",
        ("one", "two"): "other",
        ("other", "one"): "other",
        ("other", "two"): "other",
    },
    "fa": {
        ("one", "one"): "other",
    },
    "he": {
        ("one", "two"): "other",
        ("other", "one"): "other",
        ("other", "two"): "other",
    },
    "ka": {
        ("one", "other"): "one",
        ("other", "one"): "other",
    },
    "lt": {
        ("one", "one"): "few",
    },
    "lv": {
        ("zero", "zero"): "other",
        ("one", "zero"): "other",
        ("other", "zero"): "other",
    },
    "mk": {
        ("one", "one"): "other",
        ("other", "one"): "other",
    },
    "or": {
        ("one", "one"): "other",
        ("other", "one"): "other",
    },
    "ro": {
        ("few", "one"): "few",
    },
    "sl": {
        ("one", "one"): "few",
        ("two", "one"): "few",
        ("few", "one"): "few",
        ("other", "one"): "few",
    },
}


def select_plural_category(
    n: Number,
    locale: str,
    plural_type: PluralType = PluralType.CARDINAL,
) -> str:
    """Select CLDR plural category for a number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")
        plural_type: Cardinal (quantity) or ordinal (position) rules

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(2, "en", PluralType.ORDINAL)
        'two'

    Unknown or unparseable locales fall back to a simple one/other rule
    for cardinals and "other" for ordinals.
    """
    try:
        # Use cached locale parsing for performance
        locale_obj = get_babel_locale(locale)
    except (BabelUnknownLocaleError, ValueError):
        if plural_type is PluralType.ORDINAL:
            return PluralCategory.OTHER.value
        return PluralCategory.ONE.value if abs(n) == 1 else PluralCategory.OTHER.value

    if plural_type is PluralType.ORDINAL:
        return locale_obj.ordinal_form(n)
    return locale_obj.plural_form(n)


def select_plural_range(
    start: Number,
    end: Number,
    locale: str,
    plural_type: PluralType = PluralType.CARDINAL,
) -> str:
    """Select CLDR plural category for a numeric range.

    Args:
        start: Range start
        end: Range end
        locale: Locale code
        plural_type: Cardinal or ordinal rules for the endpoints

    Returns:
        Plural category of the range

    Examples:
        >>> select_plural_range(1, 5, "en")
        'other'
        >>> select_plural_range(0, 1, "en")
        'other'
        >>> select_plural_range(1, 2, "ru")
        'few'
    """
    start_category = select_plural_category(start, locale, plural_type)
    end_category = select_plural_category(end, locale, plural_type)
    overrides = _RANGE_OVERRIDES.get(get_base_language(locale), {})
    return overrides.get((start_category, end_category), end_category)
