"""Tests for CLDR plural category selection.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgengine.enums import PluralCategory, PluralType
from msgengine.runtime.plural_rules import select_plural_category, select_plural_range

_CATEGORIES = {category.value for category in PluralCategory}


class TestSelectPluralCategory:
    """Cardinal selection with locale routing."""

    @pytest.mark.parametrize(
        ("n", "expected"), [(0, "other"), (1, "one"), (2, "other"), (1.5, "other")]
    )
    def test_english(self, n: float, expected: str) -> None:
        assert select_plural_category(n, "en") == expected

    @pytest.mark.parametrize(
        ("n", "expected"), [(1, "one"), (2, "few"), (5, "many"), (21, "one"), (1.5, "other")]
    )
    def test_russian(self, n: float, expected: str) -> None:
        assert select_plural_category(n, "ru") == expected

    @pytest.mark.parametrize(
        ("n", "expected"), [(0, "zero"), (1, "one"), (10, "zero"), (2, "other")]
    )
    def test_latvian(self, n: int, expected: str) -> None:
        assert select_plural_category(n, "lv") == expected

    @pytest.mark.parametrize(
        ("n", "expected"), [(0, "zero"), (1, "one"), (2, "two"), (3, "few"), (11, "many")]
    )
    def test_arabic(self, n: int, expected: str) -> None:
        assert select_plural_category(n, "ar") == expected

    def test_bcp47_and_posix_identifiers(self) -> None:
        assert select_plural_category(1, "en-US") == "one"
        assert select_plural_category(0, "lv_LV") == "zero"

    def test_decimal_input(self) -> None:
        assert select_plural_category(Decimal("1"), "en") == "one"
        assert select_plural_category(Decimal("1.0"), "en") == "other"

    def test_unknown_locale_uses_one_other(self) -> None:
        """Locales without CLDR data fall back to a simple one/other rule."""
        assert select_plural_category(1, "xx") == "one"
        assert select_plural_category(5, "xx") == "other"

    def test_unparseable_locale(self) -> None:
        assert select_plural_category(1, "not a locale") == "one"

    @given(n=st.integers(min_value=0, max_value=10**9))
    def test_result_is_cldr_category(self, n: int) -> None:
        for locale in ("en", "ru", "ar", "lv", "ja"):
            assert select_plural_category(n, locale) in _CATEGORIES


class TestOrdinalSelection:
    """Ordinal selection."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "one"), (2, "two"), (3, "few"), (4, "other"), (11, "other"), (12, "other"),
         (13, "other"), (21, "one"), (22, "two"), (23, "few")],
    )
    def test_english(self, n: int, expected: str) -> None:
        assert select_plural_category(n, "en", PluralType.ORDINAL) == expected

    def test_unknown_locale_is_other(self) -> None:
        assert select_plural_category(1, "xx", PluralType.ORDINAL) == "other"


class TestSelectPluralRange:
    """Range selection."""

    def test_english_one_to_many(self) -> None:
        assert select_plural_range(1, 5, "en") == "other"

    def test_english_override(self) -> None:
        """en: other + one -> other, where the end category alone would be "one"."""
        assert select_plural_range(0, 1, "en") == "other"

    def test_russian_end_category(self) -> None:
        assert select_plural_range(1, 2, "ru") == "few"
        assert select_plural_range(1, 5, "ru") == "many"
        assert select_plural_range(5, 21, "ru") == "one"

    def test_latvian_overrides(self) -> None:
        assert select_plural_range(0, 10, "lv") == "other"
        assert select_plural_range(1, 10, "lv") == "other"
        assert select_plural_range(0, 1, "lv") == "one"

    def test_regional_locale_uses_base_language_overrides(self) -> None:
        assert select_plural_range(0, 1, "en-GB") == "other"

    @pytest.mark.parametrize(
        ("start", "end", "locale", "expected"),
        [
            (1, 2, "he", "other"),
            (0, 1, "he", "other"),
            (1, 101, "sl", "few"),
            (2, 101, "sl", "few"),
            (5, 101, "sl", "few"),
            (0, 1, "ro", "few"),
            (1, 21, "mk", "other"),
            (5, 21, "mk", "other"),
            (1, 5, "ka", "one"),
            (0, 1, "ka", "other"),
            (1, 21, "lt", "few"),
            (0, 1, "ar", "zero"),
            (0, 2, "ar", "zero"),
            (1, 2, "ar", "other"),
            (0, 1, "es", "other"),
        ],
    )
    def test_languages_deviating_from_end_category(
        self, start: int, end: int, locale: str, expected: str
    ) -> None:
        assert select_plural_range(start, end, locale) == expected

    @pytest.mark.parametrize(
        ("start", "end", "locale", "expected"),
        [
            (2, 5, "ar", "few"),
            (3, 11, "ar", "many"),
            (1, 3, "sl", "few"),
            (1, 2, "sl", "two"),
            (1, 2, "ro", "few"),
            (5, 21, "de", "other"),
            (0, 1, "de", "one"),
        ],
    )
    def test_entries_matching_end_category(
        self, start: int, end: int, locale: str, expected: str
    ) -> None:
        assert select_plural_range(start, end, locale) == expected
