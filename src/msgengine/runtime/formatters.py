"""Locale-bound formatters built on Babel.

A formatter builder is any callable taking a tuple of Babel locales (the
locale being loaded first, the engine default second) and returning a
formatter object. Each Locale builds its formatters once, at load time.

Argument values can opt into formatting by being callable: the renderer
calls them with the locale's formatter mapping. ``formatted()`` creates
such values:

    engine.t("en", "price", {"amount": formatted("currency", 9.5, currency="EUR")})

Uses Babel for CLDR-compliant number, date, currency and list formatting,
without touching Python's global locale module.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, TypeAlias

from babel import Locale
from babel import dates as babel_dates
from babel import lists as babel_lists
from babel import numbers as babel_numbers

__all__ = [
    "CurrencyFormatter",
    "DateFormatter",
    "DateTimeFormatter",
    "FormatterBuilder",
    "ListFormatter",
    "NumberFormatter",
    "PercentFormatter",
    "create_default_formatters",
    "formatted",
]

logger = logging.getLogger(__name__)

FormatterBuilder: TypeAlias = Callable[[tuple[Locale, ...]], Any]

# Used when none of the requested locales can be parsed by Babel.
_FALLBACK_LOCALE = "en_US"


class _BabelFormatter:
    """Base for formatters bound to the first usable Babel locale."""

    __slots__ = ("locale",)

    def __init__(self, locales: tuple[Locale, ...]) -> None:
        """Bind to the first locale, or en_US when none is usable."""
        if locales:
            self.locale = locales[0]
        else:
            logger.warning("No usable formatter locale. Falling back to %s", _FALLBACK_LOCALE)
            self.locale = Locale.parse(_FALLBACK_LOCALE)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"{type(self).__name__}(locale={self.locale})"


class NumberFormatter(_BabelFormatter):
    """Decimal number formatting.

    Example:
        >>> NumberFormatter((Locale.parse("de_DE"),)).format(1234.5)
        '1.234,5'
    """

    __slots__ = ()

    def format(
        self,
        value: int | float | Decimal,
        *,
        pattern: str | None = None,
        group_separator: bool = True,
    ) -> str:
        """Format a number with locale separators."""
        return babel_numbers.format_decimal(
            value, format=pattern, locale=self.locale, group_separator=group_separator
        )


class PercentFormatter(_BabelFormatter):
    """Percentage formatting (0.25 -> 25%)."""

    __slots__ = ()

    def format(self, value: int | float | Decimal, *, pattern: str | None = None) -> str:
        """Format a ratio as a percentage."""
        return babel_numbers.format_percent(value, format=pattern, locale=self.locale)


class CurrencyFormatter(_BabelFormatter):
    """Currency formatting.

    Example:
        >>> CurrencyFormatter((Locale.parse("en_US"),)).format(9.5, currency="EUR")
        '€9.50'
    """

    __slots__ = ()

    def format(
        self,
        value: int | float | Decimal,
        *,
        currency: str,
        pattern: str | None = None,
    ) -> str:
        """Format an amount in the given ISO 4217 currency."""
        return babel_numbers.format_currency(
            value, currency, format=pattern, locale=self.locale
        )


class DateFormatter(_BabelFormatter):
    """Date formatting with CLDR styles (short, medium, long, full)."""

    __slots__ = ()

    def format(self, value: date | datetime, *, style: str = "medium") -> str:
        """Format a date."""
        return babel_dates.format_date(value, format=style, locale=self.locale)


class DateTimeFormatter(_BabelFormatter):
    """Date and time formatting with CLDR styles."""

    __slots__ = ()

    def format(self, value: datetime | time, *, style: str = "medium") -> str:
        """Format a datetime (or a bare time)."""
        if isinstance(value, time):
            return babel_dates.format_time(value, format=style, locale=self.locale)
        return babel_dates.format_datetime(value, format=style, locale=self.locale)


class ListFormatter(_BabelFormatter):
    """List joining ("a, b, and c").

    Example:
        >>> ListFormatter((Locale.parse("en"),)).format(["a", "b", "c"])
        'a, b, and c'
    """

    __slots__ = ()

    def format(self, value: Sequence[str], *, style: str = "standard") -> str:
        """Join items with locale conjunctions."""
        items = [str(item) for item in value]
        return babel_lists.format_list(items, style=style, locale=self.locale)


def create_default_formatters(
    extra: Mapping[str, FormatterBuilder] | None = None,
) -> dict[str, FormatterBuilder]:
    """Return the built-in formatter builders merged with extras.

    Args:
        extra: Additional builders; entries replace built-ins of the same name

    Returns:
        Formatter name -> builder mapping
    """
    builders: dict[str, FormatterBuilder] = {
        "number": NumberFormatter,
        "percent": PercentFormatter,
        "currency": CurrencyFormatter,
        "date": DateFormatter,
        "datetime": DateTimeFormatter,
        "list": ListFormatter,
    }
    builders.update(extra or {})
    return builders


def formatted(name: str, value: Any, /, **options: Any) -> Callable[[Mapping[str, Any]], str]:
    """Create an argument value rendered through a locale formatter.

    Args:
        name: Formatter name (e.g., "number", "currency")
        value: Value to format
        **options: Keyword options for the formatter's format() method

    Returns:
        Callable the renderer invokes with the locale's formatter mapping

    Raises:
        KeyError: At render time, if the locale has no formatter of that name
    """

    def render(formatters: Mapping[str, Any]) -> str:
        return formatters[name].format(value, **options)

    render.__name__ = f"formatted_{name}"
    return render
