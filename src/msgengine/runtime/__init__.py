"""msgengine runtime package.

Provides rendering, plural rules, getters, formatters and the per-locale
message store. Depends on the catalog package for record types.

Python 3.13+.
"""

from .formatters import FormatterBuilder, create_default_formatters, formatted
from .getters import (
    Getter,
    GetterRegistry,
    Reference,
    ReferenceGetter,
    TranslationContext,
    create_default_getters,
)
from .locale import Locale
from .paths import resolve
from .plural_rules import select_plural_category, select_plural_range
from .renderer import MessageRenderer, Translator

__all__ = [
    "FormatterBuilder",
    "Getter",
    "GetterRegistry",
    "Locale",
    "MessageRenderer",
    "Reference",
    "ReferenceGetter",
    "TranslationContext",
    "Translator",
    "create_default_formatters",
    "create_default_getters",
    "formatted",
    "resolve",
    "select_plural_category",
    "select_plural_range",
]
