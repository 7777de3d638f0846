"""Catalog package: message records, catalog parsing and placeholder extraction.

Python 3.13+.
"""

from .extractor import Extractor
from .parser import parse_catalog, split_plural_suffix
from .records import (
    ExtractedMessage,
    GetterPlaceholder,
    MessageRecord,
    Placeholder,
    PluralQuery,
    RawMessage,
    VariablePlaceholder,
)

__all__ = [
    "ExtractedMessage",
    "Extractor",
    "GetterPlaceholder",
    "MessageRecord",
    "Placeholder",
    "PluralQuery",
    "RawMessage",
    "VariablePlaceholder",
    "parse_catalog",
    "split_plural_suffix",
]
