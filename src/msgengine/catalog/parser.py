"""Catalog parser: nested key/value tree -> ordered (key, MessageRecord) pairs.

Catalog shape:

    {
        "greeting": "Hello, { name }!",
        "cart": {
            "title": "Your cart",
            "items#count": {                 # cardinal plural over args["count"]
                "=0": "Your cart is empty",
                "one": "{ count } item",
                "other": "{ count } items",
            },
        },
        "place?ordinal=position": {...},     # explicit plural bindings
    }

flattens to "greeting", "cart.title", "cart.items" (a PluralQuery),
"cart.items.=0", "cart.items.one", ... in source order.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeAlias
from urllib.parse import parse_qsl

from msgengine.catalog.records import ExtractedMessage, MessageRecord, PluralQuery, RawMessage
from msgengine.constants import CARDINAL_MARKER, NAMESPACE_SEPARATOR, QUERY_MARKER
from msgengine.diagnostics import CatalogError, ErrorTemplate
from msgengine.enums import PluralType

__all__ = ["parse_catalog", "split_plural_suffix"]

CatalogTree: TypeAlias = Mapping[str, "str | CatalogTree"]


def split_plural_suffix(key: str) -> tuple[str, dict[str, str] | None]:
    """Split a catalog key into base key and plural bindings.

    ``#`` takes precedence over ``?``.

    Args:
        key: Catalog key as written

    Returns:
        (base key, bindings) where bindings is None for plain keys

    Examples:
        >>> split_plural_suffix("items#cart.count")
        ('items', {'cardinal': 'cart.count'})
        >>> split_plural_suffix("place?ordinal=position")
        ('place', {'ordinal': 'position'})
        >>> split_plural_suffix("title")
        ('title', None)
    """
    base, marker, path = key.partition(CARDINAL_MARKER)
    if marker:
        return base, {PluralType.CARDINAL.value: path}
    base, marker, query = key.partition(QUERY_MARKER)
    if marker:
        return base, dict(parse_qsl(query, keep_blank_values=True))
    return key, None


def parse_catalog(
    tree: CatalogTree,
    namespace: str | None = None,
    *,
    extract: Callable[[str], ExtractedMessage] | None = None,
    separator: str = NAMESPACE_SEPARATOR,
) -> list[tuple[str, MessageRecord]]:
    """Flatten a catalog tree into ordered (key, record) pairs.

    Args:
        tree: Nested mapping of keys to template strings or sub-trees
        namespace: Prefix for every top-level key ("ns" -> "ns:key")
        extract: Extract templates immediately with this callable;
            None stores them as RawMessage for lazy extraction
        separator: Joins namespace and top-level key

    Returns:
        (key, record) pairs in source order

    Raises:
        CatalogError: If a value is neither a string nor a mapping, or a
            plural suffix binds no known plural type
        UnregisteredGetterError: If extracting eagerly and a template uses
            an unknown getter
    """
    parsed: list[tuple[str, MessageRecord]] = []
    for raw_key, value in tree.items():
        base, bindings = split_plural_suffix(raw_key)
        key = f"{namespace}{separator}{base}" if namespace else base

        if isinstance(value, str):
            parsed.append((key, RawMessage(value) if extract is None else extract(value)))
        elif isinstance(value, Mapping):
            if bindings is not None:
                parsed.append((key, _plural_query(key, raw_key, bindings)))
            for nested_key, record in parse_catalog(value, extract=extract, separator=separator):
                parsed.append((f"{key}.{nested_key}", record))
        else:
            raise CatalogError(ErrorTemplate.catalog_value_invalid(key, value))
    return parsed


def _plural_query(key: str, raw_key: str, bindings: Mapping[str, str]) -> PluralQuery:
    """Build a PluralQuery keeping only known, non-empty bindings."""
    known = {
        plural_type.value: bindings[plural_type.value]
        for plural_type in PluralType
        if bindings.get(plural_type.value)
    }
    if not known:
        raise CatalogError(ErrorTemplate.plural_query_invalid(key, raw_key))
    return PluralQuery(known)
