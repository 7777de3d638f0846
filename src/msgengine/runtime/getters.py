"""Getter registry: named value producers usable inside placeholders.

A getter has two halves:
    - parse(args): runs once at extraction time on the raw argument string
      of ``{ name(args) }`` and returns getter-specific data
    - get(locale, context, data): runs at render time and returns the
      placeholder value, or None when no value can be produced

Getters may re-enter the renderer. They must pass ``context.depth + 1``
so the nesting limit can stop reference cycles.

The built-in ``$t`` getter renders another key of the same locale:

    greeting = Hello, { $t(user.title, name=user.first_name) }!

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import parse_qsl

from msgengine.constants import REFERENCE_GETTER
from msgengine.diagnostics import CatalogError
from msgengine.runtime.paths import resolve

if TYPE_CHECKING:
    from msgengine.runtime.locale import Locale

__all__ = [
    "Getter",
    "GetterRegistry",
    "Reference",
    "ReferenceGetter",
    "TranslationContext",
    "create_default_getters",
]


@dataclass(frozen=True, slots=True)
class TranslationContext:
    """Render state handed to a getter.

    Iterable as the 4-tuple ``(locale_id, key, args, depth)``.

    Attributes:
        locale_id: Locale being rendered
        key: Key of the message containing the placeholder
        args: Arguments of the current render
        depth: Current nesting depth (0 for a top-level render)
    """

    locale_id: str
    key: str
    args: Mapping[str, Any]
    depth: int = 0

    def __iter__(self) -> Iterator[Any]:
        """Unpack as (locale_id, key, args, depth)."""
        return iter((self.locale_id, self.key, self.args, self.depth))


class Getter(Protocol):
    """Protocol for placeholder getters."""

    def parse(self, args: str | None, /) -> object:
        """Parse the raw argument string at extraction time."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def get(self, locale: Locale, context: TranslationContext, data: Any, /) -> object:
        """Produce the placeholder value at render time; None means missing."""
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class Reference:
    """Parsed arguments of the ``$t`` getter.

    Attributes:
        key: Key to render
        options: Argument name -> dotted path resolved against the current args
    """

    key: str
    options: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the options mapping."""
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


class ReferenceGetter:
    """Built-in nested translation reference getter.

    Argument syntax: ``key[,name1=path1&name2=path2...]``. Whitespace is
    ignored. Each option overrides argument ``name`` of the nested render
    with the value found at ``path`` in the current arguments.

    Example:
        >>> getter = ReferenceGetter()
        >>> getter.parse("cart.summary, n=cart.size")
        Reference(key='cart.summary', options=mappingproxy({'n': 'cart.size'}))
    """

    __slots__ = ()

    def parse(self, args: str | None, /) -> Reference:
        """Split ``key,options`` and decode the options query string.

        Raises:
            CatalogError: If no key is given
        """
        compact = "".join((args or "").split())
        key, _, options = compact.partition(",")
        if not key:
            msg = f"Getter {REFERENCE_GETTER} requires a message key"
            raise CatalogError(msg)
        if "," in options:
            options = options.split(",", 1)[0]
        return Reference(key=key, options=dict(parse_qsl(options, keep_blank_values=True)))

    def get(self, locale: Locale, context: TranslationContext, data: Reference, /) -> str:
        """Render the referenced key one nesting level deeper."""
        args = dict(context.args)
        args.update({name: resolve(context.args, path) for name, path in data.options.items()})
        return locale.engine.t(locale.locale_id, data.key, args, context.depth + 1)


class GetterRegistry:
    """Manages named getters.

    Supports dict-like introspection:
        - list_getters(): List all registered getter names
        - get(name): Look up a getter
        - __iter__ / __len__ / __contains__

    Example:
        >>> registry = GetterRegistry()
        >>> registry.register("$t", ReferenceGetter())
        >>> "$t" in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_getters",)

    def __init__(self, getters: Mapping[str, Getter] | None = None) -> None:
        """Initialize registry, optionally pre-populated."""
        self._getters: dict[str, Getter] = dict(getters or {})

    def register(self, name: str, getter: Getter) -> None:
        """Register a getter, replacing any getter of the same name.

        Args:
            name: Name used in templates (e.g., "$t", "upper")
            getter: Object implementing the Getter protocol

        Raises:
            TypeError: If getter lacks callable parse/get members
        """
        if not callable(getattr(getter, "parse", None)) or not callable(
            getattr(getter, "get", None)
        ):
            msg = f"Getter '{name}' must provide callable parse() and get()"
            raise TypeError(msg)
        self._getters[name] = getter

    def get(self, name: str) -> Getter | None:
        """Return the getter registered under name, or None."""
        return self._getters.get(name)

    def list_getters(self) -> list[str]:
        """List all registered getter names."""
        return list(self._getters)

    def copy(self) -> GetterRegistry:
        """Create a shallow copy of this registry.

        Getter objects are shared; registrations on the copy do not
        affect the original.
        """
        return GetterRegistry(self._getters)

    def __iter__(self) -> Iterator[str]:
        """Iterate over getter names."""
        return iter(self._getters)

    def __len__(self) -> int:
        """Count of registered getters."""
        return len(self._getters)

    def __contains__(self, name: object) -> bool:
        """Check if a getter is registered using 'in' operator."""
        return name in self._getters

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"GetterRegistry(getters={len(self._getters)})"


def create_default_getters(extra: Mapping[str, Getter] | None = None) -> GetterRegistry:
    """Create a registry holding the built-in ``$t`` getter plus extras.

    Args:
        extra: Additional getters; an entry named "$t" replaces the built-in

    Returns:
        New GetterRegistry
    """
    registry = GetterRegistry()
    registry.register(REFERENCE_GETTER, ReferenceGetter())
    for name, getter in (extra or {}).items():
        registry.register(name, getter)
    return registry
