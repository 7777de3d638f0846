"""Message record and placeholder types.

A catalog key maps to exactly one MessageRecord:

    RawMessage       unprocessed template, extracted on first render
    ExtractedMessage literal text plus ordered placeholder insertion points
    PluralQuery      selects a branch key from a numeric or range argument

Placeholders inside an ExtractedMessage are either a VariablePlaceholder
(dotted path into the render arguments) or a GetterPlaceholder (named
getter plus the data its parser produced at extraction time).

All records are frozen: lazy extraction replaces a record in its Locale,
it never mutates one. Records may therefore be shared between locales.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from msgengine.enums import PluralType

__all__ = [
    "ExtractedMessage",
    "GetterPlaceholder",
    "MessageRecord",
    "Placeholder",
    "PluralQuery",
    "RawMessage",
    "VariablePlaceholder",
]


@dataclass(frozen=True, slots=True)
class VariablePlaceholder:
    """Placeholder resolved from the render arguments.

    Attributes:
        path: Dotted path into the arguments (e.g., "user.name")
        source: Bracketed text as written in the template (e.g., "{ user.name }")
    """

    path: str
    source: str = ""


@dataclass(frozen=True, slots=True)
class GetterPlaceholder:
    """Placeholder produced by a registered getter.

    Attributes:
        name: Registered getter name (e.g., "$t")
        data: Value returned by the getter's parse() at extraction time
        source: Bracketed text as written in the template
    """

    name: str
    data: object = None
    source: str = ""


Placeholder: TypeAlias = VariablePlaceholder | GetterPlaceholder


@dataclass(frozen=True, slots=True)
class RawMessage:
    """Template string awaiting extraction."""

    source: str


@dataclass(frozen=True, slots=True)
class ExtractedMessage:
    """Literal text with placeholder insertion points.

    Offsets refer to positions in ``text`` (the literal with every
    placeholder removed and every escape marker stripped). Rendering
    inserts each placeholder value at its offset in ascending order.

    Attributes:
        text: Literal text
        placeholders: (offset, placeholder) pairs in non-decreasing offset order
    """

    text: str
    placeholders: tuple[tuple[int, Placeholder], ...] = ()

    def __post_init__(self) -> None:
        """Validate offset invariants.

        Raises:
            ValueError: If an offset is out of range or offsets decrease.
        """
        previous = 0
        for offset, _ in self.placeholders:
            if offset < previous or offset > len(self.text):
                msg = f"Placeholder offset {offset} invalid for text of length {len(self.text)}"
                raise ValueError(msg)
            previous = offset

    def reconstruct(self) -> str:
        """Reinsert each placeholder's source text at its offset.

        Reproduces the original template, except that escaped placeholders
        have lost their escape marker.
        """
        parts: list[str] = []
        position = 0
        for offset, placeholder in self.placeholders:
            parts.append(self.text[position:offset])
            parts.append(placeholder.source)
            position = offset
        parts.append(self.text[position:])
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class PluralQuery:
    """Plural selector over one or more plural types.

    Attributes:
        bindings: Plural type -> dotted path of the argument to inspect
    """

    bindings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the bindings mapping."""
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    def select_type(self) -> tuple[PluralType, str] | None:
        """Return the effective (plural type, path) pair.

        Cardinal takes precedence over ordinal when both are bound.

        Returns:
            The chosen plural type and its path, or None if neither is bound
        """
        for plural_type in PluralType:
            path = self.bindings.get(plural_type)
            if path:
                return plural_type, path
        return None


MessageRecord: TypeAlias = RawMessage | ExtractedMessage | PluralQuery
