"""Hypothesis strategies for catalog and template property-based testing.

Provides reusable strategies for generating test data:
- Literal template text (no braces, no escape marker)
- Variable and getter placeholders in their bracketed source form
- Escaped placeholders
- Whole templates mixing all of the above
- Nested catalog trees

Event-Emitting Strategies (HypoFuzz-Optimized):
- templates: Emits template_parts=N, template_escapes=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_PATH_CHARS = string.ascii_lowercase + string.digits + "_-"

# Literal text never contains braces or the escape marker.
_LITERAL_ALPHABET = st.characters(
    exclude_characters="{}\\",
    exclude_categories=("Cs",),
)


def literal_text(max_size: int = 20) -> st.SearchStrategy[str]:
    """Generate placeholder-free literal text."""
    return st.text(alphabet=_LITERAL_ALPHABET, max_size=max_size)


@st.composite
def variable_paths(draw: DrawFn) -> str:
    """Generate dotted variable paths (e.g., "user.name", "items.0")."""
    segments = draw(
        st.lists(st.text(alphabet=_PATH_CHARS, min_size=1, max_size=8), min_size=1, max_size=3)
    )
    return ".".join(segments)


@st.composite
def variable_placeholders(draw: DrawFn) -> str:
    """Generate a variable placeholder in source form: "{ path }"."""
    path = draw(variable_paths())
    left = draw(st.sampled_from(["", " "]))
    right = draw(st.sampled_from(["", " "]))
    return "{" + left + path + right + "}"


@st.composite
def reference_placeholders(draw: DrawFn) -> str:
    """Generate a ``$t`` getter placeholder in source form."""
    key = draw(variable_paths())
    if draw(st.booleans()):
        option = draw(st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=6))
        path = draw(variable_paths())
        return "{ $t(" + key + "," + option + "=" + path + ") }"
    return "{ $t(" + key + ") }"


@st.composite
def escaped_placeholders(draw: DrawFn) -> str:
    """Generate an escaped placeholder: "\\{ path }"."""
    return "\\" + draw(variable_placeholders())


@st.composite
def templates(draw: DrawFn) -> str:
    """Generate templates mixing literals, placeholders and escapes.

    Events emitted:
    - template_parts=N
    - template_escapes=N
    """
    parts = draw(
        st.lists(
            st.one_of(
                literal_text(),
                variable_placeholders(),
                reference_placeholders(),
                escaped_placeholders(),
            ),
            max_size=8,
        )
    )
    event(f"template_parts={len(parts)}")
    escapes = sum(part.startswith("\\") for part in parts)
    event(f"template_escapes={escapes}")
    return "".join(parts)


def placeholder_free_templates() -> st.SearchStrategy[str]:
    """Generate templates with literals and escapes but no live placeholders."""
    return st.lists(st.one_of(literal_text(), escaped_placeholders()), max_size=6).map("".join)


@st.composite
def catalog_keys(draw: DrawFn) -> str:
    """Generate plain catalog keys (no plural suffix, no dots)."""
    return draw(st.text(alphabet=string.ascii_lowercase + "_", min_size=1, max_size=10))


def catalog_trees(max_leaves: int = 10) -> st.SearchStrategy[dict[str, object]]:
    """Generate nested catalog trees with literal-only string leaves."""
    return st.recursive(
        st.dictionaries(catalog_keys(), literal_text(), min_size=1, max_size=4),
        lambda children: st.dictionaries(
            catalog_keys(), st.one_of(literal_text(), children), min_size=1, max_size=3
        ),
        max_leaves=max_leaves,
    )
