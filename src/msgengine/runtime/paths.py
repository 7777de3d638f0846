"""Dotted-path lookup shared by variable and plural argument resolution.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["resolve"]


def resolve(obj: Any, path: str) -> Any:
    """Walk ``path`` ("a.b.0.c") through nested mappings, sequences and objects.

    Each segment is looked up as a mapping key, then as a sequence index
    (for integer segments), then as an attribute. A missing segment at any
    level yields None rather than raising, so callers decide whether an
    absent value is an error.

    Args:
        obj: Root object (typically the render arguments)
        path: Dotted path

    Returns:
        The value found, or None

    Examples:
        >>> resolve({"user": {"name": "Ada"}}, "user.name")
        'Ada'
        >>> resolve({"items": ["a", "b"]}, "items.1")
        'b'
        >>> resolve({}, "missing.path") is None
        True
    """
    current = obj
    for segment in path.split("."):
        if current is None:
            return None
        current = _step(current, segment)
    return current


def _step(current: Any, segment: str) -> Any:
    """Resolve a single path segment."""
    if isinstance(current, Mapping):
        return current.get(segment)
    if isinstance(current, Sequence) and not isinstance(current, str):
        if not segment.isdigit():
            return None
        try:
            return current[int(segment)]
        except IndexError:
            return None
    # Private and dunder attributes are never reachable from templates
    if segment.startswith("_"):
        return None
    return getattr(current, segment, None)
