"""Engine configuration for MessageRenderer and MessageEngine.

Provides a single frozen dataclass that encapsulates the scalar engine
settings. Formatter builders and getters are passed separately because
they are mappings of callables, not settings.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from msgengine.constants import DEFAULT_NESTED_LIMIT, NAMESPACE_SEPARATOR, PLACEHOLDER_PATTERN

__all__ = ["EngineConfig"]


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable configuration for message rendering.

    All fields have sensible defaults; ``EngineConfig()`` is usable as is.

    Attributes:
        default_locale: Locale used as secondary formatter locale and as the
            final link of every fallback chain (default: None).
        nested_limit: Maximum nested translation depth before a render is
            treated as circular (default: 3).
        defer_extraction: Store templates raw and extract them on first
            render (default: True). When False, templates are extracted at
            load time and renders never mutate locale state.
        placeholder_pattern: Compiled placeholder grammar. Must define the
            named groups ``variable``, ``getter`` and ``args``.
        namespace_separator: Joins a load() namespace to top-level keys
            (default: ":").

    Example:
        >>> config = EngineConfig(default_locale="en", nested_limit=5)
        >>> config.nested_limit
        5
    """

    default_locale: str | None = None
    nested_limit: int = DEFAULT_NESTED_LIMIT
    defer_extraction: bool = True
    placeholder_pattern: re.Pattern[str] = PLACEHOLDER_PATTERN
    namespace_separator: str = NAMESPACE_SEPARATOR

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If nested_limit is negative, default_locale or
                namespace_separator is empty, or placeholder_pattern lacks
                one of the required named groups.
        """
        if self.nested_limit < 0:
            msg = "nested_limit must be non-negative"
            raise ValueError(msg)
        if self.default_locale is not None and not self.default_locale:
            msg = "default_locale cannot be empty"
            raise ValueError(msg)
        if not self.namespace_separator:
            msg = "namespace_separator cannot be empty"
            raise ValueError(msg)
        missing = {"variable", "getter", "args"} - set(self.placeholder_pattern.groupindex)
        if missing:
            msg = f"placeholder_pattern is missing named groups: {sorted(missing)}"
            raise ValueError(msg)
