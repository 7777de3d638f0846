"""Shared constants for msgengine.

Centralized configuration constants used across the catalog and runtime
packages. Placing them here avoids circular imports and provides a single
source of truth.

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Recursion limits
    "DEFAULT_NESTED_LIMIT",
    # Catalog syntax
    "NAMESPACE_SEPARATOR",
    "CARDINAL_MARKER",
    "QUERY_MARKER",
    "LITERAL_BRANCH_PREFIX",
    "ESCAPE_MARKER",
    "PLACEHOLDER_PATTERN",
    # Getters
    "REFERENCE_GETTER",
    # Locale cache
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# RECURSION LIMITS
# ============================================================================

# Maximum number of getter-triggered re-entrant renders in one call chain.
# A reference chain deeper than this is treated as circular.
DEFAULT_NESTED_LIMIT: int = 3

# ============================================================================
# CATALOG SYNTAX
# ============================================================================

# Joins a namespace and a top-level catalog key: "common:greeting".
NAMESPACE_SEPARATOR: str = ":"

# Key suffix selecting a cardinal plural over a dotted path: "items#count".
CARDINAL_MARKER: str = "#"

# Key suffix carrying explicit plural bindings: "place?ordinal=position".
QUERY_MARKER: str = "?"

# Plural branch matching an exact value: "items.=0".
LITERAL_BRANCH_PREFIX: str = "="

# Escaped placeholders start with this character and are kept as literal text.
ESCAPE_MARKER: str = "\\"

# Placeholder grammar:
#   { name.path }          variable
#   { getter(arg-string) } getter invocation, arguments optional
#   \{ ... }               escaped, kept literally without the backslash
PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(
    r"\\?\{\s*(?:"
    r"(?P<variable>[-a-z0-9._]+)"
    r"|(?P<getter>[$a-z0-9_]+)(?:\((?P<args>[-a-z0-9()!@:%_+.~#?&/= ,]*)\))?"
    r")\s*\}",
    re.IGNORECASE,
)

# ============================================================================
# GETTERS
# ============================================================================

# Name of the built-in nested translation reference getter: { $t(other.key) }
REFERENCE_GETTER: str = "$t"

# ============================================================================
# LOCALE CACHE
# ============================================================================

# Maximum cached Babel Locale objects.
MAX_LOCALE_CACHE_SIZE: int = 128
