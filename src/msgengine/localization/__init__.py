"""Localization package: fallback chains and missing-key back-filling.

Python 3.13+.
"""

from .fallback import FallbackEntry, FallbackResolver, FallbackResult

__all__ = [
    "FallbackEntry",
    "FallbackResolver",
    "FallbackResult",
]
