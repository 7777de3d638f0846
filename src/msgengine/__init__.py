"""msgengine - message templating engine for localized applications.

Stores per-locale message catalogs, renders them by substituting
placeholders and resolving CLDR plural forms, and back-fills missing
translations from fallback locales.

Public API:
    MessageEngine - Catalog loading, rendering and fallback
    MessageRenderer - Rendering of pre-extracted records only
    EngineConfig - Immutable engine configuration
    formatted - Build an argument rendered through a locale formatter

Exceptions:
    MessageEngineError - Base exception class
    ConfigurationError, CatalogError, UnknownLocaleError, MissingKeyError,
    UnregisteredGetterError, InvalidPluralInputError,
    PluralizationFailedError, MissingPlaceholderValueError,
    CircularTranslationError

Submodules:
    msgengine.catalog - Record types, catalog parser, placeholder extractor
    msgengine.runtime - Renderer, locales, getters, formatters, plural rules
    msgengine.localization - Fallback chain resolution
    msgengine.diagnostics - Error types and structured diagnostics
"""

from .config import EngineConfig
from .diagnostics import (
    CatalogError,
    CircularTranslationError,
    ConfigurationError,
    InvalidPluralInputError,
    MessageEngineError,
    MissingKeyError,
    MissingPlaceholderValueError,
    PluralizationFailedError,
    UnknownLocaleError,
    UnregisteredGetterError,
)
from .engine import MessageEngine
from .runtime import MessageRenderer, formatted

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("msgengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "CircularTranslationError",
    "ConfigurationError",
    "EngineConfig",
    "InvalidPluralInputError",
    "MessageEngine",
    "MessageEngineError",
    "MessageRenderer",
    "MissingKeyError",
    "MissingPlaceholderValueError",
    "PluralizationFailedError",
    "UnknownLocaleError",
    "UnregisteredGetterError",
    "__version__",
    "formatted",
]
