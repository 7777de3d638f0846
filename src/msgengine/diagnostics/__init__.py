"""Diagnostic system for msgengine errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
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
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "CircularTranslationError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidPluralInputError",
    "MessageEngineError",
    "MissingKeyError",
    "MissingPlaceholderValueError",
    "PluralizationFailedError",
    "UnknownLocaleError",
    "UnregisteredGetterError",
]
