"""msgengine exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.
Every failure aborts the render: there is no partial output and no retry.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageEngineError(Exception):
    """Base exception for all msgengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageEngineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(MessageEngineError):
    """Engine is not configured for the requested operation.

    Raised when fallback() runs without a default locale, or when a record
    reaches substitution without having been extracted.
    """


class CatalogError(MessageEngineError):
    """Catalog tree contains an entry that cannot be parsed."""


class UnknownLocaleError(MessageEngineError, LookupError):
    """Requested locale has not been loaded."""


class MissingKeyError(MessageEngineError, LookupError):
    """Requested key is not present in the locale."""


class UnregisteredGetterError(CatalogError):
    """Template invokes a getter name that is not registered.

    Raised at extraction time, never at render time.
    """


class InvalidPluralInputError(MessageEngineError, TypeError):
    """Plural argument is not numeric and not a two-element range."""


class PluralizationFailedError(MissingKeyError):
    """Locale lacks the branch for the computed plural category."""


class MissingPlaceholderValueError(MessageEngineError):
    """Placeholder resolved to no value.

    An absent variable is an error, never an empty substitution.
    """


class CircularTranslationError(MessageEngineError, RecursionError):
    """Nested translation depth exceeded the configured limit.

    Example:
        a = { $t(b) }
        b = { $t(a) }   <- a -> b -> a -> ... aborted at nested_limit
    """
