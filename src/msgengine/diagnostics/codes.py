"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing locales, keys, values)
        2000-2999: Rendering errors (plural selection, recursion)
        3000-3999: Catalog errors (parsing, extraction)
        4000-4999: Configuration errors
    """

    # Reference errors (1000-1999)
    LOCALE_NOT_FOUND = 1001
    KEY_NOT_FOUND = 1002
    PLACEHOLDER_VALUE_MISSING = 1003

    # Rendering errors (2000-2999)
    CIRCULAR_TRANSLATION = 2001
    PLURAL_INPUT_INVALID = 2002
    PLURALIZATION_FAILED = 2003

    # Catalog errors (3000-3999)
    GETTER_NOT_REGISTERED = 3001
    CATALOG_VALUE_INVALID = 3002
    PLURAL_QUERY_INVALID = 3003

    # Configuration errors (4000-4999)
    DEFAULT_LOCALE_MISSING = 4001
    MESSAGE_NOT_EXTRACTED = 4002
    PLACEHOLDER_INVALID = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_id: Locale being rendered or loaded when the error occurred
        key: Message key being rendered when the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_id: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[KEY_NOT_FOUND]: The "en" locale does not contain a message with the key "x"
              --> en: x
              = help: Check that the key is defined in the loaded catalog

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.locale_id is not None or self.key is not None:
            location = ": ".join(
                _escape(part) for part in (self.locale_id, self.key) if part is not None
            )
            lines.append(f"  --> {location}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so one diagnostic stays one log record."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
