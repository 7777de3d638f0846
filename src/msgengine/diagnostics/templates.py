"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def circular_translation(key: str, nested_limit: int) -> Diagnostic:
        """Nested translation depth exceeded the configured limit.

        Args:
            key: The key being rendered when the limit was hit
            nested_limit: The configured nesting limit

        Returns:
            Diagnostic for CIRCULAR_TRANSLATION
        """
        msg = f'Potential circular translation, "{key}" exceeded nesting limit ({nested_limit})'
        return Diagnostic(
            code=DiagnosticCode.CIRCULAR_TRANSLATION,
            message=msg,
            hint="Check nested references for a cycle or raise nested_limit",
            key=key,
        )

    @staticmethod
    def locale_not_found(locale_id: str) -> Diagnostic:
        """Locale has not been loaded.

        Args:
            locale_id: The locale identifier that was requested

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        msg = f'A locale with the name of "{locale_id}" does not exist'
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint="Load the locale with load() or load_parsed() before rendering",
            locale_id=locale_id,
        )

    @staticmethod
    def key_not_found(locale_id: str, key: str) -> Diagnostic:
        """Message key missing from a locale.

        Args:
            locale_id: The locale that was searched
            key: The missing key

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f'The "{locale_id}" locale does not contain a message with the key "{key}"'
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Check the key spelling and namespace, or run fallback()",
            locale_id=locale_id,
            key=key,
        )

    @staticmethod
    def plural_input_invalid(path: str, received: object) -> Diagnostic:
        """Plural argument is neither a number nor a two-element range.

        Args:
            path: Dotted path of the plural argument
            received: The value that was found

        Returns:
            Diagnostic for PLURAL_INPUT_INVALID
        """
        msg = f'A number/array value for the "{path}" variable is required'
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INPUT_INVALID,
            message=msg,
            hint=f"Received {type(received).__name__}; pass a number or a [start, end] pair",
        )

    @staticmethod
    def pluralization_failed(locale_id: str, key: str) -> Diagnostic:
        """No plural branch exists for the computed category.

        Args:
            locale_id: The locale being rendered
            key: The branch key that was looked up (e.g. "items.few")

        Returns:
            Diagnostic for PLURALIZATION_FAILED
        """
        msg = (
            f'Pluralisation failed: the "{locale_id}" locale does not contain '
            f'a message with the key "{key}"'
        )
        return Diagnostic(
            code=DiagnosticCode.PLURALIZATION_FAILED,
            message=msg,
            hint="Define a branch for every plural category the locale uses",
            locale_id=locale_id,
            key=key,
        )

    @staticmethod
    def placeholder_value_missing(name: str) -> Diagnostic:
        """Placeholder resolved to no value.

        Args:
            name: Variable path or getter name of the placeholder

        Returns:
            Diagnostic for PLACEHOLDER_VALUE_MISSING
        """
        msg = f'A value for the "{name}" placeholder is required'
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_VALUE_MISSING,
            message=msg,
            hint=f"Pass '{name}' in the arguments mapping",
        )

    @staticmethod
    def getter_not_registered(name: str) -> Diagnostic:
        """Template invokes a getter that is not registered.

        Args:
            name: Getter name used in the template

        Returns:
            Diagnostic for GETTER_NOT_REGISTERED
        """
        msg = f'Getter "{name}" is not registered'
        return Diagnostic(
            code=DiagnosticCode.GETTER_NOT_REGISTERED,
            message=msg,
            hint="Register the getter through the engine's getters mapping",
        )

    @staticmethod
    def catalog_value_invalid(key: str, value: object) -> Diagnostic:
        """Catalog leaf is neither a string nor a nested mapping.

        Args:
            key: Flattened key of the offending entry
            value: The offending value

        Returns:
            Diagnostic for CATALOG_VALUE_INVALID
        """
        msg = f'Catalog entry "{key}" must be a string or a mapping, not {type(value).__name__}'
        return Diagnostic(
            code=DiagnosticCode.CATALOG_VALUE_INVALID,
            message=msg,
            key=key,
        )

    @staticmethod
    def plural_query_invalid(key: str, query: str) -> Diagnostic:
        """Plural query binds no known plural type.

        Args:
            key: Base key of the plural query
            query: The raw query suffix

        Returns:
            Diagnostic for PLURAL_QUERY_INVALID
        """
        msg = f'Plural query "{query}" on "{key}" binds neither "cardinal" nor "ordinal"'
        return Diagnostic(
            code=DiagnosticCode.PLURAL_QUERY_INVALID,
            message=msg,
            hint='Use "key#path" or "key?cardinal=path" / "key?ordinal=path"',
            key=key,
        )

    @staticmethod
    def default_locale_missing() -> Diagnostic:
        """Fallback requested without a default locale.

        Returns:
            Diagnostic for DEFAULT_LOCALE_MISSING
        """
        msg = "No default locale is set"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_LOCALE_MISSING,
            message=msg,
            hint="Pass default_locale when constructing the engine",
        )

    @staticmethod
    def message_not_extracted(locale_id: str, key: str) -> Diagnostic:
        """Record reached substitution without being extracted.

        Args:
            locale_id: The locale being rendered
            key: The key whose record could not be rendered

        Returns:
            Diagnostic for MESSAGE_NOT_EXTRACTED
        """
        msg = f'Message "{key}" in the "{locale_id}" locale has not been extracted'
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_EXTRACTED,
            message=msg,
            hint="Load catalogs through MessageEngine or pass pre-extracted records",
            locale_id=locale_id,
            key=key,
        )

    @staticmethod
    def placeholder_invalid(locale_id: str, key: str, placeholder: object) -> Diagnostic:
        """Extracted record holds an object that is not a placeholder descriptor.

        Args:
            locale_id: The locale being rendered
            key: The key whose record holds the object
            placeholder: The offending object

        Returns:
            Diagnostic for PLACEHOLDER_INVALID
        """
        msg = (
            f'Message "{key}" in the "{locale_id}" locale holds an unsupported placeholder '
            f"of type {type(placeholder).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_INVALID,
            message=msg,
            hint="Use VariablePlaceholder or GetterPlaceholder in pre-extracted records",
            locale_id=locale_id,
            key=key,
        )
