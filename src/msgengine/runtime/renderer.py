"""MessageRenderer - render pre-parsed message records.

The renderer owns the locale stores and implements ``t()``:

    1. enforce the nesting limit
    2. look up the locale and the key
    3. resolve plural queries to a branch record
    4. make sure the record is extracted (lazily, when an extractor exists)
    5. substitute placeholders and splice values into the literal text

MessageRenderer itself cannot extract templates: records must arrive
already extracted (e.g. produced by a build step). MessageEngine adds
catalog parsing, lazy extraction and fallback resolution on top.

Python 3.13+. Indirect dependency: Babel (via plural_rules and formatters).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Any

from msgengine.catalog.records import (
    ExtractedMessage,
    GetterPlaceholder,
    MessageRecord,
    PluralQuery,
    RawMessage,
    VariablePlaceholder,
)
from msgengine.config import EngineConfig
from msgengine.constants import LITERAL_BRANCH_PREFIX
from msgengine.diagnostics import (
    CircularTranslationError,
    ConfigurationError,
    ErrorTemplate,
    InvalidPluralInputError,
    MissingKeyError,
    MissingPlaceholderValueError,
    PluralizationFailedError,
    UnknownLocaleError,
    UnregisteredGetterError,
)
from msgengine.runtime.formatters import FormatterBuilder, create_default_formatters
from msgengine.runtime.getters import (
    Getter,
    GetterRegistry,
    TranslationContext,
    create_default_getters,
)
from msgengine.runtime.locale import Locale
from msgengine.runtime.paths import resolve
from msgengine.runtime.plural_rules import Number, select_plural_category, select_plural_range

__all__ = ["MessageRenderer", "Translator"]

logger = logging.getLogger(__name__)


class Translator:
    """Render function bound to one locale id.

    Example:
        >>> t = engine.create_translator("en")
        >>> t("hello", {"name": "Ada"})
        'Hello, Ada!'
        >>> t.locale_id
        'en'
    """

    __slots__ = ("_engine", "locale", "locale_id")

    def __init__(self, engine: MessageRenderer, locale_id: str) -> None:
        """Bind to engine and locale id; locale is None if not loaded yet."""
        self._engine = engine
        self.locale_id = locale_id
        self.locale: Locale | None = engine.get_locale(locale_id)

    def __call__(self, key: str, args: Mapping[str, Any] | None = None) -> str:
        """Render key in the bound locale."""
        return self._engine.t(self.locale_id, key, args)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Translator(locale_id={self.locale_id!r})"


class MessageRenderer:
    """Multi-locale store and renderer for extracted message records.

    Thread Safety:
        Not thread-safe. All state is long-lived and mutated in place by
        loading, lazy extraction and fallback. Finish loading (and
        fallback) before sharing the engine across threads.

    Example:
        >>> from msgengine.catalog.records import ExtractedMessage, VariablePlaceholder
        >>> renderer = MessageRenderer()
        >>> renderer.load_parsed("en", [
        ...     ("hello", ExtractedMessage("Hello, !", ((7, VariablePlaceholder("name")),))),
        ... ])
        Locale(locale_id='en', messages=1)
        >>> renderer.t("en", "hello", {"name": "Ada"})
        'Hello, Ada!'
    """

    __slots__ = ("_config", "_formatters", "_getters", "_locales")

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        formatters: Mapping[str, FormatterBuilder] | None = None,
        getters: Mapping[str, Getter] | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Engine configuration (default: EngineConfig())
            formatters: Extra formatter builders merged over the built-ins
            getters: Extra getters merged over the built-in "$t" getter
            **overrides: EngineConfig fields overriding ``config``
                (e.g., ``default_locale="en"``, ``nested_limit=5``)

        Raises:
            ValueError: If the resulting configuration is invalid
            TypeError: If an override names an unknown field or a getter is malformed
        """
        base = config or EngineConfig()
        self._config = base if not overrides else _replace_config(base, overrides)
        self._formatters = create_default_formatters(formatters)
        self._getters: GetterRegistry = create_default_getters(getters)
        self._locales: dict[str, Locale] = {}

        logger.info(
            "%s initialized (default_locale=%s, nested_limit=%d, getters=%s)",
            type(self).__name__,
            self._config.default_locale,
            self._config.nested_limit,
            ", ".join(self._getters),
        )

    @property
    def config(self) -> EngineConfig:
        """Engine configuration (read-only)."""
        return self._config

    @property
    def default_locale(self) -> str | None:
        """Default locale id, if configured."""
        return self._config.default_locale

    @property
    def nested_limit(self) -> int:
        """Maximum nested translation depth."""
        return self._config.nested_limit

    @property
    def getters(self) -> GetterRegistry:
        """Registered getters."""
        return self._getters

    @property
    def locale_ids(self) -> tuple[str, ...]:
        """Loaded locale ids in load order."""
        return tuple(self._locales)

    def has_locale(self, locale_id: str) -> bool:
        """Check whether a locale has been loaded."""
        return locale_id in self._locales

    def get_locale(self, locale_id: str) -> Locale | None:
        """Return the loaded locale, or None."""
        return self._locales.get(locale_id)

    def load_parsed(
        self,
        locale_id: str,
        messages: Iterable[tuple[str, MessageRecord]],
    ) -> Locale:
        """Register a locale from (key, record) pairs.

        Replaces any locale previously loaded under the same id.

        Args:
            locale_id: Locale identifier
            messages: Ordered (key, record) pairs

        Returns:
            The new Locale
        """
        locale = Locale(self, locale_id, messages, self._formatters)
        self._locales[locale_id] = locale
        logger.info("Loaded locale '%s' with %d message(s)", locale_id, len(locale))
        return locale

    def create_translator(self, locale_id: str) -> Translator:
        """Return a render function bound to locale_id."""
        return Translator(self, locale_id)

    @staticmethod
    def resolve(obj: Any, path: str) -> Any:
        """Dotted-path lookup used for variables and plural arguments."""
        return resolve(obj, path)

    def t(
        self,
        locale_id: str,
        key: str,
        args: Mapping[str, Any] | None = None,
        nested: int = 0,
    ) -> str:
        """Render a message.

        Args:
            locale_id: Locale to render in
            key: Message key
            args: Placeholder arguments (default: empty)
            nested: Nesting depth; getters pass ``depth + 1`` when re-entering

        Returns:
            Rendered string

        Raises:
            CircularTranslationError: If nested exceeds the nesting limit
            UnknownLocaleError: If the locale is not loaded
            MissingKeyError: If the key is not in the locale
            InvalidPluralInputError: If a plural argument is not a number or range
            PluralizationFailedError: If the plural branch is missing
            ConfigurationError: If the record was never extracted
            MissingPlaceholderValueError: If a placeholder has no value
        """
        if nested > self._config.nested_limit:
            raise CircularTranslationError(
                ErrorTemplate.circular_translation(key, self._config.nested_limit)
            )

        locale = self._locales.get(locale_id)
        if locale is None:
            raise UnknownLocaleError(ErrorTemplate.locale_not_found(locale_id))
        if key not in locale:
            raise MissingKeyError(ErrorTemplate.key_not_found(locale_id, key))

        args = {} if args is None else args
        message = locale[key]
        if isinstance(message, PluralQuery):
            key = self._select_branch(locale, key, message, args)
            message = locale[key]

        match message:
            case ExtractedMessage():
                extracted = message
            case RawMessage():
                extracted = self._extract_lazily(locale, key, message)
            case _:
                raise ConfigurationError(ErrorTemplate.message_not_extracted(locale_id, key))

        return self._fill(locale, key, extracted, args, nested)

    def _extract_lazily(self, locale: Locale, key: str, message: RawMessage) -> ExtractedMessage:
        """Extract a raw record on first render.

        The base renderer has no extractor, so raw records are a
        configuration error here. MessageEngine overrides this.
        """
        raise ConfigurationError(ErrorTemplate.message_not_extracted(locale.locale_id, key))

    def _select_branch(
        self,
        locale: Locale,
        key: str,
        query: PluralQuery,
        args: Mapping[str, Any],
    ) -> str:
        """Pick the branch key of a plural query."""
        selected = query.select_type()
        if selected is None:
            raise ConfigurationError(ErrorTemplate.message_not_extracted(locale.locale_id, key))
        plural_type, path = selected

        value = resolve(args, path)
        numbers = _plural_input(value)
        if numbers is None:
            raise InvalidPluralInputError(ErrorTemplate.plural_input_invalid(path, value))

        literal = f"{key}.{LITERAL_BRANCH_PREFIX}{_literal_form(value, numbers)}"
        if literal in locale:
            return literal

        if len(numbers) == 2:
            category = select_plural_range(numbers[0], numbers[1], locale.locale_id, plural_type)
        else:
            category = select_plural_category(numbers[0], locale.locale_id, plural_type)

        branch = f"{key}.{category}"
        if branch not in locale:
            raise PluralizationFailedError(
                ErrorTemplate.pluralization_failed(locale.locale_id, branch)
            )
        return branch

    def _fill(
        self,
        locale: Locale,
        key: str,
        extracted: ExtractedMessage,
        args: Mapping[str, Any],
        nested: int,
    ) -> str:
        """Substitute placeholders and splice them into the literal text."""
        if not extracted.placeholders:
            return extracted.text

        text = extracted.text
        parts: list[str] = []
        position = 0
        for offset, placeholder in extracted.placeholders:
            match placeholder:
                case VariablePlaceholder(path=path):
                    name = path
                    value = _variable_value(resolve(args, path), locale)
                case GetterPlaceholder(name=name, data=data):
                    context = TranslationContext(locale.locale_id, key, args, nested)
                    getter = self._getters.get(name)
                    if getter is None:
                        raise UnregisteredGetterError(ErrorTemplate.getter_not_registered(name))
                    value = getter.get(locale, context, data)
                case _:
                    raise ConfigurationError(
                        ErrorTemplate.placeholder_invalid(locale.locale_id, key, placeholder)
                    )

            if value is None:
                raise MissingPlaceholderValueError(ErrorTemplate.placeholder_value_missing(name))

            parts.append(text[position:offset])
            parts.append(_to_text(value))
            position = offset

        parts.append(text[position:])
        return "".join(parts)


def _variable_value(resolved: Any, locale: Locale) -> str | None:
    """Convert a resolved argument to its substitution string."""
    if resolved is None:
        return None
    if callable(resolved):
        result = resolved(locale.formatters)
        return None if result is None else _to_text(result)
    return _to_text(resolved)


def _to_text(value: Any) -> str:
    """Stringify a substitution value; booleans render as "true"/"false"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def _to_number(value: Any) -> Number | None:
    """Coerce a scalar plural argument to a number, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
        return number if number.is_finite() else None
    return None


def _plural_input(value: Any) -> tuple[Number, ...] | None:
    """Validate a plural argument: one number, or a [start, end] range."""
    if isinstance(value, Sequence) and not isinstance(value, str):
        if len(value) != 2:
            return None
        start, end = _to_number(value[0]), _to_number(value[1])
        if start is None or end is None:
            return None
        return (start, end)

    number = _to_number(value)
    return None if number is None else (number,)


def _literal_form(value: Any, numbers: tuple[Number, ...]) -> str:
    """Render a plural argument as used in ``key.=<value>`` branch names.

    Integral numbers drop their fractional part (1.0 -> "1"); ranges join
    with a comma ("1,5"); numeric strings are used as written.
    """
    if isinstance(value, str):
        return value
    return ",".join(_number_text(number) for number in numbers)


def _number_text(number: Number) -> str:
    if isinstance(number, (float, Decimal)) and number == int(number):
        return str(int(number))
    return str(number)


def _replace_config(config: EngineConfig, overrides: Mapping[str, Any]) -> EngineConfig:
    """Return config with keyword overrides applied."""
    return replace(config, **overrides)
