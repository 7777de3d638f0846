"""Per-language message store.

A Locale maps catalog keys to MessageRecords, preserving insertion order,
and owns the formatter instances bound to its language. It is the unit the
renderer memoizes extracted records into and the unit the fallback pass
copies records between.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from msgengine.catalog.records import MessageRecord
from msgengine.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from msgengine.runtime.formatters import FormatterBuilder
    from msgengine.runtime.renderer import MessageRenderer, Translator

__all__ = ["Locale"]

logger = logging.getLogger(__name__)


class Locale(MutableMapping[str, MessageRecord]):
    """Key -> MessageRecord store for one locale.

    Not thread-safe: lazy extraction and fallback write into the store.
    Complete loading and fallback before rendering from several threads.

    Example:
        >>> locale = engine.load("en", {"hello": "Hello, { name }!"})
        >>> "hello" in locale
        True
        >>> locale.t("hello", {"name": "Ada"})
        'Hello, Ada!'
    """

    __slots__ = ("_formatters", "_messages", "engine", "locale_id")

    def __init__(
        self,
        engine: MessageRenderer,
        locale_id: str,
        messages: Iterable[tuple[str, MessageRecord]] = (),
        formatter_builders: Mapping[str, FormatterBuilder] | None = None,
    ) -> None:
        """Initialize locale store.

        Args:
            engine: Owning engine; used by getters and t()
            locale_id: Locale identifier (e.g., "en", "pt-BR")
            messages: Ordered (key, record) pairs; later duplicates win
            formatter_builders: Formatter name -> builder
        """
        self.engine = engine
        self.locale_id = locale_id
        self._messages: dict[str, MessageRecord] = dict(messages)

        babel_locales = _babel_locales(locale_id, engine.config.default_locale)
        self._formatters: Mapping[str, Any] = MappingProxyType(
            {name: build(babel_locales) for name, build in (formatter_builders or {}).items()}
        )

    @property
    def formatters(self) -> Mapping[str, Any]:
        """Formatter instances bound to this locale (read-only)."""
        return self._formatters

    def t(self, key: str, args: Mapping[str, Any] | None = None) -> str:
        """Render a key of this locale."""
        return self.engine.t(self.locale_id, key, args)

    def create_translator(self) -> Translator:
        """Return a render function bound to this locale."""
        return self.engine.create_translator(self.locale_id)

    def __getitem__(self, key: str) -> MessageRecord:
        return self._messages[key]

    def __setitem__(self, key: str, record: MessageRecord) -> None:
        self._messages[key] = record

    def __delitem__(self, key: str) -> None:
        del self._messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Locale(locale_id={self.locale_id!r}, messages={len(self._messages)})"


def _babel_locales(locale_id: str, default_locale: str | None) -> tuple[BabelLocale, ...]:
    """Parse the locale and the default locale for formatter binding.

    Identifiers Babel cannot parse are skipped with a warning.
    """
    ids = [locale_id]
    if default_locale and default_locale != locale_id:
        ids.append(default_locale)

    parsed: list[BabelLocale] = []
    for code in ids:
        try:
            parsed.append(get_babel_locale(code))
        except (BabelUnknownLocaleError, ValueError) as e:
            logger.warning("Formatter locale '%s' unavailable: %s", code, e)
    return tuple(parsed)
