"""Fallback resolution: back-fill missing keys from fallback locales.

Runs once, after every catalog is loaded. For each locale it computes an
ordered fallback chain ending in the default locale, then copies (by
reference) every record the default locale has and the target lacks from
the first chain locale that defines it.

Chain construction:
    explicit chain given for the locale  -> [*explicit, default]
    base language loaded and different   -> [base language, default]
    otherwise                            -> [default]

Locales named in the explicit chains are processed first, in mapping order,
then the remaining loaded locales in load order. A locale sees records that
earlier locales received by back-fill.

Keys are matched by exact string equality; namespaced keys get no special
treatment. Keys found nowhere in the chain stay missing.

Not thread-safe: mutates locale stores in place. Never run it while other
threads render from the same engine.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, NamedTuple, TypeAlias

from msgengine.diagnostics import ConfigurationError, ErrorTemplate, UnknownLocaleError
from msgengine.locale_utils import get_base_language

if TYPE_CHECKING:
    from msgengine.runtime.locale import Locale
    from msgengine.runtime.renderer import MessageRenderer

__all__ = ["FallbackEntry", "FallbackResolver", "FallbackResult"]

logger = logging.getLogger(__name__)


class FallbackEntry(NamedTuple):
    """One back-filled key and the locale it was copied from.

    Compares equal to a plain ``(key, source_locale)`` tuple.
    """

    key: str
    source_locale: str


FallbackResult: TypeAlias = dict[str, list[FallbackEntry]]


class FallbackResolver:
    """Computes fallback chains and back-fills locale stores.

    Example:
        >>> engine = MessageEngine(default_locale="en")
        >>> engine.load("en", {"greeting": "Hello", "bye": "Bye"})
        >>> engine.load("fr", {"bye": "Au revoir"})
        >>> FallbackResolver(engine).resolve()
        {'en': [], 'fr': [FallbackEntry(key='greeting', source_locale='en')]}
    """

    __slots__ = ("_engine",)

    def __init__(self, engine: MessageRenderer) -> None:
        """Bind to the engine whose locales are back-filled."""
        self._engine = engine

    def chain_for(
        self,
        locale_id: str,
        explicit_chains: Mapping[str, Sequence[str]] | None = None,
    ) -> list[str]:
        """Compute the ordered fallback chain of one locale.

        Args:
            locale_id: Target locale
            explicit_chains: Locale id -> preferred fallback ids

        Returns:
            Fallback locale ids, always ending with the default locale

        Raises:
            ConfigurationError: If no default locale is configured
        """
        default_id = self._require_default()
        if explicit_chains is not None:
            return [*explicit_chains.get(locale_id, ()), default_id]

        base_language = get_base_language(locale_id)
        if base_language != locale_id and self._engine.has_locale(base_language):
            return [base_language, default_id]
        return [default_id]

    def resolve(
        self,
        explicit_chains: Mapping[str, Sequence[str]] | None = None,
    ) -> FallbackResult:
        """Back-fill every locale from its fallback chain.

        Args:
            explicit_chains: Locale id -> preferred fallback ids. Ids named
                here but not loaded are created as empty locales first.

        Returns:
            Locale id -> ordered (key, source locale) provenance entries

        Raises:
            ConfigurationError: If no default locale is configured
            UnknownLocaleError: If the default locale is not loaded
        """
        default_id = self._require_default()
        default_locale = self._engine.get_locale(default_id)
        if default_locale is None:
            raise UnknownLocaleError(ErrorTemplate.locale_not_found(default_id))

        # Explicit chain keys come first, then the remaining loaded locales.
        locale_ids = list(explicit_chains or ())
        locale_ids.extend(
            locale_id for locale_id in self._engine.locale_ids if locale_id not in locale_ids
        )

        result: FallbackResult = {}
        for locale_id in locale_ids:
            locale = self._engine.get_locale(locale_id)
            if locale is None:
                logger.info("Creating empty locale '%s' named only in fallback chains", locale_id)
                locale = self._engine.load_parsed(locale_id, ())

            chain = self._loaded_chain(self.chain_for(locale_id, explicit_chains))
            result[locale_id] = _backfill(locale, default_locale, chain)
            logger.info(
                "Fallback for '%s' via %s: %d key(s) filled",
                locale_id,
                " -> ".join(fallback.locale_id for fallback in chain),
                len(result[locale_id]),
            )
        return result

    def _require_default(self) -> str:
        default_id = self._engine.default_locale
        if not default_id:
            raise ConfigurationError(ErrorTemplate.default_locale_missing())
        return default_id

    def _loaded_chain(self, chain: Sequence[str]) -> list[Locale]:
        """Map chain ids to loaded locales, skipping unknown ids."""
        loaded: list[Locale] = []
        for fallback_id in chain:
            fallback = self._engine.get_locale(fallback_id)
            if fallback is None:
                logger.warning("Fallback locale '%s' is not loaded; skipping", fallback_id)
                continue
            loaded.append(fallback)
        return loaded


def _backfill(
    locale: Locale,
    default_locale: Locale,
    chain: Sequence[Locale],
) -> list[FallbackEntry]:
    """Copy missing default-locale keys into locale from the first chain hit."""
    filled: list[FallbackEntry] = []
    # Snapshot: when locale is the default locale itself, nothing is missing
    for key in list(default_locale):
        if key in locale:
            continue
        for fallback in chain:
            if key in fallback:
                locale[key] = fallback[key]
                filled.append(FallbackEntry(key, fallback.locale_id))
                logger.debug(
                    "Filled '%s' in '%s' from '%s'", key, locale.locale_id, fallback.locale_id
                )
                break
    return filled
