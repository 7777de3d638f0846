"""MessageEngine - catalog loading, extraction and fallback on top of the renderer.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from msgengine.catalog.extractor import Extractor
from msgengine.catalog.parser import CatalogTree, parse_catalog
from msgengine.catalog.records import ExtractedMessage, MessageRecord, RawMessage
from msgengine.config import EngineConfig
from msgengine.localization.fallback import FallbackResolver, FallbackResult
from msgengine.runtime.formatters import FormatterBuilder
from msgengine.runtime.getters import Getter
from msgengine.runtime.locale import Locale
from msgengine.runtime.renderer import MessageRenderer

__all__ = ["MessageEngine"]

logger = logging.getLogger(__name__)


class MessageEngine(MessageRenderer):
    """Message templating engine for localized applications.

    Loads nested catalogs, extracts placeholders (lazily by default),
    renders with plural selection and nested references, and back-fills
    missing keys from fallback locales.

    Thread Safety:
        Not thread-safe. Lazy extraction writes into locale stores on first
        render of each key. Either finish warm-up before sharing the engine,
        or construct it with ``defer_extraction=False`` so renders never
        mutate state.

    Examples:
        >>> engine = MessageEngine(default_locale="en")
        >>> engine.load("en", {
        ...     "greeting": "Hello, { name }!",
        ...     "items#n": {"one": "{ n } item", "other": "{ n } items"},
        ... })
        Locale(locale_id='en', messages=4)
        >>> engine.t("en", "greeting", {"name": "Ada"})
        'Hello, Ada!'
        >>> engine.t("en", "items", {"n": 3})
        '3 items'
        >>> t = engine.create_translator("en")
        >>> t("items", {"n": 1})
        '1 item'
    """

    __slots__ = ("_extractor",)

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        formatters: Mapping[str, FormatterBuilder] | None = None,
        getters: Mapping[str, Getter] | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize engine.

        Args:
            config: Engine configuration (default: EngineConfig())
            formatters: Extra formatter builders merged over the built-ins
            getters: Extra getters merged over the built-in "$t" getter
            **overrides: EngineConfig fields overriding ``config``
                (e.g., ``default_locale="en"``, ``defer_extraction=False``)
        """
        super().__init__(config, formatters=formatters, getters=getters, **overrides)
        self._extractor = Extractor(self._getters, self._config.placeholder_pattern)

    @property
    def defer_extraction(self) -> bool:
        """Whether templates are extracted on first render instead of at load."""
        return self._config.defer_extraction

    def extract(self, template: str) -> ExtractedMessage:
        """Extract placeholders from a template.

        Raises:
            UnregisteredGetterError: If the template uses an unknown getter
        """
        return self._extractor.extract(template)

    def parse(
        self,
        catalog: CatalogTree,
        namespace: str | None = None,
    ) -> list[tuple[str, MessageRecord]]:
        """Flatten a catalog into ordered (key, record) pairs.

        Templates are stored raw when extraction is deferred, extracted
        otherwise.

        Raises:
            CatalogError: If the catalog contains an unparseable entry
            UnregisteredGetterError: If extracting eagerly and a getter is unknown
        """
        return parse_catalog(
            catalog,
            namespace,
            extract=None if self._config.defer_extraction else self._extractor.extract,
            separator=self._config.namespace_separator,
        )

    def load(
        self,
        locale_id: str,
        catalog: CatalogTree,
        namespace: str | None = None,
    ) -> Locale:
        """Parse a catalog and register it as a locale.

        Args:
            locale_id: Locale identifier (e.g., "en", "fr-CA")
            catalog: Nested mapping of keys to templates or sub-catalogs
            namespace: Optional prefix for every top-level key

        Returns:
            The new Locale
        """
        return self.load_parsed(locale_id, self.parse(catalog, namespace))

    def fallback(
        self,
        explicit_chains: Mapping[str, Sequence[str]] | None = None,
    ) -> FallbackResult:
        """Back-fill missing keys in every locale from its fallback chain.

        Call once, after all catalogs are loaded and before rendering.

        Args:
            explicit_chains: Locale id -> preferred fallback ids; the
                default locale is always appended

        Returns:
            Locale id -> ordered (key, source locale) entries

        Raises:
            ConfigurationError: If no default locale is configured
            UnknownLocaleError: If the default locale is not loaded
        """
        return FallbackResolver(self).resolve(explicit_chains)

    def _extract_lazily(self, locale: Locale, key: str, message: RawMessage) -> ExtractedMessage:
        """Extract a raw record and memoize it into the locale."""
        extracted = self._extractor.extract(message.source)
        locale[key] = extracted
        logger.debug("Extracted '%s' in '%s' on first render", key, locale.locale_id)
        return extracted
