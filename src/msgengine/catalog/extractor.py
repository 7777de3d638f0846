"""Placeholder extraction: template string -> ExtractedMessage.

Extraction is a single forward scan over the template. Literal runs are
copied to the output, escaped placeholders are copied without their escape
marker, and real placeholders are recorded at the current output length.
Offsets therefore always index the final literal text.

Getter arguments are parsed here, once, by the getter's own parser. An
unknown getter name fails extraction instead of failing at first render.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from msgengine.catalog.records import (
    ExtractedMessage,
    GetterPlaceholder,
    Placeholder,
    VariablePlaceholder,
)
from msgengine.constants import ESCAPE_MARKER, PLACEHOLDER_PATTERN
from msgengine.diagnostics import ErrorTemplate, UnregisteredGetterError

if TYPE_CHECKING:
    from msgengine.runtime.getters import GetterRegistry

__all__ = ["Extractor"]

logger = logging.getLogger(__name__)


class Extractor:
    """Converts raw templates into literal text plus placeholder descriptors.

    Example:
        >>> from msgengine.runtime.getters import create_default_getters
        >>> extractor = Extractor(create_default_getters())
        >>> extracted = extractor.extract("Hello, { name }!")
        >>> extracted.text
        'Hello, !'
        >>> extracted.placeholders[0][0]
        7
    """

    __slots__ = ("_getters", "_pattern")

    def __init__(
        self,
        getters: GetterRegistry,
        pattern: re.Pattern[str] = PLACEHOLDER_PATTERN,
    ) -> None:
        """Initialize extractor.

        Args:
            getters: Registry used to validate getter names and parse their arguments
            pattern: Placeholder grammar with ``variable``, ``getter`` and ``args`` groups
        """
        self._getters = getters
        self._pattern = pattern

    def extract(self, template: str) -> ExtractedMessage:
        """Extract placeholders from a template.

        Args:
            template: Raw template string

        Returns:
            ExtractedMessage with offsets into the final literal text

        Raises:
            UnregisteredGetterError: If a placeholder names an unknown getter
        """
        parts: list[str] = []
        length = 0
        position = 0
        placeholders: list[tuple[int, Placeholder]] = []

        for match in self._pattern.finditer(template):
            literal = template[position : match.start()]
            parts.append(literal)
            length += len(literal)
            position = match.end()

            source = match.group(0)
            if source.startswith(ESCAPE_MARKER):
                restored = source[len(ESCAPE_MARKER) :]
                parts.append(restored)
                length += len(restored)
                continue

            placeholders.append((length, self._describe(match)))

        parts.append(template[position:])
        extracted = ExtractedMessage("".join(parts), tuple(placeholders))
        logger.debug("Extracted %d placeholder(s) from template", len(placeholders))
        return extracted

    def _describe(self, match: re.Match[str]) -> Placeholder:
        """Build the descriptor for one non-escaped placeholder match."""
        source = match.group(0)
        variable = match.group("variable")
        if variable:
            return VariablePlaceholder(path=variable, source=source)

        name = match.group("getter")
        getter = self._getters.get(name)
        if getter is None:
            raise UnregisteredGetterError(ErrorTemplate.getter_not_registered(name))
        return GetterPlaceholder(name=name, data=getter.parse(match.group("args")), source=source)
