"""
Locale Extractor - Read the catalogue's known locale identifiers.
"""

import re
from typing import List

from .base import BaseExtractor
from ..models import LocaleId
from ...utils.logger import get_logger

logger = get_logger(__name__)


# e.g. `static const knownLocales = ['en', 'pt_BR'];` or `= <String>[...]`
KNOWN_LOCALES_RE = re.compile(
    r'knownLocales\s*=\s*(?:const\s+)?(?:<String>\s*)?\[(.*?)\]',
    re.DOTALL,
)


class LocaleExtractor(BaseExtractor):
    """Extractor for the `knownLocales` list of a messages class."""

    @property
    def component_name(self) -> str:
        return "known_locales"

    def extract(self, content: str, **kwargs) -> List[str]:
        """
        Extract known locale identifiers in declaration order.

        Args:
            content: Raw catalogue text

        Returns:
            Locale identifiers (empty if the list is not found)
        """
        match = self._search(KNOWN_LOCALES_RE, content)
        if match is None:
            return []

        locales = self._string_literals(match.group(1))
        logger.debug(f"Found {len(locales)} known locales")
        return locales

    def supported_locales(self, content: str) -> List[LocaleId]:
        """
        Compute the locales the generated `supportedLocales` getter yields.

        Args:
            content: Raw catalogue text

        Returns:
            LocaleId per known locale, in declaration order
        """
        return [LocaleId.parse(identifier) for identifier in self.extract(content)]
