"""
Base Extractor - Abstract base class for catalogue extractors.

The catalogue is machine-generated Dart with a known shape, so extractors
use targeted pattern matching rather than a Dart parser.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, List
import re

from ...utils.logger import get_logger

logger = get_logger(__name__)


_STRING_LITERAL_RE = re.compile(r'''(?:'([^'\\]*(?:\\.[^'\\]*)*)'|"([^"\\]*(?:\\.[^"\\]*)*)")''')


class BaseExtractor(ABC):
    """
    Abstract base class for catalogue extractors.

    Each extractor pulls one piece of information (class name, locale
    list) out of the raw catalogue text.
    """

    @property
    @abstractmethod
    def component_name(self) -> str:
        """Name of the component this extractor handles."""
        pass

    @abstractmethod
    def extract(self, content: str, **kwargs) -> Any:
        """
        Extract the component from catalogue content.

        Args:
            content: Raw catalogue text
            **kwargs: Additional context

        Returns:
            Extracted component, or None when absent
        """
        pass

    def _search(self, pattern: re.Pattern, content: str) -> Optional[re.Match]:
        """
        Search content, logging whether the pattern matched.

        Args:
            pattern: Compiled pattern
            content: Text to search

        Returns:
            Match object or None
        """
        match = pattern.search(content)
        if match is None:
            logger.debug(f"{self.component_name}: no match for {pattern.pattern!r}")
        return match

    def _string_literals(self, text: str) -> List[str]:
        """
        Extract the values of single- or double-quoted string literals.

        Args:
            text: Source fragment, e.g. the inside of a list literal

        Returns:
            Literal values in order of appearance
        """
        values = []
        for single, double in _STRING_LITERAL_RE.findall(text):
            values.append(single if single or not double else double)
        return values
