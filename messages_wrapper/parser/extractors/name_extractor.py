"""
Name Extractor - Discover the messages class declared by a catalogue.

Looks for the declaration line `class <Prefix>Messages {`, optionally
preceded by class modifiers, and returns the prefix. `class Messages {`
yields the empty prefix; no declaration at all yields None.
"""

import re
from typing import Optional

from .base import BaseExtractor
from ..models import ClassNameInfo
from ...utils.logger import get_logger

logger = get_logger(__name__)


DECLARATION_RE = re.compile(
    r'^\s*(?:(?:abstract|base|final|sealed|interface)\s+)*class\s+([A-Za-z]*)Messages\s*\{',
    re.MULTILINE,
)


class NameExtractor(BaseExtractor):
    """Extractor for the catalogue's messages class prefix."""

    @property
    def component_name(self) -> str:
        return "class_name"

    def extract(self, content: str, **kwargs) -> Optional[str]:
        """
        Extract the messages class prefix.

        Args:
            content: Raw catalogue text

        Returns:
            The prefix (possibly empty), or None if no declaration exists
        """
        match = self._search(DECLARATION_RE, content)
        if match is None:
            return None

        prefix = match.group(1)
        logger.debug(f"Found messages class '{prefix}Messages'")
        return prefix

    def extract_names(self, content: str, private_delegate: bool = False) -> Optional[ClassNameInfo]:
        """
        Extract the prefix and derive the wrapper class names from it.

        Args:
            content: Raw catalogue text
            private_delegate: Emit the delegate as a library-private class

        Returns:
            ClassNameInfo, or None if no declaration exists
        """
        prefix = self.extract(content)
        if prefix is None:
            return None
        return ClassNameInfo.derive(prefix, private_delegate=private_delegate)
