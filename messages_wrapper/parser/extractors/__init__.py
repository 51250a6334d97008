"""
Catalogue Extractors - Pattern-based readers for message catalogues.

- NameExtractor: Prefix of the `<Prefix>Messages` class
- LocaleExtractor: The `knownLocales` identifiers
"""

from .base import BaseExtractor
from .name_extractor import NameExtractor
from .locale_extractor import LocaleExtractor

__all__ = [
    'BaseExtractor',
    'NameExtractor',
    'LocaleExtractor',
]
