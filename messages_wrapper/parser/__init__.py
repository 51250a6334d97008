"""
Parser module - Extract names and locales from message catalogues.
"""

from .models import (
    ClassNameInfo,
    LocaleId,
)
from .extractors import (
    BaseExtractor,
    NameExtractor,
    LocaleExtractor,
)

__all__ = [
    # Models
    'ClassNameInfo',
    'LocaleId',
    # Extractors
    'BaseExtractor',
    'NameExtractor',
    'LocaleExtractor',
]
