"""
Parser Models - Names and locales discovered in a catalogue.
"""

from .names import (
    ClassNameInfo,
    LocaleId,
    MESSAGES_SUFFIX,
    DEFAULT_MESSAGES_CLASS,
)

__all__ = [
    'ClassNameInfo',
    'LocaleId',
    'MESSAGES_SUFFIX',
    'DEFAULT_MESSAGES_CLASS',
]
