"""
Naming helpers for generated Dart identifiers.
"""

import re


_IDENTIFIER_RE = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')


def lower_first(text: str) -> str:
    """
    Lower-case the first character of text.

    Args:
        text: Identifier such as "MessagesLocalizations"

    Returns:
        "messagesLocalizations"
    """
    if not text:
        return text
    return text[0].lower() + text[1:]


def is_identifier(text: str) -> bool:
    """Check whether text is a valid Dart identifier."""
    return bool(text) and bool(_IDENTIFIER_RE.match(text))


def make_private(name: str) -> str:
    """Return the library-private form of an identifier."""
    return name if name.startswith('_') else f"_{name}"


def strip_suffix(text: str, suffix: str) -> str:
    """Remove suffix from text if present."""
    if suffix and text.endswith(suffix):
        return text[:-len(suffix)]
    return text
