"""
Name and locale models derived from a message catalogue.
"""

from dataclasses import dataclass
from typing import Optional

from ...utils.naming import lower_first, make_private, strip_suffix


MESSAGES_SUFFIX = "Messages"
DEFAULT_MESSAGES_CLASS = "Messages"


@dataclass(frozen=True)
class ClassNameInfo:
    """
    Class names used by the generated wrapper.

    The localizations and delegate names are built on the prefix, or on the
    messages class name when the prefix is empty, so `class Messages` yields
    `MessagesLocalizations` rather than clashing with Flutter's
    `Localizations`.
    """
    prefix: str
    messages_class_name: str
    localizations_class_name: str
    delegate_class_name: str

    @classmethod
    def derive(
        cls,
        prefix: str,
        messages_class_name: Optional[str] = None,
        private_delegate: bool = False,
    ) -> 'ClassNameInfo':
        """
        Derive all class names from a prefix.

        Args:
            prefix: Text before `Messages` in the catalogue class name
            messages_class_name: Explicit messages class name, defaults to `<prefix>Messages`
            private_delegate: Emit the delegate as a library-private class

        Returns:
            ClassNameInfo instance
        """
        messages = messages_class_name or f"{prefix}{MESSAGES_SUFFIX}"
        base = prefix or messages
        localizations = f"{base}Localizations"
        delegate = f"{localizations}Delegate"
        if private_delegate:
            delegate = make_private(delegate)

        return cls(
            prefix=prefix,
            messages_class_name=messages,
            localizations_class_name=localizations,
            delegate_class_name=delegate,
        )

    @classmethod
    def from_class_name(cls, class_name: str, private_delegate: bool = False) -> 'ClassNameInfo':
        """
        Derive names from a full messages class name such as `AppMessages`.

        Names that do not end in `Messages` are used as-is with an empty prefix.
        """
        class_name = class_name.strip() or DEFAULT_MESSAGES_CLASS
        prefix = strip_suffix(class_name, MESSAGES_SUFFIX)
        if prefix == class_name:
            prefix = ""
        return cls.derive(prefix, class_name, private_delegate)

    @property
    def extension_name(self) -> str:
        return f"{self.localizations_class_name}Extension"

    @property
    def getter_name(self) -> str:
        return lower_first(self.localizations_class_name)


@dataclass(frozen=True)
class LocaleId:
    """A locale identifier split into language and optional region."""
    language: str
    region: Optional[str] = None

    @classmethod
    def parse(cls, identifier: str) -> 'LocaleId':
        """
        Split a catalogue locale identifier.

        Matches the generated `supportedLocales` getter: the identifier is
        split on `_`, the first token is the language and the second, if
        any, the region.

        Args:
            identifier: e.g. "en", "pt_BR"

        Returns:
            LocaleId instance
        """
        parts = identifier.split('_')
        region = parts[1] if len(parts) > 1 else None
        return cls(language=parts[0], region=region)

    def as_pair(self) -> tuple:
        return (self.language, self.region)

    def __str__(self) -> str:
        return f"{self.language}_{self.region}" if self.region else self.language
