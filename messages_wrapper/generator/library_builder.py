"""
Library Builders - Assemble the wrapper library document model.

Two builders share the same library shape and differ only in how they
obtain the messages class name:

- DeclaredNameBuilder scans the catalogue for `class <Prefix>Messages {`
  and builds nothing when there is no such declaration.
- ConfiguredNameBuilder uses the `class_name` option unconditionally.

The strategy is chosen by the `naming` option; the two are never combined.
"""

from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Dict, List, Optional

from .models import (
    DocumentModel,
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ExtensionSpec,
    Parameter,
)
from ..core.config import NamingStrategy, WrapperOptions
from ..core.context import GenerationRequest
from ..parser.extractors import NameExtractor
from ..parser.models import ClassNameInfo
from ..utils.logger import get_logger

logger = get_logger(__name__)


FLUTTER_WIDGETS_IMPORT = 'package:flutter/widgets.dart'
FLUTTER_SERVICES_IMPORT = 'package:flutter/services.dart'
FLUTTER_LOCALIZATIONS_IMPORT = 'package:flutter_localizations/flutter_localizations.dart'
INTL_OBJECT_IMPORT = 'package:messages/package_intl_object.dart'

# Load precedence in Flutter: the generated delegate must come first.
DEFAULT_DELEGATES = (
    'GlobalMaterialLocalizations.delegate',
    'GlobalCupertinoLocalizations.delegate',
    'GlobalWidgetsLocalizations.delegate',
)

MESSAGES_FIELD = 'messages'
CONTEXT_TYPE = 'BuildContext'


class BaseLibraryBuilder(ABC):
    """Abstract base class for wrapper library builders."""

    @property
    @abstractmethod
    def naming(self) -> NamingStrategy:
        """Naming strategy this builder implements."""
        pass

    @abstractmethod
    def resolve_names(self, request: GenerationRequest) -> Optional[ClassNameInfo]:
        """
        Determine the class names for a request.

        Returns:
            ClassNameInfo, or None when the request is not applicable
        """
        pass

    def build(self, request: GenerationRequest) -> Optional[DocumentModel]:
        """
        Build the wrapper library for a request.

        Args:
            request: Catalogue text, path and options

        Returns:
            DocumentModel, or None when nothing should be generated
        """
        names = self.resolve_names(request)
        if names is None:
            logger.info(f"No messages class in {request.input_path}, skipping")
            return None

        logger.debug(
            f"Building {names.localizations_class_name} for "
            f"{names.messages_class_name} ({self.naming.value} naming)"
        )
        return self._create_library(names, request.config, request.input_path)

    def _create_library(
        self,
        names: ClassNameInfo,
        options: WrapperOptions,
        input_path: PurePath,
    ) -> DocumentModel:
        """Create the library common to all naming strategies."""
        library = DocumentModel(header_comment=options.header)

        for uri in self._imports(input_path):
            library.add_import(uri)

        library.classes.append(self._localizations_class(names))
        library.classes.append(self._delegate_class(names))
        library.top_level_fields.append(self._messages_field(names))

        if options.extension:
            library.extensions.append(self._context_extension(names))

        return library

    def _imports(self, input_path: PurePath) -> List[str]:
        # The catalogue is imported by file name so the wrapper sits beside it
        return [
            FLUTTER_SERVICES_IMPORT,
            FLUTTER_WIDGETS_IMPORT,
            FLUTTER_LOCALIZATIONS_IMPORT,
            INTL_OBJECT_IMPORT,
            PurePath(input_path).name,
        ]

    def _localizations_class(self, names: ClassNameInfo) -> ClassSpec:
        """
        Build `<Base>Localizations`.

        Holds the delegate list handed to `MaterialApp`, the delegate
        singleton, the supported locales and the `of` lookup.
        """
        messages = names.messages_class_name
        delegates = ['delegate', *DEFAULT_DELEGATES]

        return ClassSpec(
            name=names.localizations_class_name,
            fields=[
                FieldSpec(
                    name='localizationsDelegates',
                    type_ref='Iterable<LocalizationsDelegate<dynamic>>',
                    initializer='[\n' + ''.join(f'{d},\n' for d in delegates) + ']',
                    is_static=True,
                ),
                FieldSpec(
                    name='delegate',
                    type_ref=f'LocalizationsDelegate<{messages}>',
                    initializer=f'{names.delegate_class_name}()',
                    is_static=True,
                ),
            ],
            methods=[
                MethodSpec(
                    name='supportedLocales',
                    return_type='List<Locale>',
                    body=(
                        f"return {messages}.knownLocales.map((e) {{\n"
                        "var split = e.split('_');\n"
                        "var code = split.length > 1 ? split[1] : null;\n"
                        "return Locale(split.first, code);\n"
                        "}).toList();"
                    ),
                    is_static=True,
                    is_getter=True,
                ),
                MethodSpec(
                    name='of',
                    return_type=f'{messages}?',
                    parameters=[Parameter('context', CONTEXT_TYPE)],
                    body=f'Localizations.of<{messages}>(context, {messages})',
                    is_static=True,
                    is_lambda=True,
                ),
            ],
        )

    def _delegate_class(self, names: ClassNameInfo) -> ClassSpec:
        """Build the `LocalizationsDelegate` subclass."""
        messages = names.messages_class_name
        delegate_type = f'LocalizationsDelegate<{messages}>'

        return ClassSpec(
            name=names.delegate_class_name,
            super_type=delegate_type,
            methods=[
                MethodSpec(
                    name='isSupported',
                    return_type='bool',
                    parameters=[Parameter('locale', 'Locale')],
                    body=f'{messages}.knownLocales.contains(locale.toString())',
                    is_override=True,
                    is_lambda=True,
                ),
                MethodSpec(
                    name='load',
                    return_type=f'Future<{messages}>',
                    parameters=[Parameter('locale', 'Locale')],
                    body=(
                        f'await {MESSAGES_FIELD}.loadLocale(locale.toString());\n'
                        f'return {MESSAGES_FIELD};'
                    ),
                    is_override=True,
                    is_async=True,
                ),
                MethodSpec(
                    name='shouldReload',
                    return_type='bool',
                    parameters=[Parameter('old', delegate_type)],
                    body='false',
                    is_override=True,
                    is_lambda=True,
                ),
            ],
        )

    def _messages_field(self, names: ClassNameInfo) -> FieldSpec:
        messages = names.messages_class_name
        return FieldSpec(
            name=MESSAGES_FIELD,
            type_ref=messages,
            initializer=f'{messages}(rootBundle.loadString, const OldIntlObject())',
        )

    def _context_extension(self, names: ClassNameInfo) -> ExtensionSpec:
        return ExtensionSpec(
            name=names.extension_name,
            target_type=CONTEXT_TYPE,
            getter_name=names.getter_name,
            getter_expr=f'{names.localizations_class_name}.of(this)',
            return_type=f'{names.messages_class_name}?',
        )


class DeclaredNameBuilder(BaseLibraryBuilder):
    """Builder naming the wrapper after the class declared in the catalogue."""

    def __init__(self):
        self._extractor = NameExtractor()

    @property
    def naming(self) -> NamingStrategy:
        return NamingStrategy.DECLARATION

    def resolve_names(self, request: GenerationRequest) -> Optional[ClassNameInfo]:
        return self._extractor.extract_names(
            request.input_text,
            private_delegate=request.config.private_delegate,
        )


class ConfiguredNameBuilder(BaseLibraryBuilder):
    """Builder naming the wrapper after the configured `class_name`."""

    @property
    def naming(self) -> NamingStrategy:
        return NamingStrategy.CONFIG

    def resolve_names(self, request: GenerationRequest) -> Optional[ClassNameInfo]:
        return ClassNameInfo.from_class_name(
            request.config.class_name,
            private_delegate=request.config.private_delegate,
        )


# Builder registry
_BUILDERS: Dict[NamingStrategy, BaseLibraryBuilder] = {
    NamingStrategy.DECLARATION: DeclaredNameBuilder(),
    NamingStrategy.CONFIG: ConfiguredNameBuilder(),
}


def get_builder(naming: NamingStrategy | str) -> BaseLibraryBuilder:
    """
    Get the library builder for a naming strategy.

    Args:
        naming: Strategy or its string value

    Returns:
        Builder instance for the strategy

    Raises:
        ValueError: If the strategy is not supported
    """
    if isinstance(naming, str):
        naming = NamingStrategy(naming)
    builder = _BUILDERS.get(naming)
    if not builder:
        raise ValueError(f"Unknown naming strategy: {naming}. Available: {list(_BUILDERS.keys())}")
    return builder


def build_library(request: GenerationRequest) -> Optional[DocumentModel]:
    """
    Build the wrapper library using the strategy named in the request options.

    Args:
        request: Generation request

    Returns:
        DocumentModel, or None when nothing should be generated
    """
    return get_builder(request.config.naming).build(request)
