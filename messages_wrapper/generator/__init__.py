"""
Generator module - Build, emit and format the wrapper library.

Main entry point is WrapperBuilder, which runs the WrapperGenerator
pipeline for every discovered catalogue.
"""

from .models import (
    DocumentModel,
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ExtensionSpec,
    Parameter,
)
from .library_builder import (
    BaseLibraryBuilder,
    DeclaredNameBuilder,
    ConfiguredNameBuilder,
    get_builder,
    build_library,
)
from .emitter import DartEmitter, sorted_imports
from .formatter import BaseFormatter, DartFormatter
from .wrapper_generator import WrapperGenerator, WrapperBuilder

__all__ = [
    # Document model
    'DocumentModel',
    'ClassSpec',
    'FieldSpec',
    'MethodSpec',
    'ExtensionSpec',
    'Parameter',
    # Builders
    'BaseLibraryBuilder',
    'DeclaredNameBuilder',
    'ConfiguredNameBuilder',
    'get_builder',
    'build_library',
    # Rendering
    'DartEmitter',
    'sorted_imports',
    'BaseFormatter',
    'DartFormatter',
    # Pipeline
    'WrapperGenerator',
    'WrapperBuilder',
]
