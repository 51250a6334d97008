"""
Core module - Configuration, errors, assets and per-request state.
"""

from .config import (
    WrapperOptions,
    AppConfig,
    NamingStrategy,
    ConfigResolver,
    find_config,
    CONFIG_FILE_NAME,
    DEFAULT_HEADER,
    DEFAULT_CLASS_NAME,
)
from .context import (
    GenerationRequest,
    BuildResult,
    BuildStatus,
)
from .assets import (
    AssetWriter,
    output_path_for,
    is_input_asset,
    INPUT_SUFFIX,
    OUTPUT_SUFFIX,
    BUILD_EXTENSIONS,
)
from .errors import (
    WrapperError,
    MissingDeclaration,
    ConfigurationUnavailable,
    PathMismatch,
    FormattingFailure,
)

__all__ = [
    # Config
    'WrapperOptions',
    'AppConfig',
    'NamingStrategy',
    'ConfigResolver',
    'find_config',
    'CONFIG_FILE_NAME',
    'DEFAULT_HEADER',
    'DEFAULT_CLASS_NAME',
    # Context
    'GenerationRequest',
    'BuildResult',
    'BuildStatus',
    # Assets
    'AssetWriter',
    'output_path_for',
    'is_input_asset',
    'INPUT_SUFFIX',
    'OUTPUT_SUFFIX',
    'BUILD_EXTENSIONS',
    # Errors
    'WrapperError',
    'MissingDeclaration',
    'ConfigurationUnavailable',
    'PathMismatch',
    'FormattingFailure',
]
