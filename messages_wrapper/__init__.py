"""
Messages Wrapper - Flutter localization wrappers for message catalogues.

Main modules:
- parser: Discover class names and locales in *.g.dart catalogues
- generator: Build, emit and format the *.flutter.g.dart wrapper library
- core: Configuration, errors, assets and per-request state
- cli: Command-line interface
"""

from .cli import run_pipeline

__version__ = "1.0.0"

__all__ = [
    'run_pipeline',
    '__version__',
]
