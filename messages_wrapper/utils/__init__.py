"""
Utilities module - Common helper functions and classes.
"""

from .naming import (
    lower_first,
    is_identifier,
    make_private,
    strip_suffix,
)
from .logger import (
    setup_logging,
    get_logger,
    LogContext,
    log_exception,
)

__all__ = [
    # Naming
    'lower_first',
    'is_identifier',
    'make_private',
    'strip_suffix',
    # Logging
    'setup_logging',
    'get_logger',
    'LogContext',
    'log_exception',
]
