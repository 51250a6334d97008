"""
Error types raised by the wrapper generator.

All failures are scoped to a single input asset. MissingDeclaration and
ConfigurationUnavailable are recoverable (skip / use defaults); PathMismatch
and FormattingFailure fail the asset.
"""

from pathlib import Path
from typing import Optional


class WrapperError(Exception):
    """Base class for wrapper generator errors."""


class MissingDeclaration(WrapperError):
    """No `class <Prefix>Messages {` declaration was found in the input."""

    def __init__(self, input_path: Optional[Path | str] = None):
        self.input_path = input_path
        where = f" in {input_path}" if input_path else ""
        super().__init__(f"No messages class declaration found{where}")


class ConfigurationUnavailable(WrapperError):
    """The project configuration is missing or malformed."""

    def __init__(self, path: Optional[Path | str], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Configuration unavailable ({path}): {reason}")


class PathMismatch(WrapperError):
    """The input path does not carry the recognized catalogue suffix."""

    def __init__(self, input_path: Path | str, expected_suffix: str):
        self.input_path = input_path
        self.expected_suffix = expected_suffix
        super().__init__(
            f"Input path {input_path} does not end with '{expected_suffix}'"
        )


class FormattingFailure(WrapperError):
    """Emitted source could not be canonicalized."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"{message}{location}")
