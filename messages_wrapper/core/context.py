"""
Generation Context - Per-asset request and result records.

A GenerationRequest is created for each triggering catalogue file and is
owned by one pipeline run; a BuildResult reports what that run did.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
from enum import Enum

from .config import WrapperOptions


class BuildStatus(Enum):
    """Outcome of a single generation request."""
    WRITTEN = "written"
    DRY_RUN = "dry_run"   # Rendered, write suppressed
    SKIPPED = "skipped"   # No messages declaration, nothing to generate
    FAILED = "failed"


@dataclass(frozen=True)
class GenerationRequest:
    """One catalogue file and the options it is generated with."""
    input_path: Path
    input_text: str
    config: WrapperOptions = field(default_factory=WrapperOptions)

    @classmethod
    def from_file(cls, input_path: Path | str, config: Optional[WrapperOptions] = None) -> 'GenerationRequest':
        """
        Read a catalogue file into a request.

        Args:
            input_path: Path to the catalogue (*.g.dart)
            config: Resolved options (defaults if None)

        Returns:
            GenerationRequest instance
        """
        path = Path(input_path)
        return cls(
            input_path=path,
            input_text=path.read_text(encoding='utf-8'),
            config=config or WrapperOptions(),
        )


@dataclass
class BuildResult:
    """Result of generating the wrapper for one asset."""
    input_path: Path
    status: BuildStatus
    output_path: Optional[Path] = None
    contents: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status != BuildStatus.FAILED

    def to_json(self) -> Dict[str, Any]:
        """Convert result to JSON-serializable dict."""
        return {
            "input_path": str(self.input_path),
            "status": self.status.value,
            "output_path": str(self.output_path) if self.output_path else None,
            "error_message": self.error_message,
        }
