"""
Asset paths and writes for generated wrappers.

`intl_en.g.dart` maps to `intl_en.flutter.g.dart` in the same directory.
"""

import os
from pathlib import Path

from .errors import PathMismatch
from ..utils.logger import get_logger

logger = get_logger(__name__)


INPUT_SUFFIX = ".g.dart"
OUTPUT_SUFFIX = ".flutter.g.dart"

BUILD_EXTENSIONS = {INPUT_SUFFIX: [OUTPUT_SUFFIX]}


def is_input_asset(path: Path | str) -> bool:
    """
    Check whether a path is a catalogue the generator should run on.

    Our own outputs also end in `.g.dart` and are excluded.
    """
    name = Path(path).name
    return name.endswith(INPUT_SUFFIX) and not name.endswith(OUTPUT_SUFFIX)


def output_path_for(input_path: Path | str) -> Path:
    """
    Compute the wrapper path for a catalogue path.

    Args:
        input_path: Path ending in `.g.dart`

    Returns:
        Path with `.g.dart` replaced by `.flutter.g.dart`

    Raises:
        PathMismatch: If input_path lacks the `.g.dart` suffix
    """
    text = str(input_path)
    if not text.endswith(INPUT_SUFFIX):
        raise PathMismatch(input_path, INPUT_SUFFIX)
    return Path(text[:-len(INPUT_SUFFIX)] + OUTPUT_SUFFIX)


class AssetWriter:
    """Persists generated wrappers next to their catalogue."""

    def __init__(self, dry_run: bool = False):
        """
        Initialize the writer.

        Args:
            dry_run: Compute paths but never touch the filesystem
        """
        self.dry_run = dry_run

    def write(self, input_path: Path | str, contents: str) -> Path:
        """
        Write contents to the output path derived from input_path.

        The output is replaced as a whole; a temporary sibling file is
        written first and moved into place.

        Args:
            input_path: Catalogue path
            contents: Final formatted source

        Returns:
            The output path

        Raises:
            PathMismatch: If input_path lacks the `.g.dart` suffix
        """
        output_path = output_path_for(input_path)

        if self.dry_run:
            logger.info(f"Dry run - would write {output_path}")
            return output_path

        tmp = output_path.with_name(output_path.name + ".tmp")
        try:
            tmp.write_text(contents, encoding='utf-8')
            os.replace(tmp, output_path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

        logger.info(f"Wrote {output_path}")
        return output_path
