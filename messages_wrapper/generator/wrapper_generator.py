"""
Wrapper Generator - Run the generation pipeline for catalogue assets.

One request flows through: build model -> emit -> format -> write. The
output is written only after formatting succeeded. WrapperBuilder adds
asset discovery and runs independent requests, optionally in parallel;
a failure is recorded on that asset's BuildResult and does not stop the
others.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional

from .emitter import DartEmitter
from .formatter import BaseFormatter, DartFormatter
from .library_builder import build_library
from ..core.assets import (
    AssetWriter,
    BUILD_EXTENSIONS,
    INPUT_SUFFIX,
    is_input_asset,
    output_path_for,
)
from ..core.config import CONFIG_FILE_NAME, WrapperOptions
from ..core.context import BuildResult, BuildStatus, GenerationRequest
from ..core.errors import MissingDeclaration, WrapperError
from ..utils.logger import get_logger, log_exception, LogContext

logger = get_logger(__name__)


class WrapperGenerator:
    """Turns a GenerationRequest into a written wrapper file."""

    def __init__(
        self,
        emitter: Optional[DartEmitter] = None,
        formatter: Optional[BaseFormatter] = None,
        writer: Optional[AssetWriter] = None,
    ):
        self.emitter = emitter or DartEmitter()
        self.formatter = formatter or DartFormatter()
        self.writer = writer or AssetWriter()

    def render(self, request: GenerationRequest) -> str:
        """
        Render the formatted wrapper source for a request.

        Pure: depends only on the request and never touches the filesystem.

        Raises:
            MissingDeclaration: If there is nothing to generate for the input
            FormattingFailure: If the emitted source cannot be formatted
        """
        library = build_library(request)
        if library is None:
            raise MissingDeclaration(request.input_path)

        source = self.emitter.emit(library)
        return self.formatter.format(source)

    def generate(self, request: GenerationRequest) -> BuildResult:
        """
        Generate and write the wrapper for one request.

        Args:
            request: Generation request

        Returns:
            BuildResult describing what happened
        """
        with LogContext(logger, "Generating wrapper", asset=request.input_path):
            try:
                output_path = output_path_for(request.input_path)
                contents = self.render(request)
                self.writer.write(request.input_path, contents)
            except MissingDeclaration as e:
                logger.info(f"Skipped {request.input_path}: {e}")
                return BuildResult(input_path=request.input_path, status=BuildStatus.SKIPPED)
            except (WrapperError, OSError) as e:
                logger.error(f"Generation failed for {request.input_path}: {e}")
                return BuildResult(
                    input_path=request.input_path,
                    status=BuildStatus.FAILED,
                    error_message=str(e),
                )

        status = BuildStatus.DRY_RUN if self.writer.dry_run else BuildStatus.WRITTEN
        return BuildResult(
            input_path=request.input_path,
            status=status,
            output_path=output_path,
            contents=contents,
        )


class WrapperBuilder:
    """
    Build entry point: discovers catalogue assets and generates their wrappers.

    Assets matching `*.g.dart` trigger generation. build.yaml only feeds the
    options and produces no output of its own.
    """

    build_extensions = BUILD_EXTENSIONS

    def __init__(
        self,
        options: Optional[WrapperOptions] = None,
        generator: Optional[WrapperGenerator] = None,
        jobs: int = 1,
    ):
        """
        Initialize the builder.

        Args:
            options: Resolved builder options (defaults if None)
            generator: Pipeline to run per asset
            jobs: Number of assets generated concurrently
        """
        self.options = options or WrapperOptions()
        self.generator = generator or WrapperGenerator()
        self.jobs = max(1, jobs)

    def discover(self, paths: Iterable[Path | str]) -> List[Path]:
        """
        Collect catalogue assets from files and directories.

        Args:
            paths: Files or directories (searched recursively)

        Returns:
            Sorted, de-duplicated list of input assets
        """
        found = set()
        for path in map(Path, paths):
            if path.is_dir():
                found.update(p for p in path.rglob(f"*{INPUT_SUFFIX}") if is_input_asset(p))
            elif path.name == CONFIG_FILE_NAME:
                logger.debug(f"{path} is a configuration asset, no output")
            elif is_input_asset(path):
                found.add(path)
            else:
                logger.warning(f"Ignoring {path}: not a *{INPUT_SUFFIX} catalogue")
        return sorted(found)

    def build(self, input_path: Path | str) -> BuildResult:
        """
        Generate the wrapper for a single asset.

        Args:
            input_path: Catalogue path

        Returns:
            BuildResult for the asset
        """
        input_path = Path(input_path)
        try:
            request = GenerationRequest.from_file(input_path, self.options)
            return self.generator.generate(request)
        except Exception as e:
            log_exception(logger, f"Unexpected error building {input_path}", e)
            return BuildResult(
                input_path=input_path,
                status=BuildStatus.FAILED,
                error_message=str(e),
            )

    def build_all(self, paths: Iterable[Path | str]) -> List[BuildResult]:
        """
        Discover assets and build each of them.

        Args:
            paths: Files or directories

        Returns:
            One BuildResult per discovered asset, in discovery order
        """
        assets = self.discover(paths)
        logger.info(f"Found {len(assets)} catalogue(s)")

        if self.jobs == 1 or len(assets) < 2:
            return [self.build(asset) for asset in assets]

        with ThreadPoolExecutor(max_workers=self.jobs) as executor:
            return list(executor.map(self.build, assets))
