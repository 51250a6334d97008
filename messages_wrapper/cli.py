"""
CLI - Command-line interface for generating Flutter message wrappers.

Commands:
1. build: discover *.g.dart catalogues and write their *.flutter.g.dart wrappers
2. inspect: show the names and locales discovered in one catalogue
3. config: print the resolved configuration
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .core.assets import AssetWriter
from .core.config import ConfigResolver, WrapperOptions, find_config
from .core.context import BuildResult, BuildStatus
from .generator import WrapperBuilder, WrapperGenerator
from .parser import NameExtractor, LocaleExtractor
from .utils.logger import setup_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="messages-wrapper",
        description="Generate Flutter localization wrappers for message catalogues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s build lib/
  %(prog)s build lib/intl_en.g.dart --dry-run
  %(prog)s inspect lib/intl_en.g.dart
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Project configuration (default: ./build.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Generate wrappers")
    build.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path("lib")],
        help="Catalogue files or directories (default: lib)",
    )
    build.add_argument(
        "-j", "--jobs",
        type=int,
        default=1,
        help="Number of catalogues generated in parallel (default: 1)",
    )
    build.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate but don't write output files",
    )
    build.add_argument(
        "--json",
        action="store_true",
        help="Print build results as JSON",
    )

    inspect = subparsers.add_parser("inspect", help="Show names and locales of a catalogue")
    inspect.add_argument("input", type=Path, help="Catalogue file (*.g.dart)")

    subparsers.add_parser("config", help="Print the resolved configuration")

    return parser.parse_args(argv)


def resolve_options(config_path: Optional[Path] = None) -> WrapperOptions:
    """
    Resolve builder options from the given or default build.yaml.

    Args:
        config_path: Explicit configuration path

    Returns:
        WrapperOptions (defaults when no configuration is available)
    """
    path = config_path or find_config(Path.cwd())
    return ConfigResolver(path).resolve()


def run_pipeline(
    paths: Sequence[Path | str],
    options: Optional[WrapperOptions] = None,
    jobs: int = 1,
    dry_run: bool = False,
) -> List[BuildResult]:
    """
    Programmatic interface to run a build pass.

    Args:
        paths: Catalogue files or directories
        options: Resolved builder options
        jobs: Number of catalogues generated in parallel
        dry_run: Don't write output files

    Returns:
        One BuildResult per discovered catalogue
    """
    generator = WrapperGenerator(writer=AssetWriter(dry_run=dry_run))
    builder = WrapperBuilder(options=options, generator=generator, jobs=jobs)
    return builder.build_all(paths)


def summarize(results: Sequence[BuildResult]) -> dict:
    """Count results by status."""
    counts = {status.value: 0 for status in BuildStatus}
    for result in results:
        counts[result.status.value] += 1
    return counts


def build_command(args: argparse.Namespace) -> int:
    options = resolve_options(args.config)
    results = run_pipeline(args.paths, options, jobs=args.jobs, dry_run=args.dry_run)
    counts = summarize(results)

    if args.json:
        print(json.dumps({
            "results": [r.to_json() for r in results],
            "summary": counts,
        }, indent=2))
    else:
        for result in results:
            if result.status == BuildStatus.FAILED:
                logger.error(f"  {result.input_path}: {result.error_message}")
        written = f"{counts['written']} written"
        if args.dry_run:
            written = f"{counts['dry_run']} not written (dry run)"
        logger.info(
            f"Built {len(results)} catalogue(s): {written}, "
            f"{counts['skipped']} skipped, {counts['failed']} failed"
        )

    return 0 if all(result.success for result in results) else 1


def inspect_command(args: argparse.Namespace) -> int:
    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    content = args.input.read_text(encoding="utf-8")
    options = resolve_options(args.config)
    names = NameExtractor().extract_names(content, private_delegate=options.private_delegate)
    locales = LocaleExtractor().supported_locales(content)

    if names is None:
        print(f"{args.input}: no messages class declaration")
        return 0

    print(f"Messages class:      {names.messages_class_name}")
    print(f"Localizations class: {names.localizations_class_name}")
    print(f"Delegate class:      {names.delegate_class_name}")
    print(f"Context getter:      {names.getter_name}")
    print(f"Supported locales:   {', '.join(str(l) for l in locales) or '-'}")
    return 0


def config_command(args: argparse.Namespace) -> int:
    path = args.config or find_config(Path.cwd())
    print(ConfigResolver(path).resolve_app_config().to_yaml(), end="")
    return 0


COMMANDS = {
    "build": build_command,
    "inspect": inspect_command,
    "config": config_command,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero if any catalogue failed)
    """
    load_dotenv()
    args = parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else None)

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
