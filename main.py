#!/usr/bin/env python3
"""
Messages Wrapper - Terminal front-end for generating Flutter message wrappers.

Usage:
    python main.py build [<path> ...] [--config build.yaml] [--dry-run] [--verbose]
    python main.py inspect <catalogue> [--config build.yaml]

Examples:
    python main.py build lib/
    python main.py build lib/intl_en.g.dart --dry-run
    python main.py inspect lib/intl_en.g.dart
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from messages_wrapper.cli import resolve_options, run_pipeline, summarize
from messages_wrapper.core import BuildStatus, output_path_for
from messages_wrapper.parser import NameExtractor, LocaleExtractor
from messages_wrapper.utils import setup_logging


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


def color(text: str, color_code: str) -> str:
    """Apply color to text."""
    return f"{color_code}{text}{Colors.RESET}"


def print_header(title: str) -> None:
    """Print a styled header."""
    print()
    print(color(f"{'=' * 60}", Colors.CYAN))
    print(color(f"  {title}", Colors.BOLD + Colors.CYAN))
    print(color(f"{'=' * 60}", Colors.CYAN))


def print_success(message: str) -> None:
    print(color(f"[WRITTEN] {message}", Colors.GREEN))


def print_error(message: str) -> None:
    print(color(f"[FAILED]  {message}", Colors.RED), file=sys.stderr)


def print_skipped(message: str) -> None:
    print(color(f"[SKIPPED] {message}", Colors.YELLOW))


def print_step(message: str) -> None:
    print(color(f"  -> {message}", Colors.DIM))


def build_command(paths, config=None, dry_run: bool = False, verbose: bool = False) -> int:
    """
    Generate wrappers for the catalogues under paths.

    Returns:
        Exit code (0 for success, 1 if any catalogue failed)
    """
    print_header("Messages Wrapper Generator")

    options = resolve_options(config)
    if verbose:
        print_step(f"Naming: {options.naming.value}, extension: {options.extension}")

    results = run_pipeline(paths, options, dry_run=dry_run)

    print()
    for result in results:
        if result.status == BuildStatus.WRITTEN:
            print_success(f"{result.input_path} -> {result.output_path}")
        elif result.status == BuildStatus.DRY_RUN:
            print_step(f"{result.input_path} -> {result.output_path} (dry run)")
        elif result.status == BuildStatus.SKIPPED:
            print_skipped(f"{result.input_path} (no messages class)")
        else:
            print_error(f"{result.input_path}: {result.error_message}")

    counts = summarize(results)
    print()
    written = f"{counts['dry_run']} not written (dry run)" if dry_run else f"{counts['written']} written"
    summary = f"  {written}, {counts['skipped']} skipped, {counts['failed']} failed"
    if not all(result.success for result in results):
        print(color(summary, Colors.RED))
        return 1
    print(color(summary, Colors.GREEN))
    return 0


def inspect_command(catalogue: Path, config=None) -> int:
    """Show what would be generated for one catalogue."""
    print_header("Catalogue Inspection")

    if not catalogue.exists():
        print_error(f"File not found: {catalogue}")
        return 1

    content = catalogue.read_text(encoding="utf-8")
    options = resolve_options(config)
    names = NameExtractor().extract_names(content, private_delegate=options.private_delegate)
    if names is None:
        print_skipped(f"{catalogue}: no messages class declaration")
        return 0

    print()
    print(f"  Messages:      {color(names.messages_class_name, Colors.CYAN)}")
    print(f"  Localizations: {color(names.localizations_class_name, Colors.CYAN)}")
    print(f"  Delegate:      {color(names.delegate_class_name, Colors.CYAN)}")
    print(f"  Output:        {output_path_for(catalogue)}")
    print()
    print(color("Supported locales:", Colors.BOLD))
    for locale in LocaleExtractor().supported_locales(content):
        print_step(f"{locale} -> Locale({locale.language!r}, {locale.region!r})")
    return 0


def main() -> int:
    """Main entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Messages Wrapper - Generate Flutter localization wrappers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser("build", help="Generate wrappers")
    build_parser.add_argument("paths", nargs="*", default=["lib"], help="Catalogues or directories")
    build_parser.add_argument("--config", "-c", type=Path, help="Path to build.yaml")
    build_parser.add_argument("--dry-run", action="store_true", help="Don't write output files")
    build_parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed progress")

    inspect_parser = subparsers.add_parser("inspect", help="Inspect a catalogue")
    inspect_parser.add_argument("catalogue", type=Path, help="Path to a *.g.dart catalogue")
    inspect_parser.add_argument("--config", "-c", type=Path, help="Path to build.yaml")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "build":
        setup_logging(level="DEBUG" if args.verbose else "WARNING")
        return build_command(args.paths, args.config, args.dry_run, args.verbose)
    elif args.command == "inspect":
        setup_logging(level="WARNING")
        return inspect_command(args.catalogue, args.config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
