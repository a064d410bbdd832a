#!/usr/bin/env python3
"""
SameHash CLI — Command line interface for content-hash duplicate detection.
Walks a directory (optionally recursively), fingerprints every file and
reports groups of byte-identical files. Report-only: nothing is ever modified.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import Dict, List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from samehash.core.errors import InvalidConfigurationError
from samehash.core.models import RunConfig, ScanStats
from samehash.commands import DuplicateSearchCommand
from samehash.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    CHUNK_SIZE_HELP_TEXT, EPILOG_TEXT
)

GROUP_HEADER = "------- Multiple Entries Found -------"
GROUP_FOOTER = "--------------------------------------"


def display_path(path: str) -> str:
    """
    Render a path for the report.

    Names that are not valid UTF-8 on disk carry surrogate escapes after
    decoding; those bytes are shown as U+FFFD.
    """
    try:
        return os.fsencode(path).decode("utf-8", "replace")
    except UnicodeError:
        return path.encode("utf-8", "backslashreplace").decode("utf-8")


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Force UTF-8 consoles; escape characters that cannot be encoded
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="samehash",
            description="SameHash — find duplicate files by comparing content hashes",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--path", "-p",
            required=True,
            type=str,
            help="Directory being analyzed"
        )

        # Traversal options
        parser.add_argument(
            "--recurse", "-r",
            action="store_true",
            help="Run recursively (breadth-first descent into subdirectories)"
        )
        parser.add_argument(
            "--include-hidden",
            action="store_true",
            dest="include_hidden",
            help="Include hidden files and directories"
        )
        parser.add_argument(
            "--follow-symlinks",
            action="store_true",
            dest="follow_symlinks",
            help="Follow symbolic links (each directory is still visited once)"
        )

        # Hashing options
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            metavar='',
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--chunk-size", "-c",
            default="64K",
            type=str,
            metavar='',
            dest="chunk_size",
            help=CHUNK_SIZE_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress the report, keep only directory errors"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics, progress and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        if not args.path.strip():
            self.error_exit("Root directory cannot be empty")

        root_path = Path(args.path)
        if root_path.exists() and not root_path.is_dir():
            self.warning(f"Path is not a directory: {args.path}")

    def create_config(self, args: argparse.Namespace) -> RunConfig:
        """Create RunConfig from CLI arguments."""
        algorithm = ALGORITHM_ALIASES[args.algorithm]
        try:
            return RunConfig.from_human_readable(
                root=str(Path(args.path).expanduser().absolute()),
                recurse=args.recurse,
                include_hidden=args.include_hidden,
                follow_symlinks=args.follow_symlinks,
                algorithm=algorithm.value,
                chunk_size_str=args.chunk_size,
            )
        except InvalidConfigurationError as e:
            self.error_exit(f"Parameter error: {e}")

    def configure_logging(self) -> None:
        """Adjust the root logger to the requested verbosity."""
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.getLogger().setLevel(level)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            sys.stderr.write(f"\r  [{stage}] {current}/{total} directories")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} directories processed...")
        sys.stderr.flush()

    def run_search(self, config: RunConfig) -> Dict[str, List[str]]:
        """Execute the duplicate search workflow."""
        command = DuplicateSearchCommand()
        if self.verbose:
            print(f"Hashing with {config.algorithm.display_name} "
                  f"(recurse: {config.recurse}, include hidden: {config.include_hidden})...")

        mapping, stats = command.execute(
            config,
            progress_callback=self.progress_callback if self.verbose else None
        )

        if self.verbose:
            sys.stderr.write("\n")
            self.output_stats(stats)

        return mapping

    @staticmethod
    def output_stats(stats: ScanStats) -> None:
        print()
        print(stats.print_summary())
        if stats.traversal_errors:
            print("\nDirectories that could not be walked:")
            for error in stats.traversal_errors:
                print(f"  • {display_path(error.path)}: {error.message}")
        print()

    def output_results(self, mapping: Dict[str, List[str]]) -> None:
        """Print the unique-file count and every duplicate group in discovery order."""
        if self.quiet:
            return

        duplicates_found = False
        print(f"Went through: {len(mapping)} unique files")

        for file_list in mapping.values():
            if len(file_list) > 1:
                duplicates_found = True
                print(GROUP_HEADER)
                for index, path in enumerate(file_list, 1):
                    print(f"{index:>5} -> `{display_path(path)}`")
                print(GROUP_FOOTER)

        if not duplicates_found:
            print("No duplicates found with hash comparison method.")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        self.configure_logging()
        config = self.create_config(args)

        mapping = self.run_search(config)
        self.output_results(mapping)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
