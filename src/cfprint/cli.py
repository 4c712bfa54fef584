#!/usr/bin/env python3
"""
cfprint CLI: print content fingerprints for files, stdin or whole directories.
Fingerprints ignore whitespace, so the same content formatted differently
yields the same number. Optionally groups files that share a fingerprint.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import json
import sys
import os
import time
from pathlib import Path
from typing import Dict, List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from cfprint.core.models import FingerprintMode, FingerprintParams, FingerprintGroup, FingerprintedFile
from cfprint.core.fingerprint import FingerprinterImpl, read_stream
from cfprint.core.grouper import FileGrouperImpl
from cfprint.commands import FingerprintCommand
from cfprint.utils.convert_utils import ConvertUtils
from cfprint.aliases import MODE_ALIASES, MODE_CHOICES, MODE_HELP_TEXT, EPILOG_TEXT

STDIN_MARKER = "-"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.failures: Dict[str, str] = {}

        # Windows consoles otherwise choke on the status symbols
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="cfprint",
            description="cfprint: whitespace-insensitive Murmur2 content fingerprints",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="*",
            help="Files to fingerprint ('-' reads standard input)"
        )
        parser.add_argument(
            "--input", "-i",
            type=str,
            help="Directory to scan recursively instead of listing files"
        )

        # Filtering options (--input scans only)
        parser.add_argument(
            "--min-size", "-m",
            default="0",
            type=str,
            metavar='',
            help="Minimum file size (e.g., 500KB, 1MB). Default: 0"
        )
        parser.add_argument(
            "--max-size", "-M",
            default="",
            type=str,
            metavar='',
            help="Maximum file size (e.g., 10MB, 1GB). Default: no limit"
        )
        parser.add_argument(
            "--extensions", "-x",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            help="File extensions (space separated) to include (e.g., .jar .zip)"
        )
        parser.add_argument(
            "--excluded-dirs", "-e",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            dest="excluded_dirs",
            help="Excluded/ignored directories (space separated)"
        )

        parser.add_argument(
            "--mode",
            choices=MODE_CHOICES,
            default="standard",
            type=str,
            help=MODE_HELP_TEXT
        )

        # Grouping
        parser.add_argument(
            "--duplicates", "-d",
            action="store_true",
            help="Show groups of files sharing a fingerprint"
        )
        parser.add_argument(
            "--exact",
            action="store_true",
            help="With --duplicates: only group byte-identical files"
        )

        # Output options
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print a JSON object mapping each path to its fingerprint"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and statistics"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.input and args.paths:
            self.error_exit("Pass either files or --input DIR, not both")
        if not args.input and not args.paths:
            self.error_exit("Nothing to fingerprint: pass files, '-' for stdin, or --input DIR")

        if args.exact and not args.duplicates:
            self.error_exit("--exact can only be used with --duplicates")
        if args.duplicates and args.json:
            self.error_exit("--json cannot be combined with --duplicates")
        if args.paths.count(STDIN_MARKER) > 1:
            self.error_exit("Standard input can only be read once")
        if args.duplicates and STDIN_MARKER in args.paths:
            self.error_exit("--duplicates works on files only, not standard input")
        if args.paths and self._has_scan_filters(args):
            self.error_exit("Size, extension and exclusion filters only apply to --input scans")

        if args.input:
            root_path = Path(args.input).resolve()
            if not root_path.exists():
                self.error_exit(f"Directory not found: {args.input}")
            if not root_path.is_dir():
                self.error_exit(f"Path is not a directory: {args.input}")

            try:
                min_size = ConvertUtils.human_to_bytes(args.min_size)
                if args.max_size and ConvertUtils.human_to_bytes(args.max_size) < min_size:
                    self.error_exit("Maximum size cannot be less than minimum size")
            except ValueError as e:
                self.error_exit(f"Invalid size format: {e}")

            for excl_dir in args.excluded_dirs:
                if not Path(excl_dir).resolve().is_dir():
                    self.warning(f"Excluded directory not found: {excl_dir}")

    @staticmethod
    def _has_scan_filters(args: argparse.Namespace) -> bool:
        return (args.min_size != "0" or bool(args.max_size)
                or bool(args.extensions) or bool(args.excluded_dirs))

    def create_params(self, args: argparse.Namespace) -> FingerprintParams:
        """Create FingerprintParams from CLI arguments."""
        try:
            return FingerprintParams.from_human_readable(
                root_dir=str(Path(args.input).resolve()),
                min_size_str=args.min_size,
                max_size_str=args.max_size,
                extensions_str=",".join(args.extensions),
                excluded_dirs=[str(Path(d.strip()).resolve()) for d in args.excluded_dirs],
                mode=MODE_ALIASES[args.mode],
                find_duplicates=args.duplicates,
                exact=args.exact,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """Verbose-only progress line on stderr."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    @staticmethod
    def stopped_flag() -> bool:
        """Check if operation should stop (placeholder for signal handling)."""
        return False

    def fingerprint_paths(self, paths: List[str], mode: FingerprintMode) -> List[FingerprintedFile]:
        """Fingerprint explicitly listed files (and stdin). Unreadable files are recorded as failures."""
        fingerprinter = FingerprinterImpl(mode)
        results = []
        for path in paths:
            try:
                if path == STDIN_MARKER:
                    data = read_stream(sys.stdin.buffer)
                    fingerprint = fingerprinter.compute_bytes(data)
                    size = len(data)
                else:
                    fingerprint = fingerprinter.compute_file(path)
                    size = os.path.getsize(path)
            except OSError as e:
                self.failures[path] = e.strerror or str(e)
                continue
            results.append(FingerprintedFile(path=path, size=size, fingerprint=fingerprint))
        return results

    def run_batch(self, params: FingerprintParams):
        """Execute the directory workflow."""
        if self.verbose:
            print(f"Fingerprinting files (mode: {params.mode.display_name})...", file=sys.stderr)

        try:
            files, groups, stats = FingerprintCommand().execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None,
                stopped_flag=self.stopped_flag
            )
        except RuntimeError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)

        self.failures.update(stats.failed_files)
        return files, groups

    def output_fingerprints(self, files: List[FingerprintedFile], as_json: bool) -> None:
        if as_json:
            print(json.dumps({f.path: f.fingerprint for f in files}, indent=2))
            return
        for file in files:
            print(f"{file.fingerprint}  {file.path}")

    def output_groups(self, groups: List[FingerprintGroup]) -> None:
        if not groups:
            if not self.quiet:
                print("No matching files found.")
            return

        total_files = sum(g.file_count for g in groups)
        if not self.quiet:
            print(f"Found {len(groups)} matching groups ({total_files} files)")

        for idx, group in enumerate(groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"\n📁 Group {idx} | Fingerprint: {group.fingerprint} | Files: {group.file_count} | Size: {size_str}")
            for file in group.files:
                print(f"   {file.path} [{ConvertUtils.bytes_to_human(file.size)}]")

    def report_failures(self) -> None:
        for path, message in self.failures.items():
            print(f"❌ Error: cannot read {path}: {message}", file=sys.stderr)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit code."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        mode = MODE_ALIASES[args.mode]

        if args.input:
            params = self.create_params(args)
            files, groups = self.run_batch(params)
        else:
            files = self.fingerprint_paths(args.paths, mode)
            groups = FileGrouperImpl().find_groups(files, exact=args.exact) if args.duplicates else []

        if args.duplicates:
            self.output_groups(groups)
        else:
            self.output_fingerprints(files, as_json=args.json)

        self.report_failures()

        if self.verbose:
            print(f"\n✅ Completed in {time.time() - self.start_time:.2f} seconds", file=sys.stderr)

        return 1 if self.failures else 0


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
