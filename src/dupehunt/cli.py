#!/usr/bin/env python3
"""
dupehunt CLI — command line interface for duplicate file detection and removal.
Positional arguments are root directories (default: current directory).
Reports duplicates as human-readable text, brief `hash:path` lines or JSON,
or removes all but one file per duplicate group.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
import logging
from typing import List, Optional, NoReturn

from dupehunt.core.models import DeduplicationParams, DuplicateGroup, OutputFormat, RemovalMethod
from dupehunt.core.hasher import DEFAULT_HASH_ALGORITHM
from dupehunt.commands import DeduplicationCommand
from dupehunt.utils.convert_utils import ConvertUtils
from dupehunt.services.file_service import FileService
from dupehunt.services.duplicate_service import DuplicateService, RemovalResult
from dupehunt.services.report_service import ReportService
from dupehunt.aliases import (
    EXIT_OK, EXIT_DUPLICATES_FOUND, EXIT_ERROR, EXIT_INTERRUPTED,
    HASH_HELP_TEXT, SORT_ALIASES, SORT_CHOICES, SORT_HELP_TEXT, EPILOG_TEXT
)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles; undecodable file-name bytes are escaped, never fatal
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding="utf-8", errors="backslashreplace")

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupehunt",
            description="dupehunt — multi-threaded duplicate file finder",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "roots",
            nargs="*",
            metavar="ROOT",
            help="Directories to scan (default: current directory)"
        )

        # Hashing options
        parser.add_argument(
            "--hash", "-H",
            dest="hash_name",
            default=DEFAULT_HASH_ALGORITHM.value,
            type=str,
            metavar="NAME",
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--threads", "-t",
            default=None,
            type=int,
            metavar="N",
            help="Number of worker threads (>= 1). Default: number of CPU cores"
        )
        parser.add_argument(
            "--sort",
            choices=SORT_CHOICES,
            default="discovery",
            type=str,
            help=SORT_HELP_TEXT
        )

        # Filtering options
        parser.add_argument(
            "--exclude", "-e",
            action="append",
            default=[],
            type=str,
            metavar="GLOB",
            dest="exclude",
            help="Skip roots and files matching this glob (full path or file name). Repeatable"
        )
        parser.add_argument(
            "--skip-empty", "-z",
            action="store_true",
            help="Ignore zero-byte files"
        )
        parser.add_argument(
            "--max-size", "-M",
            default=None,
            type=str,
            metavar="SIZE",
            help="Ignore files larger than SIZE (bytes, or e.g. 500K, 10MB, 1GB)"
        )

        # Output options
        output_group = parser.add_mutually_exclusive_group()
        output_group.add_argument(
            "--brief", "-b",
            action="store_true",
            help="Print one '<hash>:<path>' line per duplicate file"
        )
        output_group.add_argument(
            "--json", "-j",
            action="store_true",
            help="Print the duplicate groups as JSON"
        )

        # Actions
        parser.add_argument(
            "--remove", "-r",
            action="store_true",
            help="Delete all but the first file of every duplicate group"
        )
        parser.add_argument(
            "--prompt", "-p",
            action="store_true",
            help="Ask before each deletion (requires --remove)"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move removed files to the system trash instead of deleting them (requires --remove)"
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what --remove would delete without touching any file"
        )

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics and progress"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.threads is not None and args.threads < 1:
            self.error_exit(f"Thread count must be at least 1, got {args.threads}")

        for flag, value in (("--prompt", args.prompt), ("--trash", args.trash), ("--dry-run", args.dry_run)):
            if value and not args.remove:
                self.error_exit(f"{flag} can only be used with --remove")

        if args.remove and (args.json or args.brief):
            self.error_exit("--json and --brief are report formats and cannot be combined with --remove")

        if args.prompt and not args.dry_run and not sys.stdin.isatty():
            self.error_exit(
                "Cannot prompt for confirmation in a non-interactive session.\n"
                "Drop --prompt to remove duplicates without confirmation."
            )

        if args.max_size is not None:
            try:
                ConvertUtils.human_to_bytes(args.max_size)
            except ValueError as e:
                self.error_exit(f"Invalid size format: {e}")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments and process state."""
        try:
            max_size_bytes = None
            if args.max_size is not None:
                max_size_bytes = ConvertUtils.human_to_bytes(args.max_size)

            return DeduplicationParams(
                working_dir=os.getcwd(),
                cpu_count=os.cpu_count() or 1,
                roots=list(args.roots),
                threads=args.threads,
                exclude_patterns=list(args.exclude),
                skip_empty=args.skip_empty,
                max_size_bytes=max_size_bytes,
                algorithm=args.hash_name,
                sort_order=SORT_ALIASES[args.sort]
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def output_format(args: argparse.Namespace) -> OutputFormat:
        if args.json:
            return OutputFormat.JSON
        if args.brief:
            return OutputFormat.BRIEF
        return OutputFormat.HUMAN

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_deduplication(self, params: DeduplicationParams, command: DeduplicationCommand) -> List[DuplicateGroup]:
        """Execute the scan → hash → group workflow."""
        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except RuntimeError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)

        return groups

    def output_results(self, groups: List[DuplicateGroup], fmt: OutputFormat, algorithm_name: str) -> None:
        """Print duplicate groups in the selected format, in core order."""
        report = ReportService()

        if fmt == OutputFormat.JSON:
            print(report.to_json(groups, algorithm_name))
            return

        if fmt == OutputFormat.BRIEF:
            for line in report.brief_lines(groups):
                print(line)
            return

        if not groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        for line in report.human_lines(groups, bold=sys.stdout.isatty()):
            print(line)

        if not self.quiet:
            total_files = sum(g.duplicate_count for g in groups)
            print(f"\nFound {len(groups)} duplicate groups ({total_files} files)")

    def confirm_removal(self, group: DuplicateGroup, path: str) -> bool:
        """Interactive yes/no question before one deletion."""
        prompt = (f"Delete {ConvertUtils.printable_path(path)} "
                  f"(copy of {ConvertUtils.printable_path(group.kept)})? [y/N]: ")
        try:
            response = input(prompt)
        except EOFError:
            print()
            return False
        return response.strip().lower() in ("y", "yes")

    def execute_removal(self, groups: List[DuplicateGroup], args: argparse.Namespace) -> None:
        """Keep the first file per group, remove the rest."""
        if not groups:
            if not self.quiet:
                print("No duplicate groups found.")
            return

        files_to_delete = DuplicateService.keep_only_one_file_per_group(groups)

        if not self.quiet or args.dry_run:
            for idx, group in enumerate(groups, 1):
                print(f"Group {idx} | {group.hash} | Files: {group.duplicate_count}")
                print(f"   [KEEP] {ConvertUtils.printable_path(group.kept)}")
                for path in group.redundant:
                    print(f"   [DEL]  {ConvertUtils.printable_path(path)}")
            print(f"\nSummary: {len(groups)} files kept, {len(files_to_delete)} files to remove")

        if args.dry_run:
            print("Dry run: no files were removed.")
            return

        method = RemovalMethod.TRASH if args.trash else RemovalMethod.DELETE
        result = DuplicateService.remove_duplicates(
            groups,
            delete=FileService.remover_for(method),
            confirm=self.confirm_removal if args.prompt else None,
            size_of=lambda p: FileService.describe(p).size
        )
        self.report_removal(result, method)

    def report_removal(self, result: RemovalResult, method: RemovalMethod) -> None:
        verb = "moved to trash" if method == RemovalMethod.TRASH else "deleted"
        if result.failed:
            print(f"\n⚠️  Partial success: {len(result.deleted)}/{result.attempted} files {verb}.")
            print(f"Failed to remove {len(result.failed)} file(s):")
            for path, error in result.failed[:5]:  # Show first 5 errors
                print(f"  • {ConvertUtils.printable_path(path)}: {error}")
            if len(result.failed) > 5:
                print(f"  ...and {len(result.failed) - 5} more files")
        elif not self.quiet:
            print(f"\n✅ {len(result.deleted)} files {verb}.")

        if not self.quiet:
            if result.declined:
                print(f"Kept {len(result.declined)} file(s) on request.")
            print(f"Total space freed: {ConvertUtils.bytes_to_human(result.bytes_freed)}")

    def configure_logging(self) -> None:
        logging.basicConfig(format=LOG_FORMAT)
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.getLogger("dupehunt").setLevel(level)

    @staticmethod
    def error_exit(message: str, code: int = EXIT_ERROR) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit status."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        self.validate_args(args)
        params = self.create_params(args)

        command = DeduplicationCommand()
        groups = self.run_deduplication(params, command)

        if args.remove:
            self.execute_removal(groups, args)
            exit_code = EXIT_OK
        else:
            self.output_results(groups, self.output_format(args), command.algorithm_name)
            exit_code = EXIT_DUPLICATES_FOUND if groups else EXIT_OK

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"Completed in {elapsed:.2f} seconds", file=sys.stderr)
        return exit_code


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
