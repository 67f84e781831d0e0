"""
cli_entry.py - CLI Entry Point

Parses options, runs the rename pipeline and maps its outcome to an exit code
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import settings
from ..core import (
    OutcomeKind, RenameOptions, RunOutcome,
    find_temp_files, run_bulk_rename,
)
from .cli_interactive import console_confirm, review_plan

logger = logging.getLogger(__name__)

EXIT_CODES = {
    OutcomeKind.COMPLETED: 0,
    OutcomeKind.NO_MATCH: 0,
    OutcomeKind.PREVIEWED: 0,
    OutcomeKind.CANCELLED: 0,
    OutcomeKind.FAILED: 1,
    OutcomeKind.INVALID: 2,
}


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="bulk-rename",
        description="Rename the files of a directory with a prefix, the original name and a sequence number",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # photo_01.jpg, photo_02.jpg, ...
  bulk-rename --dir ./photos --pattern "*.jpg" --prefix photo_ --suffix

  # Number scans by the last number in their names (scan2 before scan10)
  bulk-rename --dir ./scans --pattern "*.png" --sortnum --origin --suffix

  # Show the plan only
  bulk-rename --pattern "*.txt" --prefix old_ --dry-run
"""
    )

    parser.add_argument("--dir", type=str, default=".", help="File location (not searched recursively)")
    parser.add_argument("--pattern", type=str, required=True, help="Search pattern of target files (e.g., *.jpg)")
    parser.add_argument("--sortnum", action="store_true", help="Sort original files by the numeric value in the file name")
    parser.add_argument("--prefix", type=str, default=None, help="Prefix of renamed files")
    parser.add_argument("--origin", action="store_true", help="Include the original file name in the renamed file")
    parser.add_argument("--suffix", action="store_true", help="Add a sequence number at the end of renamed files")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    parser.add_argument("--log-dir", type=str, default=settings.LOG_DIR or None,
                        help="Directory for JSON plan/result logs")
    parser.add_argument("--log-level", type=str, default=settings.LOG_LEVEL.upper(),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")

    return parser


def options_from_args(args: argparse.Namespace) -> RenameOptions:
    """Build rename options from parsed arguments"""
    return RenameOptions(
        source_dir=Path(args.dir),
        file_pattern=args.pattern,
        sort_by_number=args.sortnum,
        prefix=args.prefix,
        use_original_name=args.origin,
        add_sequence=args.suffix,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )


def _on_progress(current: int, total: int, msg: str) -> None:
    logger.info(f"[{current}/{total}] {msg}")


def report_outcome(outcome: RunOutcome, directory: Path) -> None:
    """Write the outcome of a run to the log"""
    kind = outcome.kind

    if kind in (OutcomeKind.COMPLETED, OutcomeKind.NO_MATCH, OutcomeKind.PREVIEWED, OutcomeKind.CANCELLED):
        logger.info(outcome.message)
    elif kind == OutcomeKind.INVALID:
        logger.error("Nothing was renamed:")
        for err in outcome.errors:
            logger.error(f"  - {err}")
    elif kind == OutcomeKind.FAILED:
        logger.error(outcome.message)
        if outcome.result is not None:
            logger.error(outcome.result.summary())
        leftovers = find_temp_files(directory)
        for temp in leftovers:
            logger.warning(f"Temporary file left behind: {temp}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    options = options_from_args(args)
    confirm = (lambda plan: True) if args.yes else console_confirm

    try:
        outcome = run_bulk_rename(
            options,
            confirm=confirm,
            review=review_plan,
            dry_run=args.dry_run,
            progress_callback=_on_progress,
            log_dir=Path(args.log_dir) if args.log_dir else None,
        )
    except KeyboardInterrupt:
        logger.warning("\nInterrupted")
        return 130

    report_outcome(outcome, options.source_dir)
    return EXIT_CODES[outcome.kind]


if __name__ == "__main__":
    sys.exit(main())
