import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .core import PhotoSorterApp
from .exceptions import SetupError
from .reporting import SummaryReporter

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        # Never inside the target: it has to be empty when the run starts
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Simple photo organization: copy files into a year/month/day tree")

    p.add_argument("src", type=Path, help="Source directory")
    p.add_argument("dest", type=Path, help="Target directory (must be empty or missing)")

    p.add_argument("--workers", type=int, default=None, help="Number of parallel workers (default: CPU count)")
    p.add_argument("--report-csv", type=Path, default=None, help="Write a per-file CSV report to this path")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    src_root = args.src.resolve()
    dest_root = args.dest.resolve()

    log_file = args.log_file.resolve() if args.log_file else None
    if log_file and dest_root in log_file.parents:
        setup_logging(args.verbose)
        logging.error(f"Log file {log_file} must not be inside the target directory {dest_root}")
        return EXIT_FATAL

    setup_logging(args.verbose, log_file)

    logging.info("=== Photo Sorter Started ===")
    logging.info(f"Source: {src_root}")
    logging.info(f"Dest:   {dest_root}")

    app = PhotoSorterApp(max_workers=args.workers, show_progress=not args.no_progress)

    try:
        summary = app.organize(src_root, dest_root)
    except SetupError as e:
        logging.error(str(e))
        return EXIT_FATAL
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return EXIT_FATAL

    reporter = SummaryReporter()
    reporter.log_summary(summary)
    if args.report_csv:
        reporter.write_csv(summary, args.report_csv)

    return EXIT_OK if summary.ok else EXIT_PARTIAL


if __name__ == "__main__":
    sys.exit(main())
