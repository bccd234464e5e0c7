import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from . import config
from .exceptions import PlacementError
from .metadata.extract import MetadataExtractor
from .models import FileOutcome, RunSummary
from .organization.mover import FilePlacer
from .organization.rules import DestinationPlanner
from .scanning.filesystem import DiskScanner
from .validation import validate


class PhotoSorterApp:
    def __init__(self,
                 max_workers: Optional[int] = None,
                 show_progress: bool = True,
                 max_collision_attempts: int = config.MAX_COLLISION_ATTEMPTS):
        self.max_workers = max_workers or config.DEFAULT_WORKERS
        self.show_progress = show_progress
        self.scanner = DiskScanner()
        self.metadata = MetadataExtractor()
        self.placer = FilePlacer(max_collision_attempts)

    def organize(self, src_root: Path, dest_root: Path) -> RunSummary:
        """
        Copies every file under src_root into dest_root.
        1. Validate (raises SetupError, nothing is touched)
        2. Scan
        3. Dispatch one task per file to the worker pool

        Per-file failures are recorded in the returned summary; they never
        stop the remaining files.
        """
        validate(src_root, dest_root)

        logging.info("Please wait, indexing files...")
        skip_dirs = {dest_root} if src_root in dest_root.parents else set()
        files = list(self.scanner.iter_files(src_root, skip_dirs))
        logging.info(f"Indexed {len(files)} files, processing with {self.max_workers} workers...")

        return self.process(files, src_root, dest_root)

    def process(self, files, src_root: Path, dest_root: Path) -> RunSummary:
        summary = RunSummary()
        planner = DestinationPlanner(src_root, dest_root)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor, \
                tqdm(total=len(files), desc="Sorting", unit="file",
                     disable=not self.show_progress) as bar:
            futures = [executor.submit(self.process_file, path, planner) for path in files]

            for future in as_completed(futures):
                summary.add(future.result())
                bar.update(1)

        return summary

    def process_file(self, path: Path, planner: DestinationPlanner) -> FileOutcome:
        """Extract -> plan -> place for a single file. Never raises."""
        outcome = FileOutcome(source=path)
        try:
            outcome.timestamp = self.metadata.get_capture_timestamp(path)
            plan = planner.plan(path, outcome.timestamp)
            outcome.destination = self.placer.place(path, plan)
        except PlacementError as e:
            logging.error(str(e))
            outcome.error = str(e)
        except Exception as e:
            logging.exception(f"Unexpected error processing {path}")
            outcome.error = f"{type(e).__name__}: {e}"
        return outcome
