import csv
import logging
from pathlib import Path

from .models import RunSummary


class SummaryReporter:
    HEADERS = ["Source Path", "Status", "Destination Path", "Capture Time", "Error"]

    def log_summary(self, summary: RunSummary):
        logging.info(
            f"Processed {summary.total} files: {summary.classified} classified, "
            f"{summary.unclassified} unclassified, {len(summary.failures)} failed."
        )
        for outcome in summary.failures:
            logging.error(f"FAILED {outcome.source}: {outcome.error}")

    def write_csv(self, summary: RunSummary, output_csv: Path):
        """One row per file, sorted by source path."""
        logging.info(f"Writing report to {output_csv}")

        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.HEADERS)

            for outcome in sorted(summary.outcomes, key=lambda o: str(o.source)):
                writer.writerow([
                    str(outcome.source),
                    outcome.status,
                    str(outcome.destination) if outcome.destination else "",
                    str(outcome.timestamp) if outcome.timestamp else "",
                    outcome.error or "",
                ])
