import logging
from pathlib import Path

from .scanning.filesystem import ImageScanner, validate_source
from .metadata.resolver import DateResolver
from .organization.rules import DestinationPlanner
from .organization.mover import FileCopier
from .models import OrganizeSummary


class DateSorterApp:
    def __init__(self):
        self.scanner = ImageScanner()
        self.resolver = DateResolver()

    def organize(self, src_root: Path, dest_root: Path, dry_run: bool = True) -> OrganizeSummary:
        """
        Runs the whole pipeline once, strictly in sequence.
        1. Scan (find images by content)
        2. Resolve (read EXIF capture dates)
        3. Plan (create one folder per date)
        4. Execute (copy)

        Raises ConfigurationError for a bad source and DirectoryCreationError
        if a date folder cannot be created. Per-file problems are only logged.
        """
        validate_source(src_root)
        summary = OrganizeSummary(dry_run=dry_run)

        # --- Step 1: Scanning ---
        logging.info(f"Scanning {src_root}...")
        images = list(self.scanner.scan(src_root))
        summary.found = len(images)
        if self.scanner.errors:
            logging.warning(f"{self.scanner.errors} entries could not be read and were skipped.")
        logging.info(f"Scan complete. Found {summary.found} images.")

        # --- Step 2: Capture dates ---
        dated = self.resolver.resolve_all(images)
        summary.dated = len(dated)
        summary.undated = summary.found - summary.dated
        if summary.undated:
            logging.info(f"{summary.undated} images have no EXIF capture date and will be skipped.")

        # --- Step 3: Planning ---
        logging.info("Planning destinations...")
        planner = DestinationPlanner(dest_root)
        plan = planner.plan(dated)
        summary.directories = planner.ensure_dirs(plan.keys(), dry_run=dry_run)

        # --- Step 4: Execution ---
        copier = FileCopier(planner)
        summary.copied, summary.failed = copier.execute(plan, dry_run=dry_run)

        logging.info(
            f"Done. images={summary.found} dated={summary.dated} undated={summary.undated} "
            f"folders={summary.directories} copied={summary.copied} failed={summary.failed}"
        )
        return summary
