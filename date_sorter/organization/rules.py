import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .. import config
from ..exceptions import DirectoryCreationError
from ..models import ImageRecord


class DestinationPlanner:
    def __init__(self, dest_root: Path):
        self.dest_root = dest_root

    def dest_dir(self, record: ImageRecord) -> Path:
        """Date folder for a record: DEST/YYYY/MM/DD."""
        return self.dest_root / config.FOLDER_PATTERN.format(
            year=record.year, month=record.month, day=record.day
        )

    def dest_path(self, record: ImageRecord) -> Path:
        # Original filename is kept; same-named files on one day overwrite each other
        return self.dest_dir(record) / record.name

    def plan(self, records: Iterable[ImageRecord]) -> Dict[Path, List[ImageRecord]]:
        """
        Groups dated records by destination folder, in first-seen order.
        Undated records are left out.
        """
        plan: Dict[Path, List[ImageRecord]] = {}
        for record in records:
            if not record.is_dated:
                continue
            plan.setdefault(self.dest_dir(record), []).append(record)
        return plan

    def ensure_dirs(self, dirs: Iterable[Path], dry_run: bool = False) -> int:
        """
        Creates every missing date folder (and its parents).

        Returns the number of folders created. Any failure raises
        DirectoryCreationError; callers treat it as fatal.
        """
        created = 0
        for folder in dirs:
            if folder.is_dir():
                continue

            if dry_run:
                logging.info(f"[DRY RUN] Create directory {folder}")
                created += 1
                continue

            try:
                self._mkdir_levels(folder)
            except OSError as e:
                raise DirectoryCreationError(
                    f"Something went wrong while creating the directory {folder}: {e}"
                ) from e

            logging.debug(f"Created directory {folder}")
            created += 1
        return created

    def _mkdir_levels(self, folder: Path):
        """Creates folder and its missing parents top-down, each with DIR_MODE."""
        # mkdir(parents=True) would ignore the mode for intermediate levels
        missing = [folder]
        for parent in folder.parents:
            if parent.is_dir():
                break
            missing.append(parent)

        for level in reversed(missing):
            level.mkdir(mode=config.DIR_MODE, exist_ok=True)
