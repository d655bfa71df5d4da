import os
import shutil
import stat
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from .. import config
from ..exceptions import FileOperationError
from ..models import ImageRecord
from .rules import DestinationPlanner


def copy_file(src: Path, dst: Path):
    """
    Copies src to dst byte for byte.

    The source must be a regular file and an existing destination must be a
    regular file too. Copying a file onto itself is a no-op.
    """
    try:
        sst = src.stat()
    except OSError as e:
        raise FileOperationError(f"Cannot stat source {src}: {e}") from e

    if not stat.S_ISREG(sst.st_mode):
        raise FileOperationError(
            f"Non-regular source file {src} ({stat.filemode(sst.st_mode)})"
        )

    try:
        dst_stat = dst.stat()
    except FileNotFoundError:
        dst_stat = None
    except OSError as e:
        raise FileOperationError(f"Cannot stat destination {dst}: {e}") from e

    if dst_stat is not None:
        if not stat.S_ISREG(dst_stat.st_mode):
            raise FileOperationError(
                f"Non-regular destination file {dst} ({stat.filemode(dst_stat.st_mode)})"
            )
        if os.path.samestat(sst, dst_stat):
            logging.debug(f"Source and destination are the same file: {src}")
            return

    copy_file_contents(src, dst)


def copy_file_contents(src: Path, dst: Path):
    """Streams src into dst (created or truncated) and syncs it to disk."""
    with open(src, 'rb') as fin, open(dst, 'wb') as fout:
        shutil.copyfileobj(fin, fout, config.COPY_CHUNK_SIZE)
        fout.flush()
        os.fsync(fout.fileno())

    # Keep timestamps only; a read-only source must not yield a read-only copy
    st = src.stat()
    os.utime(dst, ns=(st.st_atime_ns, st.st_mtime_ns))


class FileCopier:
    def __init__(self, planner: DestinationPlanner):
        self.planner = planner

    def execute(self, plan: Dict[Path, List[ImageRecord]], dry_run: bool = False) -> Tuple[int, int]:
        """
        Copies every planned image into its date folder.

        Per-file failures are logged and the batch carries on.
        Returns (copied, failed).
        """
        tasks = [(r.path, self.planner.dest_path(r)) for records in plan.values() for r in records]

        if not tasks:
            logging.info("No images need copying.")
            return 0, 0

        logging.info(f"Copying {len(tasks)} images (DryRun={dry_run})...")

        copied = 0
        failed = 0
        for src, dest in tqdm(tasks, desc="Copying"):
            if dry_run:
                logging.info(f"[DRY RUN] Copy {src} -> {dest}")
                continue

            try:
                copy_file(src, dest)
                copied += 1
            except (FileOperationError, OSError) as e:
                failed += 1
                logging.error(f"Something went wrong while copying the image {src} to {dest}: {e}")

        return copied, failed
