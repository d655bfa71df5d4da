import os
import logging
from pathlib import Path
from typing import Iterator

from ..exceptions import ConfigurationError, SourceUnavailableError
from ..models import ImageRecord
from .classify import is_image_file


def validate_source(root: Path):
    """
    Makes sure the source root can be scanned.

    A missing or unreadable root raises SourceUnavailableError (exit code 1),
    a root that is not a directory raises ConfigurationError (exit code 2).
    """
    try:
        st = root.stat()
    except OSError as e:
        raise SourceUnavailableError(f"Cannot open source {root}: {e}") from e

    if not root.is_dir():
        raise ConfigurationError(f"{root} is not a directory!")

    if not os.access(root, os.R_OK | os.X_OK):
        raise SourceUnavailableError(f"Cannot read source directory {root} (mode {oct(st.st_mode & 0o777)})")


class ImageScanner:
    def __init__(self):
        # Entries skipped because of traversal errors during the last scan
        self.errors = 0

    def scan(self, root: Path) -> Iterator[ImageRecord]:
        """
        Generator that yields an ImageRecord for every image below root.

        Images are recognised by their leading bytes. Unreadable entries are
        logged and skipped; the walk itself never aborts.
        """
        self.errors = 0

        for path in self._iter_files(root):
            try:
                if not is_image_file(path):
                    continue
            except OSError as e:
                self.errors += 1
                logging.warning(f"Cannot read {path}: {e}")
                continue

            yield ImageRecord(name=path.name, path=path.absolute())

    def _iter_files(self, root: Path) -> Iterator[Path]:
        """Depth-first walker using os.scandir for speed."""
        stack = [root]
        while stack:
            current = stack.pop()

            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                self.errors += 1
                logging.warning(f"Cannot list directory {current}: {e}")
                continue

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name.lower())

            dirs = []
            files = []
            for e in entries:
                try:
                    if e.is_dir(follow_symlinks=False):
                        dirs.append(Path(e.path))
                    elif e.is_file():
                        files.append(Path(e.path))
                    elif e.is_symlink():
                        if os.path.exists(e.path):
                            logging.debug(f"Not following directory symlink: {e.path}")
                        else:
                            self.errors += 1
                            logging.warning(f"Broken symlink: {e.path}")
                except OSError as err:
                    self.errors += 1
                    logging.warning(f"Cannot stat {e.path}: {err}")

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                yield f
