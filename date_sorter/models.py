from dataclasses import dataclass
from pathlib import Path


@dataclass
class ImageRecord:
    """
    An image found during a scan.

    Date fields stay at zero until the DateResolver assigns a capture date.
    """
    name: str
    path: Path
    year: int = 0
    month: int = 0
    day: int = 0

    @property
    def is_dated(self) -> bool:
        return self.year > 0 and self.month > 0 and self.day > 0


@dataclass
class OrganizeSummary:
    found: int = 0
    dated: int = 0
    undated: int = 0
    directories: int = 0
    copied: int = 0
    failed: int = 0
    dry_run: bool = True
