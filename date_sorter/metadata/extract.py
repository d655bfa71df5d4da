import logging
from pathlib import Path
from datetime import date, datetime
from typing import Optional, Dict, Any

import exifread

from .. import config
from ..exceptions import MetadataExtractionError


class MetadataExtractor:
    """
    Reads capture dates from embedded EXIF metadata using 'exifread'.

    Only EXIF is consulted: there is no fallback to file system timestamps.
    """

    def get_capture_date(self, path: Path) -> Optional[date]:
        """
        Returns the calendar date the image was captured, or None when the
        file is unreadable, carries no EXIF, or has no usable date tag.
        """
        try:
            tags = self._read_tags(path)
        except MetadataExtractionError as e:
            logging.debug(str(e))
            return None

        dt = self._parse_exif_date(tags)
        if dt is None:
            # EXIF present but no usable datetime: debug-level note only.
            logging.debug(
                "EXIF tags present but no datetime found for %s (tags tried: %s)",
                path,
                ", ".join(config.DATE_TAGS),
            )
            return None

        return dt.date()

    def _read_tags(self, path: Path) -> Dict[str, Any]:
        try:
            with path.open('rb') as f:
                # details=False skips maker notes and thumbnails
                tags = exifread.process_file(f, details=False)
        except Exception as e:
            # exifread raises a range of errors on corrupt or truncated files
            raise MetadataExtractionError(f"EXIF read failed for {path}: {e}") from e

        if not tags:
            raise MetadataExtractionError(f"No EXIF tags found for {path}")
        return tags

    def _parse_exif_date(self, tags) -> Optional[datetime]:
        """Helper to parse standard EXIF date strings from exifread."""
        for tag in config.DATE_TAGS:
            if tag in tags:
                try:
                    # EXIF format is usually "YYYY:MM:DD HH:MM:SS"
                    dt_str = str(tags[tag]).strip().replace(':', '-', 2)
                    return datetime.strptime(dt_str, config.EXIF_DATE_FORMAT)
                except ValueError:
                    # Blank or zeroed dates ("0000:00:00 00:00:00") end up here
                    continue
        return None
