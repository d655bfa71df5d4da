import logging
from datetime import date
from typing import Iterable, List, Optional

from ..models import ImageRecord
from .extract import MetadataExtractor


class DateResolver:
    def __init__(self, extractor: Optional[MetadataExtractor] = None):
        self.extractor = extractor or MetadataExtractor()

    def resolve(self, record: ImageRecord) -> Optional[date]:
        """
        Tags the record with its capture date.

        Returns the date, or None if the image has no extractable date, in
        which case the record keeps its zeroed date fields.
        """
        capture = self.extractor.get_capture_date(record.path)
        if capture is None:
            return None

        record.year = capture.year
        record.month = capture.month
        record.day = capture.day
        return capture

    def resolve_all(self, records: Iterable[ImageRecord]) -> List[ImageRecord]:
        """Resolves every record and returns the ones that received a date."""
        dated = []
        for record in records:
            if self.resolve(record) is None:
                logging.debug(f"No capture date, skipping: {record.path}")
                continue
            dated.append(record)
        return dated
