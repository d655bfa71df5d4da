"""
Custom exception hierarchy for the date sorter.

Each error class maps onto one failure mode of a run: bad command line input,
unreadable metadata, a destination folder that cannot be created, or a single
file that cannot be copied.
"""


class DateSorterError(Exception):
    """Base exception for all date sorter errors."""
    pass


class ConfigurationError(DateSorterError):
    """Raised when the run cannot start because of invalid input."""

    def __init__(self, message: str, exit_code: int = 2):
        super().__init__(message)
        self.exit_code = exit_code


class SourceUnavailableError(ConfigurationError):
    """Raised when the source directory cannot be opened at all."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=1)


class MetadataExtractionError(DateSorterError):
    """Raised when a capture date cannot be extracted from a file."""
    pass


class DirectoryCreationError(DateSorterError):
    """Raised when a destination date folder cannot be created."""
    pass


class FileOperationError(DateSorterError):
    """Raised when a file copy fails."""
    pass
