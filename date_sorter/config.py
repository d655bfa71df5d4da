"""
Configuration constants for the date sorter.
"""

# --- Content Sniffing ---
# Signature matchers need at most this many leading bytes to recognise a format
SNIFF_BYTES = 261

# --- Metadata Parsing ---
DATE_TAGS = [
    'EXIF DateTimeOriginal',
    'EXIF DateTimeDigitized',
    'Image DateTime',
]
EXIF_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Organization ---
FOLDER_PATTERN = "{year:04d}/{month:02d}/{day:02d}"
DIR_MODE = 0o755  # rwxr-xr-x

# --- Copying ---
COPY_CHUNK_SIZE = 64 * 1024  # 64 KB chunks for streaming copies

# --- CLI Defaults ---
DEFAULT_SOURCE = "./"
