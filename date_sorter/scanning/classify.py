import logging
from pathlib import Path

import filetype

from .. import config


def looks_like_image(head: bytes) -> bool:
    """True if the leading bytes match a known image signature."""
    # filetype treats str input as a path, so always hand it bytes
    return filetype.is_image(bytes(head))


def is_image_file(path: Path) -> bool:
    """
    Reads the first SNIFF_BYTES of a file and classifies it by content.
    The file extension is never consulted.

    Raises OSError if the file cannot be opened or read.
    """
    with path.open('rb') as f:
        head = f.read(config.SNIFF_BYTES)

    if looks_like_image(head):
        return True

    logging.debug(f"Not an image (signature mismatch): {path}")
    return False
