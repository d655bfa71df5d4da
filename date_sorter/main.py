import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .core import DateSorterApp
from .exceptions import ConfigurationError, DirectoryCreationError
from . import config


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the error stream and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )

    # Turn down exifread's own chatter (it logs "File format not recognized")
    logging.getLogger("exifread").setLevel(logging.ERROR)


def parse_bool(value: str) -> bool:
    """Parses true/false spellings like "-dry-run=false"."""
    v = value.strip().lower()
    if v in ("1", "t", "true", "yes"):
        return True
    if v in ("0", "f", "false", "no"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Copy images into YEAR/MONTH/DAY folders based on their EXIF capture date.")

    p.add_argument("--source", "-source", type=Path, default=Path(config.DEFAULT_SOURCE),
                   help="Folder with unorganised images. Must be an existing folder. (default: ./)")
    p.add_argument("--destination", "-destination", type=Path, required=True,
                   help="Folder to copy the images into. Date folders are created below it.")
    p.add_argument("--dry-run", action=argparse.BooleanOptionalAction, default=True,
                   help="Only report what would be done. Pass --no-dry-run to actually make changes.")
    p.add_argument("-dry-run", dest="dry_run", type=parse_bool, nargs="?", const=True, default=True,
                   help="Same as --dry-run, spelled -dry-run=false to turn it off.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")

    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    src_root = args.source.absolute()
    dest_root = args.destination.absolute()

    setup_logging(args.verbose, args.log_file)

    logging.info("=== Date Sorter Started ===")
    logging.info(f"Source: {src_root}")
    logging.info(f"Dest:   {dest_root}")
    if args.dry_run:
        logging.info("Dry run: nothing will be written. Pass --no-dry-run to apply.")

    app = DateSorterApp()

    try:
        app.organize(src_root=src_root, dest_root=dest_root, dry_run=args.dry_run)
    except ConfigurationError as e:
        logging.error(str(e))
        return e.exit_code
    except DirectoryCreationError as e:
        logging.error(str(e))
        return 1
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return 1
    except Exception:
        logging.exception("Fatal error during organization.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
