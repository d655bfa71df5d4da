import pytest
from pathlib import Path
from PIL import Image

# IFD0 DateTime, reported by exifread as 'Image DateTime'
EXIF_DATETIME = 0x0132


@pytest.fixture
def make_jpeg():
    """Returns a factory writing a small real JPEG, optionally with an EXIF date."""
    def _make(path: Path, exif_date=None, color="red") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with Image.new("RGB", (16, 16), color=color) as im:
            if exif_date is None:
                im.save(path, format="JPEG")
            else:
                exif = Image.Exif()
                exif[EXIF_DATETIME] = exif_date
                im.save(path, format="JPEG", exif=exif)
        return path
    return _make


@pytest.fixture
def make_png():
    """Returns a factory writing a small PNG without any EXIF."""
    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with Image.new("RGB", (8, 8), color="green") as im:
            im.save(path, format="PNG")
        return path
    return _make
