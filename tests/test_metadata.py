import pytest
from pathlib import Path
from datetime import date
from date_sorter.metadata.extract import MetadataExtractor
from date_sorter.metadata.resolver import DateResolver
from date_sorter.models import ImageRecord


def test_capture_date_from_real_exif(tmp_path, make_jpeg):
    img = make_jpeg(tmp_path / "shot.jpg", exif_date="2021:06:15 10:30:00")
    assert MetadataExtractor().get_capture_date(img) == date(2021, 6, 15)


def test_no_exif_returns_none(tmp_path, make_jpeg, make_png):
    extractor = MetadataExtractor()
    assert extractor.get_capture_date(make_jpeg(tmp_path / "plain.jpg")) is None
    assert extractor.get_capture_date(make_png(tmp_path / "plain.png")) is None


def test_unreadable_file_returns_none(tmp_path):
    assert MetadataExtractor().get_capture_date(tmp_path / "missing.jpg") is None


def test_zeroed_date_returns_none(tmp_path, make_jpeg):
    img = make_jpeg(tmp_path / "zero.jpg", exif_date="0000:00:00 00:00:00")
    assert MetadataExtractor().get_capture_date(img) is None


def _fake_tags(monkeypatch, tags):
    import date_sorter.metadata.extract as extract_module
    monkeypatch.setattr(extract_module.exifread, "process_file", lambda f, details=False: tags)


def test_date_tag_priority(monkeypatch, tmp_path):
    img = tmp_path / "x.jpg"
    img.write_bytes(b"\xff\xd8\xff")
    _fake_tags(monkeypatch, {
        "Image DateTime": "2022:02:02 02:02:02",
        "EXIF DateTimeOriginal": "2020:01:01 01:01:01",
    })

    assert MetadataExtractor().get_capture_date(img) == date(2020, 1, 1)


def test_unparseable_tag_falls_through(monkeypatch, tmp_path):
    img = tmp_path / "x.jpg"
    img.write_bytes(b"\xff\xd8\xff")
    _fake_tags(monkeypatch, {
        "EXIF DateTimeOriginal": "    :  :     :  :  ",
        "Image DateTime": "2019:12:31 23:59:59",
    })

    assert MetadataExtractor().get_capture_date(img) == date(2019, 12, 31)


def test_exifread_crash_is_absorbed(monkeypatch, tmp_path):
    img = tmp_path / "x.jpg"
    img.write_bytes(b"\xff\xd8\xff")

    def boom(f, details=False):
        raise ValueError("corrupt IFD")

    import date_sorter.metadata.extract as extract_module
    monkeypatch.setattr(extract_module.exifread, "process_file", boom)

    assert MetadataExtractor().get_capture_date(img) is None


class FakeExtractor:
    def __init__(self, dates):
        self.dates = dates

    def get_capture_date(self, path):
        return self.dates.get(path.name)


def test_resolver_tags_record():
    rec = ImageRecord(name="a.jpg", path=Path("/src/a.jpg"))
    resolver = DateResolver(FakeExtractor({"a.jpg": date(2021, 6, 15)}))

    assert resolver.resolve(rec) == date(2021, 6, 15)
    assert (rec.year, rec.month, rec.day) == (2021, 6, 15)
    assert rec.is_dated


def test_resolver_leaves_undated_record_at_zero():
    rec = ImageRecord(name="b.jpg", path=Path("/src/b.jpg"))
    resolver = DateResolver(FakeExtractor({}))

    assert resolver.resolve(rec) is None
    assert (rec.year, rec.month, rec.day) == (0, 0, 0)
    assert not rec.is_dated


def test_resolve_all_returns_dated_subset():
    records = [
        ImageRecord(name="a.jpg", path=Path("/src/a.jpg")),
        ImageRecord(name="b.jpg", path=Path("/src/b.jpg")),
        ImageRecord(name="c.jpg", path=Path("/src/c.jpg")),
    ]
    resolver = DateResolver(FakeExtractor({"a.jpg": date(2021, 1, 1), "c.jpg": date(2022, 3, 4)}))

    dated = resolver.resolve_all(records)

    assert [r.name for r in dated] == ["a.jpg", "c.jpg"]
    assert records[1].year == 0
