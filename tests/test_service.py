"""Tests for the file-level tileset driver."""

from pathlib import Path

import pytest
from PIL import Image

from tilemerge.errors import FileOpenError, MissingSourceError, ParseError
from tilemerge.tilesets.service import TilesetService
from tilemerge.tilesets.xml_events import XmlEventStream


def _write(path: Path, xml: str) -> Path:
    path.write_text(xml, encoding="utf-8")
    return path


class TestMergeFile:
    """Test discovery of tileset elements in a file."""

    def test_single_root_tileset(self, workdir: Path) -> None:
        xml = _write(workdir / "one.xml", '<tileset name="solo" width="2"/>')
        written = TilesetService().merge_file(xml)
        assert written == [Path("solo.png")]
        with Image.open(workdir / "solo.png") as image:
            assert image.size == (64, 32)

    def test_wrapped_tilesets_in_order(self, workdir: Path) -> None:
        """Test several tilesets under a wrapper root are processed in order."""
        xml = _write(
            workdir / "many.xml",
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<tilesets>\n"
            '  <tileset name="first" tilewidth="4" tileheight="4"/>\n'
            "  <group>\n"
            '    <tileset name="second" tilewidth="8" tileheight="2"/>\n'
            "  </group>\n"
            "</tilesets>\n",
        )
        written = TilesetService().merge_file(str(xml))
        assert written == [Path("first.png"), Path("second.png")]
        with Image.open(workdir / "second.png") as image:
            assert image.size == (8, 2)

    def test_non_tileset_root_not_composed(self, workdir: Path) -> None:
        """Test only elements named tileset produce images."""
        xml = _write(workdir / "none.xml", '<map name="m"><image source="x.png"/></map>')
        assert TilesetService().merge_file(xml) == []
        assert list(workdir.glob("*.png")) == []

    def test_missing_file(self, workdir: Path) -> None:
        with pytest.raises(FileOpenError) as excinfo:
            TilesetService().merge_file(workdir / "missing.xml")
        assert excinfo.value.id == 0
        assert excinfo.value.is_usage_error

    def test_malformed_xml(self, workdir: Path) -> None:
        xml = _write(workdir / "bad.xml", "<tilesets><oops></tilesets>")
        with pytest.raises(ParseError):
            TilesetService().merge_file(xml)

    def test_empty_file(self, workdir: Path) -> None:
        xml = _write(workdir / "empty.xml", "")
        with pytest.raises(ParseError):
            TilesetService().merge_file(xml)

    def test_error_aborts_remaining_tilesets(self, workdir: Path) -> None:
        """Test earlier outputs stay, the failing and later tilesets are not written."""
        xml = _write(
            workdir / "abort.xml",
            "<tilesets>"
            '<tileset name="ok"/>'
            '<tileset name="broken"><image/></tileset>'
            '<tileset name="later"/>'
            "</tilesets>",
        )
        with pytest.raises(MissingSourceError):
            TilesetService().merge_file(xml)
        assert (workdir / "ok.png").exists()
        assert not (workdir / "broken.png").exists()
        assert not (workdir / "later.png").exists()

    def test_unwritable_name_does_not_stop_later_tilesets(self, workdir: Path) -> None:
        """Test an output that cannot be written is skipped, later tilesets still run."""
        xml = _write(
            workdir / "unwritable.xml",
            "<tilesets>"
            '<tileset name="nodir/x"/>'
            '<tileset name="after"/>'
            "</tilesets>",
        )
        written = TilesetService().merge_file(xml)
        assert written == [Path("after.png")]
        assert (workdir / "after.png").exists()
        assert not (workdir / "nodir").exists()


class TestMergeEvents:
    """Test the driver on in-memory documents."""

    def test_merge_events(self, workdir: Path) -> None:
        events = XmlEventStream.from_bytes(b'<tileset name="mem" tilewidth="2" tileheight="2"/>')
        assert TilesetService().merge_events(events) == [Path("mem.png")]

    def test_uses_settings(self, app_settings) -> None:
        app_settings.font_family = "Helvetica"
        service = TilesetService(app_settings)
        assert service.composer.text_generator.font_family == "Helvetica"
