"""End-to-end runs of complete tileset descriptions."""

from pathlib import Path

from PIL import Image

from tilemerge.__main__ import main

RED = (255, 0, 0, 255)


def _make_sheet(path: Path) -> None:
    image = Image.new("RGBA", (16, 16), (0, 128, 255, 255))
    # Two keyed rows so the top row survives 2:1 nearest downscaling
    for y in range(2):
        for x in range(16):
            image.putpixel((x, y), (255, 0, 255, 255))
    image.save(path)


def _write_description(directory: Path) -> Path:
    sheet = directory / "sheet.png"
    _make_sheet(sheet)
    xml = directory / "tiles.xml"
    xml.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<tilesets>\n"
        '  <tileset name="mixed" width="3" height="2" tilewidth="8" tileheight="8" '
        'background="#FF0000FF">\n'
        f'    <image source="{sheet}" transparentcolor="#FF00FFFF"/>\n'
        '    <text content="A" size="6" color="#FFFFFFFF"/>\n'
        "    <unknown/>\n"
        f'    <image source="{sheet}"/>\n'
        "  </tileset>\n"
        '  <tileset name="words" width="2" height="1" tilewidth="4" tileheight="4">\n'
        '    <text content="x"/>\n'
        '    <text content="y"/>\n'
        "  </tileset>\n"
        "</tilesets>\n",
        encoding="utf-8",
    )
    return xml


class TestEndToEnd:
    """Test complete files through the CLI."""

    def test_mixed_tileset(self, workdir: Path, app_settings) -> None:
        xml = _write_description(workdir)

        assert main([str(xml)], settings=app_settings) == 0

        with Image.open(workdir / "mixed.png") as image:
            assert image.size == (24, 16)
            assert image.mode == "RGBA"
            # Tile 0: keyed top row, sheet color below
            assert image.getpixel((0, 0)) == (0, 0, 0, 0)
            assert image.getpixel((3, 4)) == (0, 128, 255, 255)
            # Tile 2 is an unknown element: background stays
            assert image.getpixel((16, 0)) == RED
            assert image.getpixel((23, 7)) == RED
            # Tile 3 wraps to the second row, no keying
            assert image.getpixel((0, 8)) == (255, 0, 255, 255)
            # Cells 4 and 5 are empty
            assert image.getpixel((12, 12)) == RED

        with Image.open(workdir / "words.png") as image:
            assert image.size == (8, 4)

    def test_output_is_reproducible(self, workdir: Path, app_settings) -> None:
        """Test two runs on the same input give byte-identical images."""
        xml = _write_description(workdir)

        assert main([str(xml)], settings=app_settings) == 0
        first = (workdir / "mixed.png").read_bytes(), (workdir / "words.png").read_bytes()

        assert main([str(xml)], settings=app_settings) == 0
        second = (workdir / "mixed.png").read_bytes(), (workdir / "words.png").read_bytes()

        assert first == second
