"""Shared fixtures for TileMerge tests."""

import os

# Must be set before any QGuiApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image
from PySide6.QtCore import QSettings, QXmlStreamAttributes


@pytest.fixture(scope="session")
def qt_app():
    """Session-wide QGuiApplication for text rendering."""
    from tilemerge.utils.qt_app import ensure_gui_application

    return ensure_gui_application()


@pytest.fixture
def app_settings(tmp_path: Path):
    """AppSettings backed by an INI file in a temp directory."""
    from tilemerge.settings import AppSettings

    storage = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    settings_obj = AppSettings(settings=storage)
    settings_obj.console_logging = False
    return settings_obj


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty working directory."""
    out = tmp_path / "work"
    out.mkdir()
    monkeypatch.chdir(out)
    return out


@pytest.fixture
def element_attributes() -> Callable[[str], QXmlStreamAttributes]:
    """Parse a single XML element and return its attributes."""
    from tilemerge.tilesets.xml_events import XmlEventStream

    def _parse(xml: str) -> QXmlStreamAttributes:
        event = next(XmlEventStream.from_bytes(xml.encode("utf-8")))
        return event.attributes

    return _parse


@pytest.fixture
def make_png(tmp_path: Path) -> Callable[..., Path]:
    """Write an RGBA PNG built from a row-major list of pixels."""
    images_dir = tmp_path / "images"
    images_dir.mkdir()

    def _make(name: str, size: tuple[int, int], pixels: list[tuple[int, int, int, int]]) -> Path:
        image = Image.new("RGBA", size)
        image.putdata(pixels)
        path = images_dir / name
        image.save(path)
        return path

    return _make
