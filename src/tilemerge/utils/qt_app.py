"""
Qt application bootstrap for headless rendering.

Font rasterization through QPainter needs a QGuiApplication even when no
window is ever shown.
"""

import logging
import os
import sys
from typing import Optional

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QGuiApplication

logger = logging.getLogger(__name__)

# Keeps the lazily created application alive for the process lifetime
_app: Optional[QGuiApplication] = None


def ensure_gui_application(argv: Optional[list[str]] = None) -> QCoreApplication:
    """Return the running Qt application, creating a GUI one if needed.

    Falls back to the `offscreen` platform plugin unless QT_QPA_PLATFORM is
    already set, so rendering works without a display.
    """
    global _app

    app = QGuiApplication.instance()
    if app:
        return app

    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    _app = QGuiApplication(argv if argv is not None else sys.argv[:1])
    logger.debug(
        f"QGuiApplication created (platform: {QGuiApplication.platformName()})"
    )
    return _app
