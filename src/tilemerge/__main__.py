"""
Command-line entry point for TileMerge.
Usage: python -m tilemerge <file.xml>
"""

import sys
import logging
from typing import List, Optional

from . import PROGRAM_NAME, __version__
from .errors import TileMergeError
from .settings import AppSettings
from .tilesets import TilesetService
from .utils.logging_config import setup_logging
from .utils.qt_app import ensure_gui_application


def show_help() -> None:
    """Print version banner and usage."""
    print(f"{PROGRAM_NAME} v{__version__}")
    print("Usage: tilemerge <file.xml>")


def main(argv: Optional[List[str]] = None, settings: Optional[AppSettings] = None) -> int:
    """Main application entry point.

    Args:
        argv: Command-line arguments without the program name
        settings: Settings to use instead of the stored user profile

    Returns:
        Process exit status
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        show_help()
        return 1

    logger = logging.getLogger(f"{__name__}.main")
    try:
        if settings is None:
            settings = AppSettings()
        setup_logging(settings)

        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        # Text tiles are rasterized through QPainter
        ensure_gui_application([sys.argv[0]])

        service = TilesetService(settings)
        service.merge_file(args[0])
        return 0

    except TileMergeError as error:
        if error.is_usage_error:
            show_help()
        else:
            print(f"{error.id}:{error.text}")
        return 1

    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
