from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from .core.config import load_config, save_config, ORG, APP
from .core.logging import configure_root
from .ui.album_model import AlbumViewModel
from .ui.main_window import MainWindow

log = logging.getLogger(__name__)


def _app_version() -> str:
    try:
        return version("myfriend")
    except PackageNotFoundError:
        return "0.0.0"


def main() -> None:
    app = QApplication(sys.argv)
    # Set QSettings identity BEFORE any settings access
    QCoreApplication.setOrganizationName(ORG)
    QCoreApplication.setApplicationName(APP)
    QCoreApplication.setApplicationVersion(_app_version())

    # Load user prefs (QSettings-backed)
    cfg = load_config()
    level = configure_root(cfg.log_level)
    log.debug("Starting %s %s at log level %s", APP, _app_version(), logging.getLevelName(level))

    # The album only lives for this session
    model = AlbumViewModel()

    win = MainWindow(cfg=cfg, model=model)
    win.restore_geometry()
    win.show()

    # Persist settings on quit
    app.aboutToQuit.connect(lambda: save_config(cfg))
    sys.exit(app.exec())
