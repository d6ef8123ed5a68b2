from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from PySide6.QtGui import QImage
from PySide6.QtWidgets import QDialog, QFileDialog, QMessageBox, QWidget

from myfriend.core.capture_flow import ImageSource
from myfriend.core.config import CaptureConfig

log = logging.getLogger(__name__)

SOURCE_LABELS = {
    ImageSource.CAMERA: "الكاميرا",
    ImageSource.LIBRARY: "مكتبة الصور",
}
IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.webp *.gif *.bmp)"


class SourceSheet:
    """ Modal "Choose Photo Source" prompt. Only offers the sources passed in. """

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def choose_source(self, available: Iterable[ImageSource]) -> Optional[ImageSource]:
        box = QMessageBox(self._parent)
        box.setWindowTitle("Choose Photo Source")
        box.setText("Choose Photo Source")
        buttons = {}
        for source in available:
            buttons[box.addButton(SOURCE_LABELS[source], QMessageBox.ActionRole)] = source
        box.addButton(QMessageBox.Cancel)
        box.exec()
        return buttons.get(box.clickedButton())


class CaptureProvider:
    """ Returns a single QImage from the camera or the photo library, or None if the user backs out. """

    def __init__(self, cfg: CaptureConfig, parent: QWidget | None = None) -> None:
        self._cfg = cfg
        self._parent = parent

    def available_sources(self) -> Tuple[ImageSource, ...]:
        from .camera import has_camera

        if has_camera():
            return ImageSource.CAMERA, ImageSource.LIBRARY
        return (ImageSource.LIBRARY,)

    def request_image(self, source: ImageSource) -> Optional[QImage]:
        if source is ImageSource.CAMERA:
            return self._from_camera()
        return self._from_library()

    def _from_camera(self) -> Optional[QImage]:
        # QtMultimedia needs the platform audio libraries, so it is imported on first camera use
        from .camera import CameraDialog

        dlg = CameraDialog(SOURCE_LABELS[ImageSource.CAMERA], self._parent)
        if dlg.exec() != QDialog.Accepted:
            return None
        return dlg.image()

    def _from_library(self) -> Optional[QImage]:
        fname, _ = QFileDialog.getOpenFileName(
            self._parent, SOURCE_LABELS[ImageSource.LIBRARY], self._cfg.last_image_dir, IMAGE_FILTER
        )
        if not fname:
            return None
        self._cfg.last_image_dir = str(Path(fname).parent)

        image = QImage(fname)
        if image.isNull():
            log.warning("Could not decode %s, dropping it", fname)
            return None
        return image
