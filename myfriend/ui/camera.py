from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QImage
from PySide6.QtMultimedia import QCamera, QImageCapture, QMediaCaptureSession, QMediaDevices
from PySide6.QtMultimediaWidgets import QVideoWidget
from PySide6.QtWidgets import QDialog, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

log = logging.getLogger(__name__)


def has_camera() -> bool:
    return bool(QMediaDevices.videoInputs())


class CameraDialog(QDialog):
    """ Live viewfinder with Capture / Cancel. ``image()`` holds the captured frame once accepted. """

    def __init__(self, title: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.resize(640, 520)
        self._image: Optional[QImage] = None

        self._viewfinder = QVideoWidget(self)
        self._camera = QCamera(QMediaDevices.defaultVideoInput(), self)
        self._capture = QImageCapture(self)
        self._session = QMediaCaptureSession(self)
        self._session.setCamera(self._camera)
        self._session.setImageCapture(self._capture)
        self._session.setVideoOutput(self._viewfinder)

        self._camera.errorOccurred.connect(self._on_camera_error)
        self._capture.imageCaptured.connect(self._on_image_captured)
        self._capture.errorOccurred.connect(self._on_capture_error)
        self._capture.readyForCaptureChanged.connect(self._on_ready_changed)

        self._btn_capture = QPushButton("Capture", self)
        self._btn_capture.setEnabled(False)
        self._btn_capture.clicked.connect(self._capture.capture)
        btn_cancel = QPushButton("Cancel", self)
        btn_cancel.clicked.connect(self.reject)

        row = QHBoxLayout()
        row.addStretch(1)
        row.addWidget(btn_cancel)
        row.addWidget(self._btn_capture)

        lay = QVBoxLayout(self)
        lay.addWidget(self._viewfinder, 1)
        lay.addLayout(row)

        self._camera.start()

    def image(self) -> Optional[QImage]:
        return self._image

    def done(self, result: int) -> None:
        self._camera.stop()
        super().done(result)

    def _on_ready_changed(self, ready: bool) -> None:
        self._btn_capture.setEnabled(ready)

    def _on_image_captured(self, _id: int, image: QImage) -> None:
        if image.isNull():
            return
        self._image = image
        self.accept()

    def _on_camera_error(self, _error, message: str) -> None:
        log.warning("Camera error: %s", message)
        self.reject()

    def _on_capture_error(self, _id: int, _error, message: str) -> None:
        log.warning("Image capture failed: %s", message)
        self.reject()
