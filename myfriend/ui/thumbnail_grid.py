from __future__ import annotations

from typing import Iterable, Tuple

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QIcon, QImage, QPixmap
from PySide6.QtWidgets import QListWidget, QListWidgetItem, QStyle, QWidget

from myfriend.core.config import GridConfig


class ThumbnailGrid(QListWidget):
    """
    Fixed-column grid of captioned thumbnails.
    Stores per-item:
      - Qt.UserRole -> index of the entry in display order (int)
    """
    CAPTION_HEIGHT = 28

    def __init__(self, cfg: GridConfig, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._columns = cfg.columns
        self._thumb = cfg.thumbnail_size
        self.setViewMode(QListWidget.IconMode)
        self.setIconSize(QSize(self._thumb, self._thumb))
        self.setResizeMode(QListWidget.Adjust)
        self.setMovement(QListWidget.Static)
        self.setWrapping(True)
        self.setWordWrap(True)
        self.setSpacing(10)
        self.setDragDropMode(QListWidget.NoDragDrop)
        self.setSelectionMode(QListWidget.SingleSelection)

    def set_entries(self, entries: Iterable[Tuple[object, str]]) -> None:
        """ Rebuild the grid from (image, title) pairs. """
        self.clear()
        for image, title in entries:
            self.append_entry(image, title)

    def append_entry(self, image: object, title: str) -> QListWidgetItem:
        item = QListWidgetItem(self._icon_for(image), title)
        item.setData(Qt.UserRole, self.count())
        item.setTextAlignment(Qt.AlignHCenter | Qt.AlignTop)
        self.addItem(item)
        return item

    def titles(self) -> list[str]:
        return [self.item(i).text() for i in range(self.count())]

    def _icon_for(self, image: object) -> QIcon:
        pm = QPixmap()
        if isinstance(image, QImage) and not image.isNull():
            pm = QPixmap.fromImage(image).scaled(
                self._thumb, self._thumb, Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        elif isinstance(image, QPixmap):
            pm = image
        return QIcon(pm) if not pm.isNull() else self.style().standardIcon(QStyle.SP_FileIcon)

    def resizeEvent(self, ev):
        super().resizeEvent(ev)
        cell = max(self._thumb, (self.viewport().width() - 1) // self._columns - self.spacing())
        self.setGridSize(QSize(cell, self._thumb + self.CAPTION_HEIGHT))
