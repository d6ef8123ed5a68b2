from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout, QLineEdit, QListWidgetItem, QToolButton, QVBoxLayout, QWidget
)

from myfriend.core.config import Config

from .album_model import AlbumViewModel
from .caption_prompt import CATEGORY_PROMPT, CaptionPrompt
from .capture import CaptureProvider, SourceSheet
from .flow_controller import CaptureFlowController
from .thumbnail_grid import ThumbnailGrid


class HomeView(QWidget):
    """
    Top level of the album.
    Top row: search field (keeps its text, filters nothing) and the "+" button.
    Below: grid of categories. Clicking one emits categoryActivated(index).
    """
    categoryActivated = Signal(int)

    def __init__(self, model: AlbumViewModel, cfg: Config, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = model

        self.search = QLineEdit()
        self.search.setPlaceholderText("Search...")
        self.search.setMaximumWidth(300)
        self.search.setClearButtonEnabled(True)
        self.search.textChanged.connect(self._model.set_search_text)

        self.btn_add = QToolButton()
        self.btn_add.setText("+")
        font = self.btn_add.font()
        font.setPointSize(max(font.pointSize(), 10) + 8)
        self.btn_add.setFont(font)
        self.btn_add.setToolTip("Add category")
        self.btn_add.clicked.connect(self._on_add_clicked)

        row = QHBoxLayout()
        row.addWidget(self.search, 1)
        row.addWidget(self.btn_add)
        row.addStretch(1)

        self.grid = ThumbnailGrid(cfg.grid, self)
        self.grid.itemClicked.connect(self._on_item_clicked)

        lay = QVBoxLayout(self)
        lay.setContentsMargins(10, 10, 10, 10)
        lay.addLayout(row)
        lay.addWidget(self.grid, 1)

        self.flow = CaptureFlowController(
            self._model.add_category,
            chooser=SourceSheet(self),
            provider=CaptureProvider(cfg.capture, self),
            captions=CaptionPrompt(self, reprompt_empty=cfg.capture.reprompt_empty_caption),
            prompt=CATEGORY_PROMPT,
            parent=self,
        )

        self._model.categoryAdded.connect(self._on_category_added)
        self.grid.set_entries((c.image, c.title) for c in self._model.categories())

    def _on_add_clicked(self) -> None:
        self.flow.start()

    def _on_category_added(self, index: int) -> None:
        category = self._model.category(index)
        self.grid.append_entry(category.image, category.title)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.categoryActivated.emit(int(item.data(Qt.UserRole)))
