from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from myfriend.core.config import Config

from .album_model import AlbumViewModel
from .caption_prompt import SUB_ITEM_PROMPT, CaptionPrompt
from .capture import CaptureProvider, SourceSheet
from .flow_controller import CaptureFlowController
from .thumbnail_grid import ThumbnailGrid

ADD_SUB_ITEM_TEXT = "اضف بطاقة فرعية جديدة"


class CategoryView(QWidget):
    """ Detail page of one category: title, its sub-item grid and the add button. """

    def __init__(self, model: AlbumViewModel, index: int, cfg: Config, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = model
        self._category = model.category(index)

        self.title = QLabel(self._category.title)
        font = QFont(self.title.font())
        font.setPointSize(max(font.pointSize(), 10) * 2)
        font.setBold(True)
        self.title.setFont(font)
        self.title.setAlignment(Qt.AlignCenter)

        self.grid = ThumbnailGrid(cfg.grid, self)
        self.grid.set_entries((s.image, s.title) for s in self._category.sub_items)

        self.btn_add = QPushButton(ADD_SUB_ITEM_TEXT)
        self.btn_add.clicked.connect(self._on_add_clicked)

        lay = QVBoxLayout(self)
        lay.addWidget(self.title)
        lay.addWidget(self.grid, 1)
        lay.addWidget(self.btn_add, 0, Qt.AlignHCenter)

        self.flow = CaptureFlowController(
            self._commit,
            chooser=SourceSheet(self),
            provider=CaptureProvider(cfg.capture, self),
            captions=CaptionPrompt(self, reprompt_empty=cfg.capture.reprompt_empty_caption),
            prompt=SUB_ITEM_PROMPT,
            parent=self,
        )
        self._model.subItemAdded.connect(self._on_sub_item_added)

    def category_index(self) -> int:
        return self._model.store().index_of(self._category)

    def _commit(self, image, title: str):
        return self._model.add_sub_item(self._category, image, title)

    def _on_add_clicked(self) -> None:
        self.flow.start()

    def _on_sub_item_added(self, category_index: int, item_index: int) -> None:
        if category_index != self.category_index():
            return
        item = self._category.sub_items[item_index]
        self.grid.append_entry(item.image, item.title)
