from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow,
    QStackedWidget,
    QToolBar
)

from myfriend.core.config import Config

from .album_model import AlbumViewModel
from .category_view import CategoryView
from .home_view import HomeView

MAIN_TITLE = "القائمة الرئيسية"


class MainWindow(QMainWindow):
    """ Album window. Home grid of categories, with one category's detail page pushed on top when opened. """

    def __init__(self, cfg: Config, model: AlbumViewModel | None = None) -> None:
        super().__init__()
        self.setWindowTitle(MAIN_TITLE)
        self.resize(1200, 800)

        self.config = cfg
        self.model = model if model is not None else AlbumViewModel(parent=self)
        self.detail: Optional[CategoryView] = None

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self.home = HomeView(self.model, cfg)
        self.home.categoryActivated.connect(self.open_category)
        self._stack.addWidget(self.home)

        # Toolbar actions
        tb = QToolBar("Navigation")
        tb.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, tb)

        self.act_back = QAction("Back", self)
        self.act_back.setEnabled(False)
        self.act_back.triggered.connect(self.go_home)
        tb.addAction(self.act_back)

    def current_view(self):
        return self._stack.currentWidget()

    def open_category(self, index: int) -> CategoryView:
        """ Show the detail page for the category at ``index`` (display order). """
        self._drop_detail()
        self.detail = CategoryView(self.model, index, self.config)
        self._stack.addWidget(self.detail)
        self._stack.setCurrentWidget(self.detail)
        self.act_back.setEnabled(True)
        return self.detail

    def go_home(self) -> None:
        self._stack.setCurrentWidget(self.home)
        self._drop_detail()
        self.act_back.setEnabled(False)

    def _drop_detail(self) -> None:
        if self.detail is None:
            return
        self._stack.removeWidget(self.detail)
        self.detail.deleteLater()
        self.detail = None

    def closeEvent(self, event, /):
        """ Remember the window geometry for the next launch. """
        geo = self.geometry()
        self.config.ui.geometry = {"x": geo.x(), "y": geo.y(), "width": geo.width(), "height": geo.height()}
        super().closeEvent(event)

    def restore_geometry(self) -> None:
        geo = self.config.ui.geometry
        if {"x", "y", "width", "height"} <= geo.keys():
            self.setGeometry(int(geo["x"]), int(geo["y"]), int(geo["width"]), int(geo["height"]))
