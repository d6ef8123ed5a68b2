import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QImage
from PySide6.QtWidgets import QInputDialog

from myfriend.core.album_store import AlbumStore
from myfriend.core.config import Config


# --- Fixtures -----------------------------------------------------------------
@pytest.fixture()
def store():
    return AlbumStore()


@pytest.fixture()
def config():
    return Config()


@pytest.fixture()
def make_image():
    def _make_image(color=Qt.GlobalColor.green, w=16, h=10):
        img = QImage(QSize(w, h), QImage.Format.Format_ARGB32)
        img.fill(color)
        return img
    return _make_image


@pytest.fixture()
def set_dialog_text(monkeypatch):
    """ Set the answers for the next text entry dialogs, each as (text, ok). """
    def set_text(*answers):
        pending = list(answers)

        def get_text_cycle(*args, **kwargs):
            return pending.pop(0) if len(pending) > 1 else pending[0]
        monkeypatch.setattr(QInputDialog, "getText", staticmethod(get_text_cycle))
    return set_text
