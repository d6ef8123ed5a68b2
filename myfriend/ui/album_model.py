from __future__ import annotations

from typing import Any, Tuple

from PySide6.QtCore import QObject, Signal

from myfriend.core.album_store import AlbumStore, CategoryRef
from myfriend.core.models import Category, SubItem


class AlbumViewModel(QObject):
    """ Qt-facing wrapper of the album store. Views render from the read accessors and re-render on the signals. """
    categoryAdded = Signal(int)
    subItemAdded = Signal(int, int)
    searchTextChanged = Signal(str)

    def __init__(self, store: AlbumStore | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._store = store if store is not None else AlbumStore()
        self._search_text = ""

    # --- getters ---
    def store(self) -> AlbumStore: return self._store
    def search_text(self) -> str: return self._search_text
    def categories(self) -> Tuple[Category, ...]: return self._store.list_categories()
    def category(self, ref: CategoryRef) -> Category: return self._store.category(ref)
    def sub_items(self, ref: CategoryRef) -> Tuple[SubItem, ...]: return self._store.list_sub_items(ref)

    # --- mutations ---
    def add_category(self, image: Any, title: str) -> Category:
        category = self._store.add_category(image, title)
        self.categoryAdded.emit(len(self._store) - 1)
        return category

    def add_sub_item(self, ref: CategoryRef, image: Any, title: str) -> SubItem:
        category = self._store.category(ref)
        item = self._store.add_sub_item(category, image, title)
        self.subItemAdded.emit(self._store.index_of(category), len(category.sub_items) - 1)
        return item

    def set_search_text(self, text: str) -> None:
        """ Kept for the search field. Nothing is filtered on it. """
        if text == self._search_text:
            return
        self._search_text = text
        self.searchTextChanged.emit(text)
