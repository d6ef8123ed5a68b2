from __future__ import annotations

import logging
from typing import Any, Iterator, List, Tuple, Union

from .models import Category, SubItem

log = logging.getLogger(__name__)

CategoryRef = Union[int, Category]


class AlbumError(Exception):
    """ Base class for rejected album operations. """


class EmptyTitleError(AlbumError, ValueError):
    pass


class MissingImageError(AlbumError, ValueError):
    pass


class UnknownCategoryError(AlbumError, LookupError):
    pass


def _clean_title(title: str | None) -> str:
    title = (title or "").strip()
    if not title:
        raise EmptyTitleError("Album entries need a non-empty title.")
    return title


def _check_image(image: Any) -> Any:
    if image is None:
        raise MissingImageError("Album entries need an image.")
    return image


class AlbumStore:
    """In-memory ordered list of categories, each with its own ordered sub-items.

    Insertion order is display order. Entries are only ever appended, nothing is renamed or removed.
    A category can be referenced by its index or by the Category object returned from add_category.
    """

    def __init__(self) -> None:
        self._categories: List[Category] = []

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(tuple(self._categories))

    # ---------- reads ----------
    def list_categories(self) -> Tuple[Category, ...]:
        return tuple(self._categories)

    def category(self, ref: CategoryRef) -> Category:
        """ Resolve a category reference.

        Parameters
        ----------
        ref : int or Category
            Display index, or a category previously returned by this store.

        Returns
        -------
        Category

        Raises
        ------
        UnknownCategoryError
            If the index is out of range or the category belongs to another store.
        """
        if isinstance(ref, Category):
            if not any(c is ref for c in self._categories):
                raise UnknownCategoryError(f"{ref!r} is not part of this album.")
            return ref
        if isinstance(ref, bool) or not isinstance(ref, int):
            raise UnknownCategoryError(f"Invalid category reference {ref!r}.")
        if not (0 <= ref < len(self._categories)):
            raise UnknownCategoryError(f"No category at index {ref}.")
        return self._categories[ref]

    def index_of(self, category: Category) -> int:
        for i, c in enumerate(self._categories):
            if c is category:
                return i
        raise UnknownCategoryError(f"{category!r} is not part of this album.")

    def list_sub_items(self, ref: CategoryRef) -> Tuple[SubItem, ...]:
        return tuple(self.category(ref).sub_items)

    # ---------- mutations ----------
    def add_category(self, image: Any, title: str) -> Category:
        """ Append a new category with no sub-items. Titles do not have to be unique. """
        category = Category(_check_image(image), _clean_title(title))
        self._categories.append(category)
        log.info("Added category %r at index %d", category.title, len(self._categories) - 1)
        return category

    def add_sub_item(self, ref: CategoryRef, image: Any, title: str) -> SubItem:
        """ Append a sub-item to the referenced category only. """
        category = self.category(ref)
        item = SubItem(_check_image(image), _clean_title(title))
        category.sub_items.append(item)
        log.info("Added sub-item %r to category %r", item.title, category.title)
        return item
