from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class SubItem:
    """ An image with a caption, nested inside a category. """
    image: Any
    title: str


@dataclass(eq=False)
class Category:
    """ Top-level album entry. Owns an ordered list of sub-items which is only ever appended to. """
    image: Any
    title: str
    sub_items: List[SubItem] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Category(title={self.title!r}, sub_items={len(self.sub_items)})"
