from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QInputDialog, QLineEdit, QWidget

log = logging.getLogger(__name__)

# Prompt wording per album level: (title, message)
CATEGORY_PROMPT = ("بطاقة رئيسية", "ادخل اسم للبطاقة الرئيسية")
SUB_ITEM_PROMPT = ("اضف بطاقة فرعية جديدة", "ادخل اسم للبطاقة الفرعية")


class CaptionPrompt:
    """Short modal text entry for naming a captured image.

    An empty confirm is treated like Cancel, unless ``reprompt_empty`` is set, in which case the dialog is
    shown again until the user types something or dismisses it.
    """

    def __init__(self, parent: QWidget | None = None, *, reprompt_empty: bool = False) -> None:
        self._parent = parent
        self.reprompt_empty = reprompt_empty

    def request_caption(self, title: str, message: str) -> Optional[str]:
        while True:
            text, ok = QInputDialog.getText(self._parent, title, message, QLineEdit.Normal, "")
            if not ok:
                return None
            text = (text or "").strip()
            if text:
                return text
            if not self.reprompt_empty:
                return None
            log.debug("Empty caption, asking again")
