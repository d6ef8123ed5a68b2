from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

from PySide6.QtCore import QObject, QTimer, Signal

from myfriend.core.capture_flow import (
    CaptionSource, CaptureFlow, FlowState, ImageProvider, SourceChooser
)

log = logging.getLogger(__name__)


class CaptureFlowController(QObject):
    """Drives one view's capture flow: source sheet -> picker -> caption prompt -> commit.

    The caption prompt is queued on the event loop so the picker has closed before it opens.
    Only one flow runs at a time, a second start() while one is open is ignored.
    """
    stateChanged = Signal(object)
    committed = Signal(object)
    cancelled = Signal()

    def __init__(self, commit: Callable[[Any, str], Any], *, chooser: SourceChooser, provider: ImageProvider,
                 captions: CaptionSource, prompt: Tuple[str, str], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._flow = CaptureFlow(commit)
        self._chooser = chooser
        self._provider = provider
        self._captions = captions
        self._prompt = prompt
        self._last_state = self._flow.state

    def state(self) -> FlowState:
        return self._flow.state

    def start(self) -> bool:
        """ Run a flow from the "add" tap. Returns False if one was already in progress. """
        if not self._flow.begin():
            return False
        self._sync_state()
        try:
            self._pick_image()
        except Exception:
            self._abort()
            raise
        return True

    def _pick_image(self) -> None:
        source = self._chooser.choose_source(self._provider.available_sources())
        self._flow.choose_source(source)
        if self._ended():
            return

        image = self._provider.request_image(source)
        self._flow.receive_image(image)
        if self._ended():
            return

        QTimer.singleShot(0, self._prompt_for_caption)

    def _prompt_for_caption(self) -> None:
        if self._flow.state is not FlowState.CAPTION_PENDING:
            return
        title, message = self._prompt
        try:
            result = self._flow.receive_caption(self._captions.request_caption(title, message))
        except Exception:
            self._abort()
            raise
        self._ended()
        if self._flow.state is FlowState.COMMITTED:
            self.committed.emit(result)

    def _abort(self) -> None:
        # the flow ends CANCELLED so the next add tap can start a new one
        log.warning("Capture flow failed, cancelling it")
        self._flow.cancel()
        self._ended()

    def _ended(self) -> bool:
        """ Publish the state, report a cancellation. True once the flow can go no further. """
        self._sync_state()
        if self._flow.state is FlowState.CANCELLED:
            log.debug("Capture flow cancelled")
            self.cancelled.emit()
        return self._flow.is_terminal

    def _sync_state(self) -> None:
        if self._flow.state is self._last_state:
            return
        self._last_state = self._flow.state
        self.stateChanged.emit(self._last_state)
