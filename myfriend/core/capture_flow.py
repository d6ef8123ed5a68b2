from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Protocol, Tuple

log = logging.getLogger(__name__)


class ImageSource(Enum):
    CAMERA = "camera"
    LIBRARY = "library"


class FlowState(Enum):
    IDLE = "idle"
    SOURCE_SELECTION = "source selection"
    CAPTURING = "capturing"
    CAPTION_PENDING = "caption pending"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class FlowEvent(Enum):
    ADD_REQUESTED = "add requested"
    SOURCE_CHOSEN = "source chosen"
    IMAGE_CAPTURED = "image captured"
    CAPTION_CONFIRMED = "caption confirmed"
    DISMISSED = "dismissed"


TERMINAL_STATES = frozenset({FlowState.COMMITTED, FlowState.CANCELLED})

_TRANSITIONS: Dict[Tuple[FlowState, FlowEvent], FlowState] = {
    (FlowState.IDLE, FlowEvent.ADD_REQUESTED): FlowState.SOURCE_SELECTION,
    (FlowState.SOURCE_SELECTION, FlowEvent.SOURCE_CHOSEN): FlowState.CAPTURING,
    (FlowState.CAPTURING, FlowEvent.IMAGE_CAPTURED): FlowState.CAPTION_PENDING,
    (FlowState.CAPTION_PENDING, FlowEvent.CAPTION_CONFIRMED): FlowState.COMMITTED,
}


class InvalidTransition(RuntimeError):
    pass


def transition(state: FlowState, event: FlowEvent) -> FlowState:
    """ Pure transition function for a single capture flow.

    Any non-terminal state can be dismissed into CANCELLED. Terminal states accept nothing.

    Raises
    ------
    InvalidTransition
        If the event is not legal from the given state.
    """
    if event is FlowEvent.DISMISSED and state not in TERMINAL_STATES:
        return FlowState.CANCELLED
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransition(f"Cannot apply {event.value!r} in state {state.value!r}") from None


# ---- Ports, implemented by the Qt layer or by fakes in tests ----
class SourceChooser(Protocol):
    def choose_source(self, available: Iterable[ImageSource]) -> Optional[ImageSource]: ...


class ImageProvider(Protocol):
    def available_sources(self) -> Tuple[ImageSource, ...]: ...

    def request_image(self, source: ImageSource) -> Any | None: ...


class CaptionSource(Protocol):
    def request_caption(self, title: str, message: str) -> Optional[str]: ...


class CaptureFlow:
    """One "pick image -> caption -> append" flow.

    The flow only consumes result values (None meaning the user dismissed that step), so it can be driven
    without any UI. ``commit(image, title)`` is called exactly once per committed flow, never with an empty
    title or a missing image.
    """

    def __init__(self, commit: Callable[[Any, str], Any]) -> None:
        self._commit = commit
        self._state = FlowState.IDLE
        self._source: Optional[ImageSource] = None
        self._image: Any = None

    # ---------- reads ----------
    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def source(self) -> Optional[ImageSource]:
        return self._source

    @property
    def image(self) -> Any:
        return self._image

    @property
    def is_terminal(self) -> bool:
        return self._state in TERMINAL_STATES

    @property
    def in_progress(self) -> bool:
        return self._state is not FlowState.IDLE and not self.is_terminal

    # ---------- steps ----------
    def begin(self) -> bool:
        """ Start a flow. Returns False if one is already running. """
        if self.in_progress:
            log.debug("Capture flow already in progress, ignoring add request")
            return False
        self._reset()
        self._apply(FlowEvent.ADD_REQUESTED)
        return True

    def choose_source(self, source: Optional[ImageSource]) -> None:
        if source is None:
            self.cancel()
            return
        self._apply(FlowEvent.SOURCE_CHOSEN)
        self._source = source

    def receive_image(self, image: Any) -> None:
        if image is None:
            self.cancel()
            return
        self._apply(FlowEvent.IMAGE_CAPTURED)
        self._image = image

    def receive_caption(self, text: Optional[str]) -> Any:
        """ Finish the flow with the caption text.

        Returns
        -------
        The commit callback's result, or None if the caption was dismissed or empty.
        """
        title = (text or "").strip()
        if not title:
            if text is not None:
                log.info("Empty caption confirmed, discarding captured image")
            self.cancel()
            return None
        if self._state is not FlowState.CAPTION_PENDING:
            raise InvalidTransition(f"No image is waiting for a caption (state {self._state.value!r})")
        result = self._commit(self._image, title)
        self._apply(FlowEvent.CAPTION_CONFIRMED)
        self._image = None
        return result

    def cancel(self) -> None:
        if not self.in_progress:
            return
        self._apply(FlowEvent.DISMISSED)
        self._image = None

    # ---------- helpers ----------
    def _apply(self, event: FlowEvent) -> None:
        new_state = transition(self._state, event)
        log.debug("Capture flow %s: %s -> %s", event.value, self._state.value, new_state.value)
        self._state = new_state

    def _reset(self) -> None:
        self._state = FlowState.IDLE
        self._source = None
        self._image = None
