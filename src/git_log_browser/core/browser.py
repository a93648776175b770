"""The read-decode-dispatch loop of the browser."""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from git_log_browser.core.keys import Key, KeyDecoder
from git_log_browser.core.renderer import Screen
from git_log_browser.models.state import BrowserState

logger = logging.getLogger(__name__)


class ExitReason(str, Enum):
    """Why the input loop stopped."""

    INTERRUPTED = "interrupted"
    END_OF_INPUT = "end_of_input"


class InputLoop:
    """Owns the browser state and repaints after every change.

    Each read is handled completely before the next one. A chunk holding an
    interrupt stops the loop before any of its other keys are applied;
    otherwise each key is dispatched through a fixed table of transitions.
    """

    def __init__(
        self,
        state: BrowserState,
        screen: Screen,
        decoder: Optional[KeyDecoder] = None,
    ):
        self.state = state
        self.screen = screen
        self.decoder = decoder or KeyDecoder()
        self.transitions: Dict[Key, Callable[[], bool]] = {
            Key.SPACE: state.toggle_selected,
            Key.UP: state.move_up,
            Key.DOWN: state.move_down,
        }

    def run(self, read: Callable[[], bytes]) -> ExitReason:
        """Paint the first frame, then process reads until interrupt or EOF.

        ``read`` blocks until input is available and returns ``b""`` at end of
        input. Errors raised by it propagate to the caller.
        """
        self.screen.render(self.state)
        while True:
            chunk = read()
            if not chunk:
                logger.debug("End of input")
                return ExitReason.END_OF_INPUT
            if not self.handle_chunk(chunk):
                logger.debug("Interrupted")
                return ExitReason.INTERRUPTED

    def handle_chunk(self, chunk: bytes) -> bool:
        """Apply one chunk of input. Returns False when the loop must stop."""
        keys = self.decoder.feed(chunk)
        if Key.INTERRUPT in keys:
            return False

        for key in keys:
            transition = self.transitions.get(key)
            if transition is None:
                continue
            if transition():
                logger.debug("%s -> selected=%d", key.value, self.state.selected_index)
                self.screen.render(self.state)
        return True
