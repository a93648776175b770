"""Decode raw terminal bytes into key presses.

Terminal drivers do not promise that an escape sequence arrives in a single
read, so the decoder keeps an unfinished prefix (``ESC`` or ``ESC [``) until
the next chunk completes or breaks it.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Keys the browser reacts to."""

    INTERRUPT = "interrupt"
    SPACE = "space"
    UP = "up"
    DOWN = "down"


INTERRUPT_BYTE = b"\x03"

KEY_SEQUENCES: Dict[bytes, Key] = {
    INTERRUPT_BYTE: Key.INTERRUPT,
    b" ": Key.SPACE,
    b"\x1b[A": Key.UP,
    b"\x1b[B": Key.DOWN,
}


class KeyDecoder:
    """Incremental decoder from byte chunks to Keys."""

    def __init__(self, sequences: Optional[Dict[bytes, Key]] = None):
        self.sequences = sequences if sequences is not None else KEY_SEQUENCES
        self._buffer = b""

    def feed(self, chunk: bytes) -> List[Key]:
        """Add ``chunk`` to the buffer and return every complete key in it.

        Once the leading bytes neither match nor start a known sequence, the
        rest of the buffer is ignored. An interrupt byte in it still counts.
        """
        self._buffer += chunk
        keys: List[Key] = []
        while self._buffer:
            match = self._match()
            if match is not None:
                key, length = match
                keys.append(key)
                self._buffer = self._buffer[length:]
            elif self._is_prefix():
                break
            else:
                ignored, self._buffer = self._buffer, b""
                logger.debug("Ignoring input %r", ignored)
                if INTERRUPT_BYTE in ignored:
                    keys.append(Key.INTERRUPT)
        return keys

    def _match(self) -> Optional[Tuple[Key, int]]:
        for sequence, key in self.sequences.items():
            if self._buffer.startswith(sequence):
                return key, len(sequence)
        return None

    def _is_prefix(self) -> bool:
        return any(sequence.startswith(self._buffer) for sequence in self.sequences)
