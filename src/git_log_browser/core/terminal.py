"""Raw terminal mode and raw byte reads."""

import contextlib
import logging
import termios
import tty
from typing import BinaryIO, Callable, Iterator

logger = logging.getLogger(__name__)

READ_SIZE = 8


@contextlib.contextmanager
def raw_mode(stream: BinaryIO) -> Iterator[None]:
    """Put the terminal behind ``stream`` in raw mode for the block.

    The previous settings are restored on every exit path. Streams that are
    not a terminal (pipes, test buffers) are left alone.
    """
    if not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    tty.setraw(fd)
    logger.debug("Terminal switched to raw mode")
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        logger.debug("Terminal settings restored")


def chunk_reader(stream: BinaryIO, size: int = READ_SIZE) -> Callable[[], bytes]:
    """Return a callable doing one blocking read of at most ``size`` bytes.

    ``read1`` returns as soon as any bytes are available, which is what a
    key-at-a-time loop needs on a buffered stdin.
    """
    read = getattr(stream, "read1", stream.read)

    def read_chunk() -> bytes:
        return read(size)

    return read_chunk
