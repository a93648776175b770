"""Logging setup for the command line entry point."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_file: Optional[Path] = None, verbose: bool = False) -> None:
    """Route package logging to a file, or to stderr through rich.

    The browser repaints the whole screen, so anything logged to stderr while
    it runs is wiped by the next frame. Pass ``log_file`` to keep diagnostics.
    """
    root = logging.getLogger("git_log_browser")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.setLevel(logging.DEBUG)
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    root.addHandler(handler)
