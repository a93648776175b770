"""Build and paint the commit list frame.

``build_frame`` is pure: it turns a BrowserState into a list of text rows with
ANSI 256-colour escapes. ``Screen`` is the only piece that touches the
terminal, and it repaints the whole frame every time.
"""

import logging
from typing import Dict, List, Optional, TextIO

from git_log_browser.core.layout import (
    filename_column_width,
    pad,
    summary_column_width,
    summary_line,
)
from git_log_browser.models.change import ChangedFile, FileStatus
from git_log_browser.models.commit import Commit
from git_log_browser.models.state import BrowserState

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[H\x1b[2J"
LINE_BREAK = "\r\n"  # raw mode turns off newline translation

HELP_LINE = "ⓘ  Use ↑/↓ to navigate, Space to expand/collapse, Ctrl+C to exit"
HEADER_ROWS = ["", HELP_LINE, ""]

EXPANDED_MARKER = "[-]"
COLLAPSED_MARKER = "[+]"
RENAME_ARROW = " ← "
FILE_INDENT = " " * 6
STATUS_GUTTER = 4

SELECTED_BACKGROUND = 26


def foreground(code: int) -> str:
    return f"\x1b[38;5;{code}m"


def background(code: int) -> str:
    return f"\x1b[48;5;{code}m"


# Every glyph is three cells wide so file names line up.
GENERIC_ICON = " ⎕ "
FILE_ICONS: Dict[str, str] = {
    "js": f"{background(11)} JS{RESET}",
    "jsx": f"{foreground(39)} ⚛ {RESET}",
    "ts": f"{background(27)} TS{RESET}",
    "tsx": f"{foreground(39)} ⚛ {RESET}",
    "css": f"{foreground(39)} # {RESET}",
    "json": f"{foreground(92)}{{…}}{RESET}",
    "gitignore": f"{foreground(9)} ⎇ {RESET}",
    "py": f"{foreground(220)} py{RESET}",
    "md": f"{foreground(250)} M↓{RESET}",
    "html": f"{foreground(202)}< >{RESET}",
    "sh": f"{foreground(70)} $ {RESET}",
    "yml": f"{foreground(168)} ≡ {RESET}",
    "yaml": f"{foreground(168)} ≡ {RESET}",
    "toml": f"{foreground(137)} ≡ {RESET}",
}

STATUS_COLORS: Dict[FileStatus, int] = {
    FileStatus.ADDED: 78,
    FileStatus.DELETED: 210,
    FileStatus.RENAMED: 75,
}


def file_icon(changed: ChangedFile) -> str:
    """Glyph for the file's extension, or the generic one."""
    return FILE_ICONS.get(changed.extension, GENERIC_ICON)


def colorize(text: str, color: Optional[int]) -> str:
    if color is None:
        return text
    return f"{foreground(color)}{text}{RESET}"


def summary_row(commit: Commit, selected: bool, width: int) -> str:
    """One commit row: marker plus the padded summary line."""
    marker = EXPANDED_MARKER if commit.expanded else COLLAPSED_MARKER
    row = f"  {marker} {pad(summary_line(commit), width)}  "
    if selected:
        return f"{background(SELECTED_BACKGROUND)}{row}{RESET}"
    return row


def file_row(changed: ChangedFile, name_width: int, line_width: int) -> str:
    """One indented file row with icon, name and right-aligned status letter.

    The colour covers the whole name/status segment. Padding is computed on
    the plain text before any escape is added.
    """
    info = pad(changed.name, name_width)
    if changed.status is FileStatus.RENAMED:
        info = f"{info}{RENAME_ARROW}{changed.old_name}"
    segment = f"{pad(info, line_width - STATUS_GUTTER)}{changed.status.value}"
    return f"{FILE_INDENT}{file_icon(changed)} {colorize(segment, STATUS_COLORS.get(changed.status))}"


def commit_rows(commit: Commit, selected: bool, line_width: int) -> List[str]:
    rows = [summary_row(commit, selected, line_width)]
    if commit.expanded:
        name_width = filename_column_width(commit)
        rows.extend(file_row(changed, name_width, line_width) for changed in commit.files)
    return rows


def build_frame(state: BrowserState) -> List[str]:
    """All rows of one frame, header first."""
    line_width = summary_column_width(state.commits)
    rows = list(HEADER_ROWS)
    for index, commit in enumerate(state.commits):
        rows.extend(commit_rows(commit, index == state.selected_index, line_width))
    return rows


class Screen:
    """Writes whole frames to a terminal stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.frames_painted = 0

    def paint(self, rows: List[str]) -> None:
        """Clear the terminal and write ``rows`` in one pass."""
        self.stream.write(CLEAR_SCREEN + LINE_BREAK.join(rows) + LINE_BREAK)
        self.stream.flush()
        self.frames_painted += 1
        logger.debug("Painted frame %d (%d rows)", self.frames_painted, len(rows))

    def render(self, state: BrowserState) -> None:
        self.paint(build_frame(state))
