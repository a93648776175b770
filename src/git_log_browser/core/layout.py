"""Column widths for the commit list.

Widths are measured in terminal cells with ``rich.cells.cell_len`` so wide
characters count double and nothing here ever sees an ANSI escape.
"""

from typing import List

from rich.cells import cell_len

from git_log_browser.models.commit import Commit


def summary_line(commit: Commit) -> str:
    """The ``date time | author | summary`` text of one commit row."""
    return f"{commit.display_date} {commit.display_time} | {commit.author} | {commit.summary}"


def summary_column_width(commits: List[Commit]) -> int:
    """Widest summary line over all commits, expanded or not.

    Collapsed commits count too, so the column does not move when rows are
    expanded or collapsed.
    """
    return max((cell_len(summary_line(commit)) for commit in commits), default=0)


def filename_column_width(commit: Commit) -> int:
    """Widest file name within a single commit."""
    return max((cell_len(changed.name) for changed in commit.files), default=0)


def pad(text: str, width: int) -> str:
    """Left-align ``text`` in ``width`` cells. Longer text is left untouched."""
    return text + " " * max(0, width - cell_len(text))
