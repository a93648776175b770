"""Tests for frame building and painting."""

import io
import re

from git_log_browser.core.layout import summary_column_width
from git_log_browser.core.renderer import (
    CLEAR_SCREEN,
    FILE_ICONS,
    GENERIC_ICON,
    HEADER_ROWS,
    RESET,
    SELECTED_BACKGROUND,
    Screen,
    background,
    build_frame,
    file_icon,
    file_row,
    foreground,
)
from git_log_browser.models.change import ChangedFile, FileStatus
from git_log_browser.models.state import BrowserState

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def visible(row: str) -> str:
    return ANSI_ESCAPE.sub("", row)


def test_collapsed_frame_has_header_and_one_row_per_commit(state):
    rows = build_frame(state)

    assert rows[: len(HEADER_ROWS)] == HEADER_ROWS
    commit_rows = rows[len(HEADER_ROWS):]
    assert len(commit_rows) == 3
    assert all("[+]" in row for row in commit_rows)


def test_selected_row_is_highlighted_across_full_width(state):
    rows = build_frame(state)[len(HEADER_ROWS):]

    assert rows[0].startswith(background(SELECTED_BACKGROUND))
    assert rows[0].endswith(RESET)
    assert not rows[1].startswith("\x1b")
    # Highlight covers markers and padding, so widths match plain rows
    assert len(visible(rows[0])) == len(rows[1])


def test_summary_rows_share_one_width(state):
    rows = build_frame(state)[len(HEADER_ROWS):]
    width = summary_column_width(state.commits)

    assert {len(visible(row)) for row in rows} == {width + 8}


def test_expanding_shows_files_for_that_commit_only(state):
    state.toggle_selected()
    rows = build_frame(state)[len(HEADER_ROWS):]

    assert "[-]" in rows[0]
    assert "src/helpers.ts" in visible(rows[1])
    assert "src/unused.css" in visible(rows[2])
    assert "[+]" in rows[3]
    assert "[+]" in rows[4]
    assert len(rows) == 5


def test_toggle_twice_restores_frame(state):
    before = build_frame(state)
    state.toggle_selected()
    assert build_frame(state) != before
    state.toggle_selected()
    assert build_frame(state) == before


def test_expanded_commit_without_files_renders_no_file_rows(commit_factory):
    state = BrowserState(commits=[commit_factory(files=[])])
    state.toggle_selected()

    rows = build_frame(state)

    assert len(rows) == len(HEADER_ROWS) + 1


def test_rename_row_shows_old_name(sample_commits):
    renamed = sample_commits[0].files[0]
    row = visible(file_row(renamed, 14, 40))

    assert " ← src/old_helpers.ts" in row
    assert row.rstrip().endswith("R")


class TestFileRow:
    """Per-status colouring and alignment."""

    def test_added_is_green(self):
        row = file_row(ChangedFile(name="a.ts", status=FileStatus.ADDED), 4, 30)
        assert f"{foreground(78)}a.ts" in row
        assert row.endswith(f"A{RESET}")

    def test_deleted_is_red(self):
        row = file_row(ChangedFile(name="a.ts", status=FileStatus.DELETED), 4, 30)
        assert f"{foreground(210)}a.ts" in row

    def test_renamed_is_blue(self):
        changed = ChangedFile(name="b.ts", old_name="a.ts", status=FileStatus.RENAMED)
        assert f"{foreground(75)}b.ts" in file_row(changed, 4, 30)

    def test_modified_is_plain(self):
        changed = ChangedFile(name="a.ts", status=FileStatus.MODIFIED)
        row = file_row(changed, 4, 30)
        segment = row[len("      ") + len(file_icon(changed)) + 1:]
        assert "\x1b" not in segment
        assert segment == "a.ts".ljust(26) + "M"

    def test_status_letters_line_up(self):
        rows = [
            file_row(ChangedFile(name=name, status=FileStatus.MODIFIED), 12, 40)
            for name in ("short.py", "much_longer.py")
        ]
        assert len({len(visible(row)) for row in rows}) == 1


class TestIcons:
    """Extension lookup table."""

    def test_known_extension(self):
        changed = ChangedFile(name="src/a.ts", status=FileStatus.ADDED)
        assert file_icon(changed) == FILE_ICONS["ts"]

    def test_dotfile(self):
        changed = ChangedFile(name=".gitignore", status=FileStatus.ADDED)
        assert file_icon(changed) == FILE_ICONS["gitignore"]

    def test_unknown_extension(self):
        changed = ChangedFile(name="Makefile", status=FileStatus.ADDED)
        assert file_icon(changed) == GENERIC_ICON

    def test_every_icon_is_three_cells(self):
        for icon in list(FILE_ICONS.values()) + [GENERIC_ICON]:
            assert len(visible(icon)) == 3


class TestScreen:
    """Screen writes whole frames."""

    def test_paint_clears_then_writes_rows(self):
        stream = io.StringIO()
        screen = Screen(stream)

        screen.paint(["one", "two"])

        assert stream.getvalue() == CLEAR_SCREEN + "one\r\ntwo\r\n"
        assert screen.frames_painted == 1

    def test_render_paints_built_frame(self, state):
        stream = io.StringIO()
        screen = Screen(stream)

        screen.render(state)

        assert stream.getvalue() == CLEAR_SCREEN + "\r\n".join(build_frame(state)) + "\r\n"
