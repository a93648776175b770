"""Session state owned by the input loop."""

from typing import List

from pydantic import BaseModel, model_validator

from .commit import Commit


class BrowserState(BaseModel):
    """Selection and expansion state of one browsing session.

    The expansion flags live on each ``Commit.expanded``; the state owns the
    commit list, so every write goes through the methods below.
    """

    commits: List[Commit]
    selected_index: int = 0

    @model_validator(mode="after")
    def _check_bounds(self) -> "BrowserState":
        if not self.commits:
            raise ValueError("cannot browse an empty history")
        if not 0 <= self.selected_index < len(self.commits):
            raise ValueError(
                f"selected_index {self.selected_index} outside 0..{len(self.commits) - 1}"
            )
        return self

    @property
    def last_index(self) -> int:
        return len(self.commits) - 1

    @property
    def selected(self) -> Commit:
        """The commit under the cursor."""
        return self.commits[self.selected_index]

    def move_up(self) -> bool:
        """Select the previous commit. Returns True if the selection moved."""
        new_index = max(0, self.selected_index - 1)
        changed = new_index != self.selected_index
        self.selected_index = new_index
        return changed

    def move_down(self) -> bool:
        """Select the next commit. Returns True if the selection moved."""
        new_index = min(self.last_index, self.selected_index + 1)
        changed = new_index != self.selected_index
        self.selected_index = new_index
        return changed

    def toggle_selected(self) -> bool:
        """Expand or collapse the selected commit. Always a state change."""
        commit = self.selected
        commit.expanded = not commit.expanded
        return True
