"""Commit model for the browsed history."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, field_validator

from .change import ChangedFile

DATE_FORMAT = "%d %b %Y"
TIME_FORMAT = "%H:%M"


class Commit(BaseModel):
    """Represents a commit parsed from the log output."""

    hash: str
    author: str
    timestamp: datetime
    summary: str = ""
    files: List[ChangedFile] = []
    expanded: bool = False  # UI only

    model_config = {"validate_assignment": True}

    @field_validator("files")
    @classmethod
    def _unique_names(cls, files: List[ChangedFile]) -> List[ChangedFile]:
        seen = set()
        for changed in files:
            if changed.name in seen:
                raise ValueError(f"duplicate file in commit: {changed.name}")
            seen.add(changed.name)
        return files

    @property
    def display_date(self) -> str:
        """Commit date in the local timezone, e.g. ``01 Jan 2024``."""
        return self.timestamp.astimezone().strftime(DATE_FORMAT)

    @property
    def display_time(self) -> str:
        """Commit time in the local timezone, 24-hour clock."""
        return self.timestamp.astimezone().strftime(TIME_FORMAT)
