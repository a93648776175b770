"""Changed-file model for a single commit."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator


class FileStatus(str, Enum):
    """How a file changed in a commit. The value is the letter git reports."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"


class ChangedFile(BaseModel):
    """Represents one file touched by a commit."""

    name: str
    status: FileStatus
    old_name: Optional[str] = None  # Only for renames

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_old_name(self) -> "ChangedFile":
        if self.status is FileStatus.RENAMED:
            if not self.old_name:
                raise ValueError("renamed file needs an old_name")
        elif self.old_name is not None:
            raise ValueError(f"old_name is only valid for renames, not {self.status.name}")
        return self

    @property
    def extension(self) -> str:
        """Text after the last dot of the file's base name."""
        basename = self.name.rsplit("/", 1)[-1]
        return basename.rsplit(".", 1)[-1]
