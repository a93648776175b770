"""Data models for Git Log Browser."""

from .change import ChangedFile, FileStatus
from .commit import Commit
from .state import BrowserState

__all__ = ["ChangedFile", "FileStatus", "Commit", "BrowserState"]
