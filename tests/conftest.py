"""Shared fixtures for Git Log Browser tests."""

import logging
from datetime import datetime, timezone

import pytest

from git_log_browser.models.change import ChangedFile, FileStatus
from git_log_browser.models.commit import Commit
from git_log_browser.models.state import BrowserState

SAMPLE_LOG = (
    "c3c3c3|Carol|Wed, 3 Jan 2024 18:30:00 +0000|Rename helpers | tidy up\n"
    "R100\tsrc/old_helpers.ts\tsrc/helpers.ts\n"
    "D\tsrc/unused.css\n"
    "\n"
    "b2b2b2|Bob|Tue, 2 Jan 2024 09:15:00 +0000|Add config\n"
    "A\tpackage.json\n"
    "A\t.gitignore\n"
    "\n"
    "abc123|Alice|Mon, 1 Jan 2024 10:00:00 +0000|Fix bug\n"
    "M\tsrc/a.ts\n"
    "A\tsrc/b.ts\n"
    "\n"
)


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop handlers the CLI installs so tests stay independent."""
    yield
    package_logger = logging.getLogger("git_log_browser")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_log():
    """Raw log text for three commits, newest first."""
    return SAMPLE_LOG


@pytest.fixture
def commit_factory():
    """Build Commit objects with sensible defaults."""

    def make(hash="abc123", author="Alice", summary="Fix bug", files=None, day=1):
        return Commit(
            hash=hash,
            author=author,
            timestamp=datetime(2024, 1, day, 10, 0, tzinfo=timezone.utc),
            summary=summary,
            files=files or [],
        )

    return make


@pytest.fixture
def sample_commits(commit_factory):
    """Three commits, newest first, covering every colored status."""
    return [
        commit_factory(
            hash="c3c3c3",
            author="Carol",
            summary="Rename helpers",
            day=3,
            files=[
                ChangedFile(
                    name="src/helpers.ts",
                    old_name="src/old_helpers.ts",
                    status=FileStatus.RENAMED,
                ),
                ChangedFile(name="src/unused.css", status=FileStatus.DELETED),
            ],
        ),
        commit_factory(
            hash="b2b2b2",
            author="Bob",
            summary="Add config",
            day=2,
            files=[
                ChangedFile(name="package.json", status=FileStatus.ADDED),
                ChangedFile(name=".gitignore", status=FileStatus.ADDED),
            ],
        ),
        commit_factory(
            files=[
                ChangedFile(name="src/a.ts", status=FileStatus.MODIFIED),
                ChangedFile(name="src/b.ts", status=FileStatus.ADDED),
            ],
        ),
    ]


@pytest.fixture
def state(sample_commits):
    return BrowserState(commits=sample_commits)
