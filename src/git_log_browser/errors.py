"""Exceptions raised by Git Log Browser."""


class BrowserError(Exception):
    """Base class for all Git Log Browser errors."""


class RepositoryError(BrowserError):
    """The repository could not be opened or a git command failed."""


class NoCurrentBranchError(RepositoryError):
    """The branch listing has no line marked as the current branch."""

    def __init__(self, message: str = "No current branch selected"):
        super().__init__(message)


class MalformedCommitError(BrowserError):
    """A commit block could not be turned into a Commit."""


class UnknownStatusError(BrowserError):
    """A changed-file line carries a status code we do not handle."""
