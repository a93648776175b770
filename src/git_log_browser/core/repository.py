"""Read branch and log information from a git repository."""

import logging
from pathlib import Path
from typing import List, Optional

import git
from git import Repo

from git_log_browser.errors import NoCurrentBranchError, RepositoryError

logger = logging.getLogger(__name__)

LOG_FORMAT = "--pretty=format:%H|%an|%ad|%s"
CURRENT_BRANCH_PREFIX = "* "
DETACHED_HEAD_PREFIX = "(HEAD detached"


def parse_current_branch(branch_output: str) -> str:
    """Pick the current branch out of ``git branch`` output.

    A detached HEAD resolves to ``HEAD``.

    Raises:
        NoCurrentBranchError: if no line is marked with ``* ``.
    """
    for line in branch_output.splitlines():
        if line.startswith(CURRENT_BRANCH_PREFIX):
            name = line[len(CURRENT_BRANCH_PREFIX):].strip()
            if name.startswith(DETACHED_HEAD_PREFIX):
                return "HEAD"
            if name:
                return name
    raise NoCurrentBranchError()


class GitHistory:
    """Runs the git commands whose output the browser consumes."""

    def __init__(self, repo_path: Path):
        self.repo_path = Path(repo_path)
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Open the repository on first use."""
        if self._repo is None:
            try:
                self._repo = Repo(self.repo_path, search_parent_directories=True)
            except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
                raise RepositoryError(f"Not a git repository: {self.repo_path}") from e
        return self._repo

    def current_branch(self) -> str:
        """Name of the checked out branch."""
        try:
            output = self.repo.git.branch()
        except git.exc.GitCommandError as e:
            raise RepositoryError(f"git branch failed: {e}") from e
        branch = parse_current_branch(output)
        logger.debug("Current branch: %s", branch)
        return branch

    def log_text(self, branch: str, max_count: Optional[int] = None) -> str:
        """Raw ``git log --name-status`` output for ``branch``."""
        args: List[str] = [LOG_FORMAT, "--name-status", "--date=rfc"]
        if max_count is not None:
            args.append(f"--max-count={max_count}")
        args.append(branch)
        try:
            return self.repo.git.log(*args)
        except git.exc.GitCommandError as e:
            raise RepositoryError(f"git log failed for {branch}: {e}") from e
