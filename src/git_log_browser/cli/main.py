"""Command line entry point for Git Log Browser."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape

from git_log_browser import __version__
from git_log_browser.core.browser import InputLoop
from git_log_browser.core.parser import parse_log
from git_log_browser.core.renderer import Screen
from git_log_browser.core.repository import GitHistory
from git_log_browser.core.terminal import chunk_reader, raw_mode
from git_log_browser.errors import RepositoryError
from git_log_browser.log import configure_logging
from git_log_browser.models.commit import Commit
from git_log_browser.models.state import BrowserState

console = Console()
logger = logging.getLogger(__name__)

FAREWELL = "\nExiting..."


def load_commits(
    repo_path: Path, branch: Optional[str], max_count: Optional[int]
) -> List[Commit]:
    """Resolve the branch, run git log and parse it."""
    history = GitHistory(repo_path)
    if branch is None:
        branch = history.current_branch()
    return parse_log(history.log_text(branch, max_count=max_count))


def browse(commits: List[Commit]) -> None:
    """Run the interactive browser until Ctrl+C or end of input."""
    stdin = sys.stdin.buffer
    loop = InputLoop(BrowserState(commits=commits), Screen(console.file))
    try:
        with raw_mode(stdin):
            reason = loop.run(chunk_reader(stdin))
            logger.debug("Browser stopped: %s", reason.value)
    finally:
        console.print(FAREWELL, markup=False, highlight=False)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Path to the repository to browse",
)
@click.option("--branch", default=None, help="Branch to browse instead of the current one")
@click.option(
    "-n",
    "--max-count",
    type=click.IntRange(min=1),
    default=None,
    help="Only show this many commits",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write debug logs to this file",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr")
def main(
    repo_path: Path,
    branch: Optional[str],
    max_count: Optional[int],
    log_file: Optional[Path],
    verbose: bool,
):
    """Browse the commit history of a git branch in the terminal."""
    configure_logging(log_file, verbose)

    try:
        commits = load_commits(repo_path, branch, max_count)
    except RepositoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e

    if not commits:
        console.print("[yellow]No commits to show.[/yellow]")
        return

    browse(commits)


if __name__ == "__main__":
    main()
