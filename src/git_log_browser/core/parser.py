"""Parse ``git log --name-status`` output into Commit models.

The expected input is produced by::

    git log --pretty=format:%H|%an|%ad|%s --name-status

One block per commit, blocks separated by a blank line. The first line of a
block is ``hash|author|date|summary``; every following line is
``status<TAB>path`` or, for renames and copies, ``status<TAB>old<TAB>new``.
"""

import logging
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from git_log_browser.errors import MalformedCommitError, UnknownStatusError
from git_log_browser.models.change import ChangedFile, FileStatus
from git_log_browser.models.commit import Commit

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
HEADER_FIELDS = 4

# Status letter -> (status, expected number of TAB separated fields)
STATUS_CODES: Dict[str, Tuple[FileStatus, int]] = {
    "A": (FileStatus.ADDED, 2),
    "M": (FileStatus.MODIFIED, 2),
    "D": (FileStatus.DELETED, 2),
    "R": (FileStatus.RENAMED, 3),
    "C": (FileStatus.COPIED, 3),
}

# Renames and copies carry a similarity score, e.g. R100 or C075
_SCORED_STATUS = re.compile(r"^([RC])\d*$")

# A status letter, optional score, then a TAB: the start of a file line
_FILE_LINE = re.compile(r"^[A-Z]\d*\t")

# git's default --date format, e.g. "Mon Jan 1 10:00:00 2024 +0000"
GIT_DEFAULT_DATE_FORMAT = "%a %b %d %H:%M:%S %Y %z"

_BLANK_LINE = re.compile(r"\n[ \t]*\n")


def parse_log(text: str) -> List[Commit]:
    """Parse raw log text into an ordered list of commits.

    Malformed commits are skipped and unknown file lines dropped; both are
    logged as warnings and never abort the whole parse.
    """
    commits: List[Commit] = []
    for block in split_blocks(text):
        for header, file_lines in _group_block(block):
            try:
                commits.append(parse_commit(header, file_lines))
            except MalformedCommitError as e:
                logger.warning("Skipping malformed commit %r: %s", header, e)

    logger.debug("Parsed %d commits", len(commits))
    return commits


def split_blocks(text: str) -> List[str]:
    """Split log text on blank lines, discarding empty blocks."""
    normalized = text.replace("\r\n", "\n")
    return [block.strip("\n") for block in _BLANK_LINE.split(normalized) if block.strip()]


def _group_block(block: str) -> List[Tuple[str, List[str]]]:
    """Group one block into (header, file lines) pairs.

    Commits without changed files are not followed by a blank line, so they
    share a block with the next commit. A line is a file line only when it
    starts with a status code and a TAB; summaries may hold TABs themselves.
    """
    groups: List[Tuple[str, List[str]]] = []
    for line in block.split("\n"):
        if not line.strip():
            continue
        if not groups or not _FILE_LINE.match(line):
            groups.append((line, []))
        else:
            groups[-1][1].append(line)
    return groups


def parse_commit(header: str, file_lines: List[str]) -> Commit:
    """Build one Commit from its header line and its file lines."""
    hash_, author, raw_date, summary = parse_header(header)
    timestamp = parse_date(raw_date)

    files: List[ChangedFile] = []
    seen = set()
    for line in file_lines:
        try:
            changed = parse_file_line(line)
        except UnknownStatusError as e:
            logger.warning("Dropping file entry in %s: %s", hash_, e)
            continue
        if changed.name in seen:
            logger.warning("Dropping duplicate file entry in %s: %s", hash_, changed.name)
            continue
        seen.add(changed.name)
        files.append(changed)

    try:
        return Commit(
            hash=hash_,
            author=author,
            timestamp=timestamp,
            summary=summary,
            files=files,
        )
    except ValidationError as e:
        raise MalformedCommitError(str(e)) from e


def parse_header(line: str) -> Tuple[str, str, str, str]:
    """Split ``hash|author|date|summary``; the summary keeps any further pipes."""
    fields = line.split(FIELD_SEPARATOR, HEADER_FIELDS - 1)
    if len(fields) < HEADER_FIELDS:
        raise MalformedCommitError(
            f"expected {HEADER_FIELDS} fields, found {len(fields)}"
        )
    hash_, author, raw_date, summary = fields
    if not hash_.strip():
        raise MalformedCommitError("missing commit hash")
    return hash_.strip(), author, raw_date.strip(), summary


def parse_date(raw: str) -> datetime:
    """Parse the date emitted by git log into an aware datetime.

    Accepts RFC 2822 (``--date=rfc``), git's default format and ISO 8601.
    """
    parsed: Optional[datetime] = None
    try:
        parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError):
        parsed = None

    if parsed is None:
        try:
            parsed = datetime.strptime(raw, GIT_DEFAULT_DATE_FORMAT)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(raw)
            except ValueError as e:
                raise MalformedCommitError(f"unparseable date {raw!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_status(code: str) -> FileStatus:
    """Normalize a git status code such as ``M`` or ``R100``."""
    match = _SCORED_STATUS.match(code)
    letter = match.group(1) if match else code
    if letter not in STATUS_CODES:
        raise UnknownStatusError(f"unrecognized status code {code!r}")
    return STATUS_CODES[letter][0]


def parse_file_line(line: str) -> ChangedFile:
    """Parse ``status<TAB>path`` or ``status<TAB>old<TAB>new``."""
    fields = line.split("\t")
    status = parse_status(fields[0].strip())
    expected = STATUS_CODES[status.value][1]
    if len(fields) != expected or not all(fields[1:]):
        raise UnknownStatusError(
            f"expected {expected} fields for status {fields[0]!r}, got {line!r}"
        )

    if status is FileStatus.RENAMED:
        return ChangedFile(name=fields[2], old_name=fields[1], status=status)
    # Copies keep only the destination; the source still exists unchanged
    return ChangedFile(name=fields[-1], status=status)
