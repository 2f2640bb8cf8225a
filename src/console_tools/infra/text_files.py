"""Infrastructure: text file access for the file-inspection commands.

Rules
-----
* Paths are made absolute before any check so messages name the file
  unambiguously.
* Handles are opened only inside :func:`open_lines` and closed on
  every exit path, including early stops and exceptions.
* Text is decoded as UTF-8 (a leading BOM is skipped) with invalid
  bytes replaced; ``\\n``, ``\\r\\n`` and ``\\r`` all end a line and
  are stripped.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from itertools import islice
from pathlib import Path

from console_tools.core.models import FileStats
from console_tools.exceptions import MissingFileError

logger = logging.getLogger(__name__)

ENCODING = "utf-8-sig"


# ---------------------------------------------------------------------------
# Path handling
# ---------------------------------------------------------------------------

def resolve_path(raw: str) -> Path:
    """Return *raw* as an absolute path without resolving symlinks."""
    return Path(os.path.abspath(raw))


def require_file(raw: str) -> Path:
    """Resolve *raw* and check that it names an existing regular file.

    Raises
    ------
    MissingFileError
        If the resolved path is missing or is not a regular file.
    """
    path = resolve_path(raw)
    if not path.is_file():
        raise MissingFileError(f"File not found: {path}")
    return path


# ---------------------------------------------------------------------------
# Line iteration
# ---------------------------------------------------------------------------

def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


@contextmanager
def open_lines(path: Path) -> Iterator[Iterator[str]]:
    """Open *path* and yield a lazy iterator over its lines.

    Usage::

        with open_lines(path) as lines:
            for line in lines:
                ...
    """
    logger.debug("opening %s", path)
    with path.open(encoding=ENCODING, errors="replace", newline=None) as handle:
        yield (_strip_newline(line) for line in handle)
    logger.debug("closed %s", path)


def head_lines(path: Path, count: int) -> list[str]:
    """Return at most the first *count* lines of *path*."""
    with open_lines(path) as lines:
        return list(islice(lines, count))


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

def compute_stats(path: Path) -> FileStats:
    """Count bytes, lines and whitespace-delimited words in *path*."""
    size = path.stat().st_size
    line_count = 0
    word_count = 0
    with open_lines(path) as lines:
        for line in lines:
            line_count += 1
            word_count += len(line.split())
    return FileStats(path=str(path), bytes=size, lines=line_count, words=word_count)
