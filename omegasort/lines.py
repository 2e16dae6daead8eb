"""Reading and writing line files.

Empty lines are dropped on read. With a comment prefix, comment lines are
attached to the line that follows them so they travel with it through the
sort, and an empty line right before a comment block is kept with the block.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from omegasort.errors import LineEndingError

logger = logging.getLogger(__name__)

FIRST_CHUNK_SIZE = 2048
LINE_ENDINGS = ("\r\n", "\n", "\r")


@dataclass
class Comment:
    lines: list[str] = field(default_factory=list)
    is_preceded_by_empty_line: bool = False


@dataclass
class SortableLine:
    line_number: int
    line: str
    comment: Comment | None = None


def determine_line_ending(data: bytes) -> str:
    """First of CRLF, LF, CR found in the first ``FIRST_CHUNK_SIZE`` bytes."""
    chunk = data[:FIRST_CHUNK_SIZE]
    for ending in LINE_ENDINGS:
        if ending.encode() in chunk:
            return ending
    raise LineEndingError(
        f"could not determine line ending from first {FIRST_CHUNK_SIZE} bytes of file"
    )


def lines_from_text(
    text: str,
    comment_prefix: str | None = None,
    line_ending: str = "\n",
) -> tuple[list[SortableLine], bool]:
    """Split ``text`` into sortable lines.

    Returns ``(lines, has_empty_lines)`` where ``has_empty_lines`` is True
    when an empty line is followed by something other than a comment, which
    means the file's blank-line layout cannot survive a sort.

    Comment lines after the last sortable line have nothing to attach to and
    are returned as ordinary lines.
    """
    raw = text.split(line_ending)
    if raw and raw[-1] == "":
        raw.pop()

    lines: list[SortableLine] = []
    comment: Comment | None = None
    comment_numbers: list[int] = []
    last_line_was_empty = False
    has_empty_lines = False

    for number, line in enumerate(raw, 1):
        if not line:
            last_line_was_empty = True
            continue

        if comment_prefix and line.strip().startswith(comment_prefix):
            if comment is None:
                comment = Comment(is_preceded_by_empty_line=last_line_was_empty)
                last_line_was_empty = False
            comment.lines.append(line)
            comment_numbers.append(number)
            continue

        if last_line_was_empty:
            has_empty_lines = True

        lines.append(SortableLine(number, line, comment))
        last_line_was_empty = False
        comment = None
        comment_numbers = []

    if comment is not None:
        logger.debug("keeping %d trailing comment line(s) as plain lines", len(comment.lines))
        lines.extend(
            SortableLine(n, comment_line)
            for n, comment_line in zip(comment_numbers, comment.lines)
        )

    return lines, has_empty_lines


def read_lines(
    path: str | Path,
    comment_prefix: str | None = None,
) -> tuple[list[SortableLine], bool, str]:
    """Read ``path`` and return ``(lines, has_empty_lines, line_ending)``.

    An empty file has no lines and defaults to LF.
    """
    data = Path(path).read_bytes()
    if not data:
        return [], False, "\n"
    line_ending = determine_line_ending(data)
    logger.debug("line ending for %s is %r", path, line_ending)
    lines, has_empty_lines = lines_from_text(
        data.decode("utf-8"), comment_prefix, line_ending
    )
    return lines, has_empty_lines, line_ending


def write_lines(lines: Iterable[SortableLine], line_ending: str, out: TextIO) -> None:
    for i, sl in enumerate(lines):
        if sl.comment is not None:
            # A comment that ends up first in the file loses its leading blank line.
            if sl.comment.is_preceded_by_empty_line and i != 0:
                out.write(line_ending)
            for comment_line in sl.comment.lines:
                out.write(comment_line)
                out.write(line_ending)
        out.write(sl.line)
        out.write(line_ending)


def format_lines(lines: Iterable[SortableLine], line_ending: str) -> str:
    buf = io.StringIO(newline="")
    write_lines(lines, line_ending, buf)
    return buf.getvalue()
