"""Tests for omegasort.lines: reading, writing and comment attachment."""

from __future__ import annotations

import io

import pytest

from omegasort.errors import LineEndingError
from omegasort.lines import (
    Comment,
    SortableLine,
    determine_line_ending,
    format_lines,
    lines_from_text,
    read_lines,
    write_lines,
)

WITH_COMMENTS = """foo
bar
# comment 1
baz

# comment 2
quux
"""

WITH_REPEATED_LINES = """# first foo
foo
bar

# first baz
baz

# second foo
foo
quux

# second baz
baz
"""


def _plain(*pairs) -> list[SortableLine]:
    return [SortableLine(n, text) for n, text in pairs]


# ── lines_from_text ──────────────────────────────────────────


class TestLinesFromText:
    def test_plain_lines(self):
        assert lines_from_text("foo\nbar\nbaz\nquux\n") == (
            _plain((1, "foo"), (2, "bar"), (3, "baz"), (4, "quux")),
            False,
        )

    def test_missing_final_newline(self):
        lines, _ = lines_from_text("foo\nbar")
        assert [sl.line for sl in lines] == ["foo", "bar"]

    def test_empty_lines_skipped_and_reported(self):
        assert lines_from_text("foo\n\nbar\n\nbaz\nquux\n") == (
            _plain((1, "foo"), (3, "bar"), (5, "baz"), (6, "quux")),
            True,
        )

    def test_without_prefix_comments_are_lines(self):
        lines, has_empty = lines_from_text(WITH_COMMENTS)
        assert lines == _plain(
            (1, "foo"), (2, "bar"), (3, "# comment 1"), (4, "baz"), (6, "# comment 2"), (7, "quux"),
        )
        assert has_empty is True

    def test_comments_attach_to_next_line(self):
        lines, has_empty = lines_from_text(WITH_COMMENTS, "#")
        assert lines == [
            SortableLine(1, "foo"),
            SortableLine(2, "bar"),
            SortableLine(4, "baz", Comment(["# comment 1"], False)),
            SortableLine(7, "quux", Comment(["# comment 2"], True)),
        ]
        assert has_empty is False

    def test_multi_line_comment_block(self):
        lines, _ = lines_from_text("# a\n  # b\nx\n", "#")
        assert lines == [SortableLine(3, "x", Comment(["# a", "  # b"], False))]

    def test_trailing_comment_kept_as_lines(self):
        lines, _ = lines_from_text("x\n# dangling\n", "#")
        assert lines == _plain((1, "x"), (2, "# dangling"))

    def test_crlf(self):
        lines, _ = lines_from_text("b\r\na\r\n", line_ending="\r\n")
        assert [sl.line for sl in lines] == ["b", "a"]


# ── determine_line_ending ────────────────────────────────────


class TestDetermineLineEnding:
    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"Lorem ipsum\nconsectetur", "\n"),
            (b"Lorem ipsum\rconsectetur", "\r"),
            (b"Lorem ipsum\r\nconsectetur", "\r\n"),
        ],
    )
    def test_detects(self, data, expected):
        assert determine_line_ending(data) == expected

    def test_no_ending(self):
        with pytest.raises(LineEndingError, match="first 2048 bytes"):
            determine_line_ending(b"Lorem ipsum\tconsectetur")

    def test_ending_past_first_chunk(self):
        with pytest.raises(LineEndingError):
            determine_line_ending(b"x" * 2600 + b"\n")


# ── read_lines ───────────────────────────────────────────────


class TestReadLines:
    def test_reads_file(self, tmp_path):
        f = tmp_path / "in.txt"
        f.write_bytes(b"b\r\na\r\n")
        lines, has_empty, ending = read_lines(f)
        assert [sl.line for sl in lines] == ["b", "a"]
        assert has_empty is False
        assert ending == "\r\n"

    def test_empty_file(self, tmp_path):
        f = tmp_path / "empty.txt"
        f.write_bytes(b"")
        assert read_lines(f) == ([], False, "\n")


# ── write_lines ──────────────────────────────────────────────


class TestWriteLines:
    @pytest.mark.parametrize("text", [WITH_COMMENTS, WITH_REPEATED_LINES])
    def test_comment_layout_survives(self, text):
        lines, _ = lines_from_text(text, "#")
        buf = io.StringIO()
        write_lines(lines, "\n", buf)
        assert buf.getvalue() == text

    def test_first_comment_drops_leading_blank(self):
        lines = [
            SortableLine(5, "a", Comment(["# a"], True)),
            SortableLine(1, "b", Comment(["# b"], True)),
        ]
        assert format_lines(lines, "\n") == "# a\na\n\n# b\nb\n"

    def test_format_lines_uses_line_ending(self):
        assert format_lines(_plain((1, "a"), (2, "b")), "\r\n") == "a\r\nb\r\n"
