"""Datetime-prefixed text.

The first whitespace-free token of a line is a datetime candidate when it
starts with a digit ("2019-08-27T19:13:16 deploy"). Dated lines sort before
undated ones and by instant among themselves. Ties and undated pairs fall back
to comparing the whole lines as text.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

from dateutil import parser as dateparser

from omegasort.approaches._base import LineComparer
from omegasort.collation import StringComparer
from omegasort.errors import DatetimeParseError
from omegasort.params import SortParams

logger = logging.getLogger(__name__)

DATETIME_TOKEN_RE = re.compile(r"[0-9]\S+")

# Calendar dates with an optional time of day and UTC offset:
# 2019-08-27, 2017/1/12, 2019-08-27T19:13:16.5+02:00, 20190827.
DATE_SHAPE_RE = re.compile(
    r"""
    (?:
        \d{4}(?P<sep>[-/])\d{1,2}(?P=sep)\d{1,2}
        (?:
            [Tt]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?
            (?:[Zz]|[+-]\d{2}(?::?\d{2})?)?
        )?
    |
        \d{8}
    )
    """,
    re.VERBOSE | re.ASCII,
)

# Unix timestamps: 10 digits are seconds, 13 are milliseconds.
TIMESTAMP_RE = re.compile(r"\d{10}|\d{13}", re.ASCII)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def leading_datetime_token(line: str) -> str | None:
    m = DATETIME_TOKEN_RE.match(line)
    return m.group(0) if m else None


def _parse(token: str) -> datetime:
    if TIMESTAMP_RE.fullmatch(token):
        if len(token) == 13:
            return _EPOCH + timedelta(milliseconds=int(token))
        return _EPOCH + timedelta(seconds=int(token))
    dt = dateparser.parse(token)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_datetime(token: str) -> datetime:
    """Parse ``token`` into an aware UTC datetime; naive values are taken as UTC.

    Only whole-token dates, datetimes and unix timestamps are accepted, so
    "3rd", "12.5" or "7pm" raise ``DatetimeParseError`` rather than being
    read as partial dates.
    """
    if not (DATE_SHAPE_RE.fullmatch(token) or TIMESTAMP_RE.fullmatch(token)):
        raise DatetimeParseError(token, reason="not a date, datetime or unix timestamp")
    try:
        return _parse(token)
    except (ValueError, OverflowError) as exc:
        raise DatetimeParseError(token, reason=str(exc)) from exc


class DatetimeTextComparer(LineComparer):
    def __init__(self, params: SortParams) -> None:
        super().__init__(params)
        self.strings = StringComparer.from_params(params)

    def _instant(self, token: str, operand: int) -> datetime:
        try:
            return self.cached(token, parse_datetime)
        except DatetimeParseError as exc:
            exc.operand = operand
            raise

    def compare(self, a: str, b: str) -> int:
        tok_a = leading_datetime_token(a)
        tok_b = leading_datetime_token(b)

        if tok_a is not None and tok_b is not None:
            dt_a = self._instant(tok_a, 0)
            dt_b = self._instant(tok_b, 1)
            if dt_a != dt_b:
                return -1 if dt_a < dt_b else 1
            logger.debug("same instant, comparing whole lines: %r <=> %r", a, b)
        elif tok_a is not None:
            return -1
        elif tok_b is not None:
            return 1

        return self.strings.cmp(a, b)
