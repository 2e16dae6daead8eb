"""Numbered text: a leading integer or decimal, then text.

Lines with a number sort before lines without one. Two numbered lines
compare by value first and by the text after the number on a tie; two
unnumbered lines compare as plain text.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from omegasort.approaches._base import LineComparer
from omegasort.collation import StringComparer
from omegasort.errors import NumberParseError
from omegasort.params import SortParams

logger = logging.getLogger(__name__)

NUMBER_PREFIX_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


class Numbered(NamedTuple):
    number: str
    remainder: str


class Unnumbered(NamedTuple):
    text: str


def split_numeric_prefix(line: str) -> Numbered | Unnumbered:
    """Tokenize ``line`` into its numeric prefix and the rest (separator included)."""
    m = NUMBER_PREFIX_RE.match(line)
    if m is None:
        return Unnumbered(line)
    return Numbered(m.group(0), line[m.end():])


def parse_number(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise NumberParseError(text, reason="not a number") from exc
    if not value.is_finite():
        raise NumberParseError(text, reason="not a finite number")
    return value


class NumberedTextComparer(LineComparer):
    def __init__(self, params: SortParams) -> None:
        super().__init__(params)
        self.strings = StringComparer.from_params(params)

    def _number(self, text: str, operand: int) -> Decimal:
        try:
            return self.cached(text, parse_number)
        except NumberParseError as exc:
            exc.operand = operand
            raise

    def compare(self, a: str, b: str) -> int:
        tok_a = split_numeric_prefix(a)
        tok_b = split_numeric_prefix(b)
        a_numbered = isinstance(tok_a, Numbered)
        b_numbered = isinstance(tok_b, Numbered)

        if a_numbered and not b_numbered:
            logger.debug("only the left side has a number: %r <=> %r", a, b)
            return -1
        if b_numbered and not a_numbered:
            logger.debug("only the right side has a number: %r <=> %r", a, b)
            return 1
        if not a_numbered:
            return self.strings.cmp(tok_a.text, tok_b.text)

        num_a = self._number(tok_a.number, 0)
        num_b = self._number(tok_b.number, 1)
        if num_a != num_b:
            return -1 if num_a < num_b else 1
        logger.debug("numbers are equal, comparing the rest: %r <=> %r", a, b)
        return self.strings.cmp(tok_a.remainder, tok_b.remainder)
