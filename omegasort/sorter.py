"""Sorting, checking and de-duplicating lines with an approach's comparer.

Two drivers live here:

- ``sort_indices`` / ``Sorter`` use the three-way comparer directly and stop
  at the first line that cannot be interpreted, so the reported error does
  not depend on how the sort happens to probe pairs.
- ``sort_with_comparator`` drives the latching boolean comparator returned by
  ``Approach.make_comparator`` the way an external sort routine would, and
  only reorders the lines if the latch stayed empty.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key

from omegasort.approaches import Comparator, ErrorLatch, LineComparer
from omegasort.errors import NotSortedError, NotUniqueError, SortError
from omegasort.lines import SortableLine
from omegasort.params import SortParams
from omegasort.registry import Approach

logger = logging.getLogger(__name__)


def sort_indices(comparer: LineComparer, texts: Sequence[str]) -> list[int]:
    """Indices of ``texts`` in sorted order. Raises the first ``SortError``.

    The sort is stable: lines that compare equal keep their input order in
    both directions.
    """
    reverse = comparer.params.reverse

    def cmp(i: int, j: int) -> int:
        order = comparer.compare_at(texts, i, j)
        return -order if reverse else order

    return sorted(range(len(texts)), key=cmp_to_key(cmp))


def sort_with_comparator(lines: list[str], comparator: Comparator, latch: ErrorLatch) -> None:
    """Sort ``lines`` in place with a boolean ``(i, j) -> bool`` comparator.

    If the comparator latched an error the lines are left as they were and
    the error is raised.
    """

    def cmp(i: int, j: int) -> int:
        if comparator(i, j):
            return -1
        if comparator(j, i):
            return 1
        return 0

    order = sorted(range(len(lines)), key=cmp_to_key(cmp))
    latch.raise_if_set()
    lines[:] = [lines[i] for i in order]


class Sorter:
    def __init__(self, approach: Approach, params: SortParams, unique: bool = False) -> None:
        self.approach = approach
        self.params = params
        self.unique = unique
        self.comparer = approach.make_comparer(params)

    def _pin_to_file(self, exc: SortError, lines: Sequence[SortableLine]) -> SortError:
        # compare_at numbers lines by position; report the file's line number.
        return exc.at_line(lines[exc.line_number - 1].line_number)

    def sort_lines(self, lines: list[SortableLine]) -> list[SortableLine]:
        texts = [sl.line for sl in lines]
        try:
            order = sort_indices(self.comparer, texts)
        except SortError as exc:
            raise self._pin_to_file(exc, lines) from None
        result = [lines[i] for i in order]

        if self.unique:
            deduped: list[SortableLine] = []
            for sl in result:
                if deduped and deduped[-1].line == sl.line:
                    logger.debug("dropping repeated line %d: %r", sl.line_number, sl.line)
                    continue
                deduped.append(sl)
            result = deduped
        return result

    def check(self, lines: Sequence[SortableLine]) -> None:
        """Raise ``NotSortedError``/``NotUniqueError`` for the first offending line."""
        texts = [sl.line for sl in lines]
        seen: dict[str, int] = {}
        for idx, sl in enumerate(lines):
            if idx > 0:
                try:
                    order = self.comparer.compare_at(texts, idx - 1, idx)
                except SortError as exc:
                    raise self._pin_to_file(exc, lines) from None
                if self.comparer.directed(-order):
                    raise NotSortedError(lines[idx - 1].line, sl.line)

            if self.unique:
                if sl.line in seen:
                    raise NotUniqueError(seen[sl.line], sl.line_number, sl.line)
                seen[sl.line] = sl.line_number
