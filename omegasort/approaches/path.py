"""Filesystem path ordering.

Rules, each deciding only when the two paths differ on it:

1. absolute before relative
2. (Windows) drive-letter roots before everything else, then by drive letter
3. shallower before deeper, so ``/z`` precedes ``/a/a``
4. segment by segment as text
"""

from __future__ import annotations

import logging

from omegasort import paths
from omegasort.approaches._base import LineComparer
from omegasort.collation import StringComparer
from omegasort.enums import PathFlavor
from omegasort.params import SortParams

logger = logging.getLogger(__name__)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class PathComparer(LineComparer):
    def __init__(self, params: SortParams) -> None:
        super().__init__(params)
        self.strings = StringComparer.from_params(params)
        self.flavor = params.path_flavor

    def _split(self, path: str) -> tuple[bool, list[str]]:
        return self.cached(
            path,
            lambda p: (paths.is_absolute(p, self.flavor), paths.split_segments(p, self.flavor)),
        )

    def _cmp_drive(self, first_a: str | None, first_b: str | None) -> int:
        a_is = first_a is not None and paths.is_drive_letter(first_a)
        b_is = first_b is not None and paths.is_drive_letter(first_b)
        if a_is and not b_is:
            return -1
        if b_is and not a_is:
            return 1
        if a_is and b_is:
            # Drive letters order by code point, never by locale.
            return _cmp(first_a, first_b)
        return 0

    def compare(self, a: str, b: str) -> int:
        abs_a, segs_a = self._split(a)
        abs_b, segs_b = self._split(b)

        if abs_a != abs_b:
            logger.debug("only one side is absolute: %r <=> %r", a, b)
            return -1 if abs_a else 1

        if self.flavor == PathFlavor.WINDOWS:
            order = self._cmp_drive(
                segs_a[0] if segs_a else None,
                segs_b[0] if segs_b else None,
            )
            if order:
                return order

        if len(segs_a) != len(segs_b):
            return -1 if len(segs_a) < len(segs_b) else 1

        for seg_a, seg_b in zip(segs_a, segs_b):
            order = self.strings.cmp(seg_a, seg_b)
            if order:
                return order

        logger.debug("no differences in path found: %r <=> %r", a, b)
        return 0
