"""Comparator plumbing shared by every sort approach.

Each approach is a ``LineComparer``: a three-way comparison over two lines
that raises ``SortError`` when a line cannot be interpreted. Binding a
comparer to a line collection produces the boolean ``(i, j) -> bool``
comparator that generic sort routines consume, plus the ``ErrorLatch`` that
records the first failure.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from omegasort.errors import SortError
from omegasort.params import SortParams

Comparator = Callable[[int, int], bool]


class ErrorLatch:
    """Single-assignment error cell: the first error set wins and stays."""

    def __init__(self) -> None:
        self._error: SortError | None = None

    @property
    def error(self) -> SortError | None:
        return self._error

    @property
    def is_set(self) -> bool:
        return self._error is not None

    def set(self, error: SortError) -> bool:
        """Record ``error`` unless one is already latched. Returns True if recorded."""
        if self._error is not None:
            return False
        self._error = error
        return True

    def raise_if_set(self) -> None:
        if self._error is not None:
            raise self._error


class LineComparer:
    """Three-way ordering of two lines under one interpretation.

    Subclasses implement ``compare``. Values parsed from line text are
    memoized per comparer (keyed by text, never by index, since the sort may
    move lines around). Only successful parses are cached.
    """

    def __init__(self, params: SortParams) -> None:
        self.params = params
        self._cache: dict[str, object] = {}

    def compare(self, a: str, b: str) -> int:
        raise NotImplementedError

    def cached(self, text: str, parse: Callable[[str], object]):
        try:
            return self._cache[text]
        except KeyError:
            value = self._cache[text] = parse(text)
            return value

    def compare_at(self, lines: Sequence[str], i: int, j: int) -> int:
        """``compare`` for two indices, pinning any error to its 1-based line."""
        try:
            return self.compare(lines[i], lines[j])
        except SortError as exc:
            failed = i if exc.operand == 0 else j
            raise exc.at_line(failed + 1) from exc

    def directed(self, order: int) -> bool:
        """Turn a three-way result into "sorts strictly first" for the sort direction."""
        return order > 0 if self.params.reverse else order < 0


def bind_comparator(comparer: LineComparer, lines: Sequence[str]) -> tuple[Comparator, ErrorLatch]:
    """Bind ``comparer`` to ``lines`` as a latching boolean comparator.

    Once the latch holds an error every later call returns False without
    touching the lines, so a sort routine that keeps probing cannot fault.
    """
    latch = ErrorLatch()

    def less(i: int, j: int) -> bool:
        if latch.is_set:
            return False
        try:
            order = comparer.compare_at(lines, i, j)
        except SortError as exc:
            latch.set(exc)
            return False
        return comparer.directed(order)

    return less, latch
