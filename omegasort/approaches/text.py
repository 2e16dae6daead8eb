"""Plain text ordering according to the selected locale."""

from __future__ import annotations

from omegasort.approaches._base import LineComparer
from omegasort.collation import StringComparer
from omegasort.params import SortParams


class TextComparer(LineComparer):
    def __init__(self, params: SortParams) -> None:
        super().__init__(params)
        self.strings = StringComparer.from_params(params)

    def compare(self, a: str, b: str) -> int:
        return self.strings.cmp(a, b)
