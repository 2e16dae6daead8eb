"""Canonical approach registry, the single source of truth.

All sort approach metadata lives here. The CLI derives its ``--sort``
choices, help text and flag validation from this table instead of keeping
its own lists.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from omegasort.approaches import (
    Comparator,
    DatetimeTextComparer,
    ErrorLatch,
    IpComparer,
    LineComparer,
    NetworkComparer,
    NumberedTextComparer,
    PathComparer,
    TextComparer,
    bind_comparator,
)
from omegasort.errors import UnknownApproachError
from omegasort.params import SortParams


@dataclass(frozen=True)
class Approach:
    name: str
    description: str
    supports_locale: bool
    supports_path_flavor: bool
    comparer: type[LineComparer]

    def make_comparer(self, params: SortParams) -> LineComparer:
        return self.comparer(params)

    def make_comparator(
        self, lines: Sequence[str], params: SortParams
    ) -> tuple[Comparator, ErrorLatch]:
        """Comparator factory: a latching ``(i, j) -> bool`` bound to ``lines``.

        Call once per sort; the comparator and latch share state and must not
        be reused with another collection.
        """
        return bind_comparator(self.make_comparer(params), lines)


APPROACHES: Mapping[str, Approach] = MappingProxyType({
    "text": Approach(
        "text",
        "Sort the file as text according to the specified locale.",
        True,
        False,
        TextComparer,
    ),
    "numbered-text": Approach(
        "numbered-text",
        "Sort the file assuming that each line starts with a numeric prefix,"
        " then fall back to sorting by text according to the specified locale.",
        True,
        False,
        NumberedTextComparer,
    ),
    "datetime-text": Approach(
        "datetime-text",
        "Sort the file assuming that each line starts with a date or datetime prefix,"
        " then fall back to sorting by text according to the specified locale.",
        True,
        False,
        DatetimeTextComparer,
    ),
    "path": Approach(
        "path",
        "Sort the file assuming that each line is a path,"
        " sorted so that deeper paths come after shorter.",
        True,
        True,
        PathComparer,
    ),
    "ip": Approach(
        "ip",
        "Sort the file assuming that each line is an IP address.",
        False,
        False,
        IpComparer,
    ),
    "network": Approach(
        "network",
        "Sort the file assuming that each line is a network in CIDR form.",
        False,
        False,
        NetworkComparer,
    ),
})


def approach_names() -> list[str]:
    """All approach names, in display order."""
    return list(APPROACHES)


def available_approaches() -> list[Approach]:
    return list(APPROACHES.values())


def get_approach(name: str) -> Approach:
    try:
        return APPROACHES[name]
    except KeyError:
        raise UnknownApproachError(
            f"unknown sort approach '{name}' (choose from: {', '.join(APPROACHES)})"
        ) from None
