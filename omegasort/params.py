"""Per-invocation sort parameters."""

from __future__ import annotations

from dataclasses import dataclass

from omegasort.enums import PathFlavor

# BCP-47 "undetermined" language subtag: code point comparison, no collation.
UNDETERMINED = "und"


@dataclass(frozen=True)
class SortParams:
    locale: str = UNDETERMINED
    case_insensitive: bool = False
    reverse: bool = False
    path_flavor: PathFlavor = PathFlavor.POSIX


def make_params(
    locale: str | None = None,
    *,
    case_insensitive: bool = False,
    reverse: bool = False,
    windows: bool = False,
) -> SortParams:
    """Build SortParams from loosely-typed CLI/config values."""
    return SortParams(
        locale=locale or UNDETERMINED,
        case_insensitive=case_insensitive,
        reverse=reverse,
        path_flavor=PathFlavor.WINDOWS if windows else PathFlavor.POSIX,
    )
