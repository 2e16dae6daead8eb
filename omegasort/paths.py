"""Path semantics: segment splitting and absoluteness per path flavor.

A thin adapter over ``pathlib``'s pure path classes, which already implement
POSIX and Windows conventions (drive letters, UNC shares, either separator
on Windows, collapsed ``//`` and ``.`` segments).
"""

from __future__ import annotations

import re
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from omegasort.enums import PathFlavor

_FLAVORS: dict[PathFlavor, type[PurePath]] = {
    PathFlavor.POSIX: PurePosixPath,
    PathFlavor.WINDOWS: PureWindowsPath,
}

DRIVE_LETTER_RE = re.compile(r"^[A-Z]:\\")


def _pure(path: str, flavor: PathFlavor) -> PurePath:
    return _FLAVORS[PathFlavor(flavor)](path)


def split_segments(path: str, flavor: PathFlavor) -> list[str]:
    """Ordered segments of ``path``; the root (``/``, ``C:\\``, ``\\\\host\\share\\``) is the first."""
    return list(_pure(path, flavor).parts)


def is_absolute(path: str, flavor: PathFlavor) -> bool:
    return _pure(path, flavor).is_absolute()


def is_drive_letter(segment: str) -> bool:
    """True for a Windows drive root segment such as ``C:\\``."""
    return bool(DRIVE_LETTER_RE.match(segment))
