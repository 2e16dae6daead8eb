"""Canonical enums for sort parameters.

StrEnum values compare equal to their string values (PathFlavor.WINDOWS == "windows"),
so flags read from config files or the command line can be passed straight through.
"""

from __future__ import annotations

import enum


class PathFlavor(enum.StrEnum):
    POSIX = "posix"
    WINDOWS = "windows"


class ExitStatus(enum.IntEnum):
    OK = 0
    CHECK_FAILED = 1
    ERROR = 2
    INVALID_ARGS = 101
    INTERRUPTED = 130
