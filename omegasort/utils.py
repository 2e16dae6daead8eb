"""Shared utilities: paths, colors, atomic writes."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(os.environ.get("OMEGASORT_ROOT", Path.cwd())).resolve()


# ── Atomic file writes ─────────────────────────────────────


def safe_write_text(filepath: str | Path, content: str) -> None:
    """Atomically write text to a file using temp+rename.

    The temp file lives next to the target so the rename never crosses
    filesystems and an existing file keeps its permission bits. ``newline=""``
    keeps the caller's line endings as given.
    """
    p = Path(filepath)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=p.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if p.exists():
            shutil.copymode(p, tmp)
        os.replace(tmp, str(p))
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


# ── Terminal colors ─────────────────────────────────────────

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}

NO_COLOR = os.environ.get("NO_COLOR") is not None


def colorize(text: str, color: str, stream=None) -> str:
    stream = stream or sys.stderr
    if NO_COLOR or not stream.isatty():
        return str(text)
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def print_error(message: str) -> None:
    """Print a user-facing error message to stderr in a consistent format."""
    print(colorize(f"omegasort: error: {message}", "red"), file=sys.stderr)
