"""Exception types raised by the comparators, the sorter and the CLI."""

from __future__ import annotations

from omegasort.enums import ExitStatus


class OmegasortError(Exception):
    """Base class for user-facing failures.

    ``exit_status`` is what the CLI exits with when the error reaches the
    top level.
    """

    exit_status = ExitStatus.ERROR


# ── Comparison-time errors (latched by comparators) ─────────


class SortError(OmegasortError):
    """A line could not be interpreted by the selected approach.

    ``line_number`` is the 1-based position of the offending line as the
    comparator saw it, or None until the comparator factory attaches it.
    ``operand`` says which side of the comparison failed (0 left, 1 right).
    """

    kind = "value"

    def __init__(
        self,
        text: str,
        line_number: int | None = None,
        reason: str = "",
        *,
        operand: int = 0,
    ) -> None:
        self.text = text
        self.line_number = line_number
        self.reason = reason
        self.operand = operand
        super().__init__(self._render())

    def _render(self) -> str:
        msg = f"invalid {self.kind} '{self.text}'"
        if self.line_number is not None:
            msg += f" at line {self.line_number}"
        if self.reason:
            msg += f": {self.reason}"
        return msg

    def at_line(self, line_number: int) -> SortError:
        """Return a copy of this error pinned to ``line_number``."""
        return type(self)(self.text, line_number, self.reason, operand=self.operand)


class NumberParseError(SortError):
    kind = "number"


class DatetimeParseError(SortError):
    kind = "datetime"


class InvalidAddressError(SortError):
    kind = "IP address"


class InvalidNetworkError(SortError):
    kind = "network"


# ── --check failures ─────────────────────────────────────────


class CheckError(OmegasortError):
    exit_status = ExitStatus.CHECK_FAILED


class UnexpectedEmptyLinesError(CheckError):
    def __init__(self) -> None:
        super().__init__("the given file contains empty lines not preceded by a comment")


class NotSortedError(CheckError):
    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f'the given file is not sorted - found "{first}" before "{second}"')


class NotUniqueError(CheckError):
    def __init__(self, line1: int, line2: int, line: str) -> None:
        self.line1 = line1
        self.line2 = line2
        self.line = line
        super().__init__(
            f'the given file contains non-unique lines at {line1} and {line2} containing "{line}"'
        )


# ── Setup errors ─────────────────────────────────────────────


class LocaleError(OmegasortError):
    pass


class UnknownApproachError(OmegasortError):
    pass


class LineEndingError(OmegasortError):
    pass


class UsageError(OmegasortError):
    """Flags that parse fine individually but cannot be combined."""

    exit_status = ExitStatus.INVALID_ARGS


__all__ = [
    "CheckError",
    "DatetimeParseError",
    "InvalidAddressError",
    "InvalidNetworkError",
    "LineEndingError",
    "LocaleError",
    "NotSortedError",
    "NotUniqueError",
    "NumberParseError",
    "OmegasortError",
    "SortError",
    "UnexpectedEmptyLinesError",
    "UnknownApproachError",
    "UsageError",
]
