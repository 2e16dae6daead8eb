"""Sort approaches: one ``LineComparer`` per way of reading a line."""

from omegasort.approaches._base import (
    Comparator,
    ErrorLatch,
    LineComparer,
    bind_comparator,
)
from omegasort.approaches.datetime_text import DatetimeTextComparer
from omegasort.approaches.ip import IpComparer
from omegasort.approaches.network import NetworkComparer
from omegasort.approaches.numbered import NumberedTextComparer
from omegasort.approaches.path import PathComparer
from omegasort.approaches.text import TextComparer

__all__ = [
    "Comparator",
    "DatetimeTextComparer",
    "ErrorLatch",
    "IpComparer",
    "LineComparer",
    "NetworkComparer",
    "NumberedTextComparer",
    "PathComparer",
    "TextComparer",
    "bind_comparator",
]
