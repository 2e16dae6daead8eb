"""omegasort: sort files of lines by text, number, datetime, path, IP or network."""

from omegasort.errors import OmegasortError, SortError
from omegasort.params import UNDETERMINED, SortParams
from omegasort.registry import APPROACHES, Approach, available_approaches, get_approach

__all__ = [
    "APPROACHES",
    "Approach",
    "OmegasortError",
    "SortError",
    "SortParams",
    "UNDETERMINED",
    "available_approaches",
    "get_approach",
]
