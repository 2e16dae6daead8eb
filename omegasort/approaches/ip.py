"""Raw IP addresses, in numeric order with IPv4 before IPv6."""

from __future__ import annotations

from omegasort import addresses
from omegasort.approaches._base import LineComparer
from omegasort.errors import InvalidAddressError


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_packed(a: bytes, b: bytes) -> int:
    """Shorter (IPv4) first, then unsigned byte-wise order."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return _cmp(a, b)


class IpComparer(LineComparer):
    def _address(self, text: str, operand: int) -> bytes:
        try:
            return self.cached(text, addresses.parse_address)
        except ValueError as exc:
            raise InvalidAddressError(text, operand=operand) from exc

    def compare(self, a: str, b: str) -> int:
        return compare_packed(self._address(a, 0), self._address(b, 1))
