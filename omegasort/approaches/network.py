"""CIDR networks: by address (IPv4 first), then by prefix length."""

from __future__ import annotations

from omegasort import addresses
from omegasort.approaches._base import LineComparer
from omegasort.approaches.ip import compare_packed
from omegasort.errors import InvalidNetworkError


class NetworkComparer(LineComparer):
    def _network(self, text: str, operand: int) -> tuple[bytes, int]:
        try:
            return self.cached(text, addresses.parse_cidr)
        except ValueError as exc:
            raise InvalidNetworkError(text, operand=operand) from exc

    def compare(self, a: str, b: str) -> int:
        addr_a, prefix_a = self._network(a, 0)
        addr_b, prefix_b = self._network(b, 1)
        order = compare_packed(addr_a, addr_b)
        if order:
            return order
        return (prefix_a > prefix_b) - (prefix_a < prefix_b)
