"""Address/network parsing into canonical byte form.

IPv4 packs to 4 bytes and IPv6 to 16, so comparing ``(len, bytes)`` orders
every IPv4 value before every IPv6 value.
"""

from __future__ import annotations

import ipaddress


def parse_address(text: str) -> bytes:
    """Packed bytes for a bare IPv4/IPv6 address. Raises ValueError."""
    return ipaddress.ip_address(text).packed


def parse_cidr(text: str) -> tuple[bytes, int]:
    """(address bytes, prefix length) for ``address/prefix`` text. Raises ValueError.

    Host bits may be set (``10.0.0.1/24``); the address is kept as written.
    """
    _, sep, prefix = text.partition("/")
    if not sep:
        raise ValueError(f"'{text}' has no prefix length")
    if not (prefix.isascii() and prefix.isdecimal()):
        raise ValueError(f"'{text}' prefix length must be a number of bits")
    iface = ipaddress.ip_interface(text)
    return iface.ip.packed, iface.network.prefixlen
