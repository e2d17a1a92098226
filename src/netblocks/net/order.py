"""Ordering utilities for addresses and netblocks.

compare_nets() orders netblocks by base address and then by prefix length,
so an enclosing network sorts before its own subnets. The key functions
give the same orders for use with sorted() and list.sort().
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from netblocks.address import AddressLike, as_ip, compare_ips, to_ip16

if TYPE_CHECKING:
    from netblocks.net.base import Net


def compare_nets(a: "Net", b: "Net") -> int:
    """Compare two netblocks: 0 if equal, -1 if a sorts first, 1 otherwise."""
    val = compare_ips(a.ip, b.ip)
    if val != 0:
        return val
    return (a.prefixlen > b.prefixlen) - (a.prefixlen < b.prefixlen)


def ip_sort_key(ip: AddressLike) -> bytes:
    """Sort key matching compare_ips()."""
    return to_ip16(ip)


def net_sort_key(net: "Net") -> tuple[bytes, int]:
    """Sort key matching compare_nets()."""
    return to_ip16(net.ip), net.prefixlen


def sort_ips(ips: Iterable[AddressLike]) -> list[bytes]:
    """Return the addresses as bytes in ascending order."""
    return sorted((as_ip(ip) for ip in ips), key=ip_sort_key)


def sort_nets(nets: Iterable["Net"]) -> list["Net"]:
    """Return the netblocks in ascending order, enclosing blocks first."""
    return sorted(nets, key=net_sort_key)
