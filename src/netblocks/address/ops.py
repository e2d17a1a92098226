"""Address primitives.

Stateless functions over raw 4-byte (IPv4) and 16-byte (IPv6) addresses:
comparison, stepping, arbitrary increments and decrements, deltas,
integer conversion and version detection.

For every function that can leave the address space the rule is that
underflows return the version-appropriate all-zeros address and overflows
return the all-ones address. Nothing wraps.
"""

import logging
from collections.abc import Sequence
from ipaddress import IPv4Address, IPv6Address
from typing import Union

from netblocks.address import arith
from netblocks.errors import UnsupportedFamilyError

logger = logging.getLogger(__name__)

IPV4_LEN = 4
IPV6_LEN = 16

MAX_IPV4 = 2**32 - 1
MAX_IPV6 = 2**128 - 1
MAX_UINT64 = 2**64 - 1

IPV4_ZERO = arith.limit(IPV4_LEN, 0x00)
IPV4_ONES = arith.limit(IPV4_LEN, 0xFF)
IPV6_ZERO = arith.limit(IPV6_LEN, 0x00)
IPV6_ONES = arith.limit(IPV6_LEN, 0xFF)

_MAPPED_PREFIX = bytes(10) + b"\xff\xff"

AddressLike = Union[bytes, bytearray, Sequence[int], IPv4Address, IPv6Address]


def as_ip(ip: AddressLike) -> bytes:
    """Coerce an address-like value to immutable 4 or 16 bytes.

    Raises:
        UnsupportedFamilyError: If the value is not an address of either family
    """
    if isinstance(ip, (IPv4Address, IPv6Address)):
        return ip.packed
    if ip is None or isinstance(ip, (str, int)):
        raise UnsupportedFamilyError(
            f"Expected raw address bytes, got {type(ip).__name__}",
            {"value": repr(ip)},
        )
    try:
        b = bytes(ip)
    except (TypeError, ValueError) as e:
        raise UnsupportedFamilyError(
            f"Cannot interpret {ip!r} as an address",
            {"value": repr(ip)},
        ) from e
    if len(b) not in (IPV4_LEN, IPV6_LEN):
        raise UnsupportedFamilyError(
            f"Address must be 4 or 16 bytes long, got {len(b)}",
            {"length": len(b)},
        )
    return b


def is_ipv4_mapped(ip: AddressLike) -> bool:
    """True for addresses in the RFC 4291 IPv4-mapped range ::ffff:0:0/96."""
    b = as_ip(ip)
    return len(b) == IPV6_LEN and b[:12] == _MAPPED_PREFIX


def version(ip: AddressLike | None) -> int:
    """Return 4 for a 4-byte address, 6 for any 16-byte one, 0 for None.

    An IPv4-mapped address reports 6 here; see effective_version().
    """
    if ip is None:
        return 0
    if len(as_ip(ip)) == IPV4_LEN:
        return 4
    return 6


def effective_version(ip: AddressLike | None) -> int:
    """Like version(), but IPv4-mapped IPv6 addresses report 4."""
    if ip is None:
        return 0
    b = as_ip(ip)
    if len(b) == IPV4_LEN or b[:12] == _MAPPED_PREFIX:
        return 4
    return 6


def force_ip4(ip: AddressLike) -> bytes:
    """Return only the embedded IPv4 address of an IPv4-mapped address.

    Any other address is returned unchanged.
    """
    b = as_ip(ip)
    if len(b) == IPV6_LEN and b[:12] == _MAPPED_PREFIX:
        return b[12:]
    return b


def to_ip16(ip: AddressLike) -> bytes:
    """Widen a 4-byte address to 16 bytes by prefixing twelve zero bytes."""
    b = as_ip(ip)
    if len(b) == IPV4_LEN:
        return bytes(12) + b
    return b


def _require_v4(ip: AddressLike) -> bytes:
    b = as_ip(ip)
    if effective_version(b) != 4:
        raise UnsupportedFamilyError(
            "Operation requires an IPv4 address",
            {"length": len(b)},
        )
    return force_ip4(b)


def _require_v6(ip: AddressLike) -> bytes:
    b = as_ip(ip)
    if len(b) != IPV6_LEN:
        raise UnsupportedFamilyError(
            "Operation requires a 16-byte IPv6 address",
            {"length": len(b)},
        )
    return b


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"Count must be non-negative, got {count}")


def compare_ips(a: AddressLike, b: AddressLike) -> int:
    """Compare two addresses byte for byte.

    Both are widened to 16 bytes first, so the order is total across
    families. Returns 0 if a == b, -1 if a < b, 1 if a > b.
    """
    x, y = to_ip16(a), to_ip16(b)
    return (x > y) - (x < y)


def next_ip(ip: AddressLike) -> bytes:
    """Return the address one above ip, or ip itself at the all-ones address."""
    b = as_ip(ip)
    xip = arith.step_up(b)
    if xip is None:
        logger.debug("next_ip saturated at all-ones address (%d bytes)", len(b))
        return b
    return xip


def previous_ip(ip: AddressLike) -> bytes:
    """Return the address one below ip, or ip itself at the all-zeros address."""
    b = as_ip(ip)
    xip = arith.step_down(b)
    if xip is None:
        logger.debug("previous_ip saturated at all-zeros address (%d bytes)", len(b))
        return b
    return xip


def increment_ip4_by(ip: AddressLike, count: int) -> bytes:
    """Return the IPv4 address count above ip, saturating at 255.255.255.255."""
    _check_count(count)
    return arith.add(_require_v4(ip), count)


def increment_ip6_by(ip: AddressLike, count: int) -> bytes:
    """Return the IPv6 address count above ip, saturating at the all-ones address."""
    _check_count(count)
    return arith.add(_require_v6(ip), count)


def increment_ip_by(ip: AddressLike, count: int) -> bytes:
    """Return the address count above ip, keeping the length of ip."""
    if version(ip) == 4:
        return increment_ip4_by(ip, count)
    return increment_ip6_by(ip, count)


def decrement_ip4_by(ip: AddressLike, count: int) -> bytes:
    """Return the IPv4 address count below ip, saturating at 0.0.0.0."""
    _check_count(count)
    return arith.sub(_require_v4(ip), count)


def decrement_ip6_by(ip: AddressLike, count: int) -> bytes:
    """Return the IPv6 address count below ip, saturating at ::."""
    _check_count(count)
    return arith.sub(_require_v6(ip), count)


def decrement_ip_by(ip: AddressLike, count: int) -> bytes:
    """Return the address count below ip, keeping the length of ip."""
    if version(ip) == 4:
        return decrement_ip4_by(ip, count)
    return decrement_ip6_by(ip, count)


def delta_ip4(a: AddressLike, b: AddressLike) -> int:
    """Return the number of addresses between two IPv4 addresses."""
    return abs(ip4_to_int(a) - ip4_to_int(b))


def delta_ip6(a: AddressLike, b: AddressLike) -> int:
    """Return the number of addresses between two addresses, unbounded."""
    return abs(ip_to_int(a) - ip_to_int(b))


def delta_ip(a: AddressLike, b: AddressLike) -> int:
    """Return the number of addresses between a and b, capped at MAX_IPV4."""
    if effective_version(a) == 4 and effective_version(b) == 4:
        return delta_ip4(a, b)
    delta = delta_ip6(a, b)
    if delta > MAX_IPV4:
        return MAX_IPV4
    return delta


def ip_to_int(ip: AddressLike) -> int:
    """Return the big-endian integer value of an address of either family."""
    return int.from_bytes(as_ip(ip), "big")


def ip4_to_int(ip: AddressLike) -> int:
    """Return the unsigned 32-bit value of an IPv4 (or IPv4-mapped) address."""
    return int.from_bytes(_require_v4(ip), "big")


def int_to_ip4(value: int) -> bytes:
    """Encode an integer as an IPv4 address, saturating outside 0..MAX_IPV4."""
    return arith.from_int(value, IPV4_LEN)


def int_to_ip6(value: int) -> bytes:
    """Encode an integer as an IPv6 address, saturating outside 0..MAX_IPV6."""
    return arith.from_int(value, IPV6_LEN)


def ip6_to_uint64(ip: AddressLike) -> int:
    """Return the network half (first 64 bits) of an IPv6 address.

    The host half is discarded; use ip_to_int() for the whole address.
    """
    b = as_ip(ip)
    if effective_version(b) != 6:
        raise UnsupportedFamilyError(
            "Operation requires an IPv6 address",
            {"length": len(b)},
        )
    return int.from_bytes(b[:8], "big")


def uint64_to_ip6(value: int) -> bytes:
    """Place a 64-bit value in the network half of an otherwise zero IPv6 address."""
    return arith.from_int(value, 8) + bytes(8)
