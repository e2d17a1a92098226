"""Netblock construction.

Builds Net4/Net6 objects from raw addresses, from CIDR text, or by
searching for the widest block that fits between two addresses.
"""

import ipaddress
import logging

from netblocks.address import (
    AddressLike,
    as_ip,
    compare_ips,
    effective_version,
    force_ip4,
    ip_to_string,
    next_ip,
    previous_ip,
    version,
)
from netblocks.errors import MalformedTextError, NoValidRangeError
from netblocks.net.base import Net
from netblocks.net.net4 import Net4
from netblocks.net.net6 import Net6

logger = logging.getLogger(__name__)


def new_net(ip: AddressLike, prefixlen: int) -> Net:
    """Return a Net4 for a 4-byte address or a Net6 for a 16-byte one.

    The address is aligned to the prefix, e.g. (192.168.0.7, 24) gives
    192.168.0.0/24.

    Raises:
        UnsupportedFamilyError: If the address or prefix length is invalid
    """
    b = as_ip(ip)
    if version(b) == 4:
        return Net4(b, prefixlen)
    return Net6(b, prefixlen)


def parse_cidr(text: str) -> tuple[bytes, Net]:
    """Parse CIDR text such as '192.168.1.61/26' or '2001:db8::/64'.

    The family follows the notation: dotted-decimal gives a Net4 (with a
    4-byte address), colon-hex a Net6. IPv4-mapped IPv6 text is rejected
    because the block would not be an IPv6 block.

    Returns:
        Tuple of (address as written, netblock containing it)

    Raises:
        MalformedTextError: If text is not CIDR notation
        UnsupportedFamilyError: If text is an IPv4-mapped IPv6 block
    """
    if not isinstance(text, str) or "/" not in text:
        raise MalformedTextError(f"Invalid CIDR notation: {text!r}", {"text": repr(text)})
    try:
        iface = ipaddress.ip_interface(text.strip())
    except ValueError as e:
        raise MalformedTextError(f"Invalid CIDR notation: {text!r}", {"text": text}) from e

    ip = iface.ip.packed
    prefixlen = iface.network.prefixlen
    if "." in text and ":" not in text:
        ip = force_ip4(ip)
        net: Net = Net4(ip, prefixlen)
    else:
        net = Net6(ip, prefixlen)
    logger.debug("Parsed %s as %s", text, net)
    return ip, net


def new_net_between(a: AddressLike, b: AddressLike) -> tuple[Net, bool]:
    """Find the widest netblock that fits strictly between a and b.

    Prefix lengths are tried from /1 downwards; the first block anchored at
    the address after a that ends no later than the address before b wins.

    Returns:
        Tuple of (netblock, exact) where exact is True if the block fills
        the whole gap between a and b

    Raises:
        NoValidRangeError: If a >= b, the families differ, or a and b are adjacent
    """
    a, b = as_ip(a), as_ip(b)
    if effective_version(a) != effective_version(b):
        raise NoValidRangeError(
            "Addresses belong to different families",
            {"a": ip_to_string(a), "b": ip_to_string(b)},
        )

    max_prefixlen = 128
    if effective_version(a) == 4:
        a, b = force_ip4(a), force_ip4(b)
        max_prefixlen = 32

    if compare_ips(a, b) != -1:
        raise NoValidRangeError(
            "First address must be lower than the second",
            {"a": ip_to_string(a), "b": ip_to_string(b)},
        )

    ipa = next_ip(a)
    ipb = previous_ip(b)
    for prefixlen in range(1, max_prefixlen + 1):
        xnet = new_net(ipa, prefixlen)
        va = compare_ips(xnet.ip, ipa)
        vb = compare_ips(xnet.final_address, ipb)
        if va >= 0 and vb <= 0:
            exact = va == 0 and vb == 0
            logger.debug("Found %s between %s and %s (exact=%s)", xnet, ip_to_string(a), ip_to_string(b), exact)
            return xnet, exact

    raise NoValidRangeError(
        "No netblock fits between the addresses",
        {"a": ip_to_string(a), "b": ip_to_string(b)},
    )
