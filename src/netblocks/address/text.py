"""Text renderings of addresses.

Hex and binary digests, reverse-DNS names, the expanded IPv6 form, and the
thin wrappers around the stdlib ipaddress parser that the rest of the
package uses to read and print addresses.
"""

import ipaddress
import string

from netblocks.address.ops import AddressLike, as_ip, effective_version, force_ip4
from netblocks.errors import MalformedTextError, UnsupportedFamilyError

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_ip(text: str) -> bytes:
    """Parse dotted-decimal or colon-hex text into 4 or 16 address bytes.

    Raises:
        MalformedTextError: If text is not a valid IPv4 or IPv6 address
    """
    if not isinstance(text, str):
        raise MalformedTextError(f"Expected address text, got {type(text).__name__}")
    try:
        return ipaddress.ip_address(text.strip()).packed
    except ValueError as e:
        raise MalformedTextError(f"Invalid address: {text!r}", {"text": text}) from e


def ip_to_string(ip: AddressLike) -> str:
    """Return the canonical text form, e.g. '10.1.2.3' or '2001:db8::1'."""
    return str(ipaddress.ip_address(as_ip(ip)))


def ip_to_hex_string(ip: AddressLike) -> str:
    """Return the address as lowercase hex: 8 digits for IPv4, 32 for IPv6."""
    b = as_ip(ip)
    if effective_version(b) == 4:
        return force_ip4(b).hex()
    return b.hex()


def hex_string_to_ip(text: str) -> bytes:
    """Convert a hex digest back to an address.

    Any '.' or ':' separators are dropped first; what remains must be
    exactly 8 or 32 hex digits.

    Raises:
        MalformedTextError: If the cleaned string is not a hex address
    """
    if not isinstance(text, str):
        raise MalformedTextError(f"Expected hex text, got {type(text).__name__}")
    cleaned = text.replace(".", "").replace(":", "")
    if len(cleaned) not in (8, 32) or not _HEX_DIGITS.issuperset(cleaned):
        raise MalformedTextError(f"Invalid hex address: {text!r}", {"text": text})
    return bytes.fromhex(cleaned)


def ip_to_binary_string(ip: AddressLike) -> str:
    """Return the address as dot-separated 8-bit groups."""
    b = as_ip(ip)
    if effective_version(b) == 4:
        b = force_ip4(b)
    return ".".join(f"{octet:08b}" for octet in b)


def ip4_to_arpa(ip: AddressLike) -> str:
    """Return the in-addr.arpa name, e.g. '3.2.1.10.in-addr.arpa'."""
    b = as_ip(ip)
    if effective_version(b) != 4:
        raise UnsupportedFamilyError("in-addr.arpa names require an IPv4 address")
    b = force_ip4(b)
    return f"{b[3]}.{b[2]}.{b[1]}.{b[0]}.in-addr.arpa"


def ip6_to_arpa(ip: AddressLike) -> str:
    """Return the ip6.arpa name: 32 nibbles in reverse order."""
    b = as_ip(ip)
    if len(b) != 16:
        raise UnsupportedFamilyError("ip6.arpa names require a 16-byte address")
    return ".".join(reversed(b.hex())) + ".ip6.arpa"


def ip_to_arpa(ip: AddressLike) -> str:
    """Return the version-appropriate reverse-DNS name of ip."""
    if effective_version(ip) == 4:
        return ip4_to_arpa(ip)
    return ip6_to_arpa(ip)


def expand_ip6(ip: AddressLike) -> str:
    """Return an IPv6 address as eight 4-digit groups, without '::' compression."""
    b = as_ip(ip)
    if len(b) != 16:
        raise UnsupportedFamilyError("Expansion requires a 16-byte address")
    h = b.hex()
    return ":".join(h[i:i + 4] for i in range(0, 32, 4))
