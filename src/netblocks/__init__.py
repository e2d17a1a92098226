"""IP address and netblock arithmetic for IPv4 and IPv6.

Two parts: address primitives over raw 4- and 16-byte addresses (compare,
step, increment, decrement, delta, integer and text conversion), and the
Net4/Net6 netblocks built on them (membership, first and last addresses,
enumeration, stepping, sub- and supernetting).

Arithmetic that would leave the address space saturates: underflows give
the all-zeros address and overflows the all-ones address.
"""

import logging

from netblocks.address import (
    IPV4_ONES,
    IPV4_ZERO,
    IPV6_ONES,
    IPV6_ZERO,
    MAX_IPV4,
    MAX_IPV6,
    MAX_UINT64,
    compare_ips,
    decrement_ip4_by,
    decrement_ip6_by,
    decrement_ip_by,
    delta_ip,
    delta_ip4,
    delta_ip6,
    effective_version,
    expand_ip6,
    force_ip4,
    hex_string_to_ip,
    increment_ip4_by,
    increment_ip6_by,
    increment_ip_by,
    int_to_ip4,
    int_to_ip6,
    ip4_to_arpa,
    ip4_to_int,
    ip6_to_arpa,
    ip6_to_uint64,
    ip_to_arpa,
    ip_to_binary_string,
    ip_to_hex_string,
    ip_to_int,
    ip_to_string,
    is_ipv4_mapped,
    next_ip,
    parse_ip,
    previous_ip,
    uint64_to_ip6,
    version,
)
from netblocks.errors import (
    AddressAtEndOfRangeError,
    AddressOutOfRangeError,
    BoundaryAddressReached,
    BroadcastAddressReached,
    InvalidMaskLengthError,
    MalformedTextError,
    NetblockError,
    NetworkAddressReached,
    NoValidRangeError,
    UnsupportedFamilyError,
)
from netblocks.net import (
    AddressSequence,
    Net,
    Net4,
    Net6,
    StepResult,
    compare_nets,
    new_net,
    new_net_between,
    parse_cidr,
    sort_ips,
    sort_nets,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "IPV4_ONES",
    "IPV4_ZERO",
    "IPV6_ONES",
    "IPV6_ZERO",
    "MAX_IPV4",
    "MAX_IPV6",
    "MAX_UINT64",
    "AddressAtEndOfRangeError",
    "AddressOutOfRangeError",
    "AddressSequence",
    "BoundaryAddressReached",
    "BroadcastAddressReached",
    "InvalidMaskLengthError",
    "MalformedTextError",
    "Net",
    "Net4",
    "Net6",
    "NetblockError",
    "NetworkAddressReached",
    "NoValidRangeError",
    "StepResult",
    "UnsupportedFamilyError",
    "compare_ips",
    "compare_nets",
    "decrement_ip4_by",
    "decrement_ip6_by",
    "decrement_ip_by",
    "delta_ip",
    "delta_ip4",
    "delta_ip6",
    "effective_version",
    "expand_ip6",
    "force_ip4",
    "hex_string_to_ip",
    "increment_ip4_by",
    "increment_ip6_by",
    "increment_ip_by",
    "int_to_ip4",
    "int_to_ip6",
    "ip4_to_arpa",
    "ip4_to_int",
    "ip6_to_arpa",
    "ip6_to_uint64",
    "ip_to_arpa",
    "ip_to_binary_string",
    "ip_to_hex_string",
    "ip_to_int",
    "ip_to_string",
    "is_ipv4_mapped",
    "new_net",
    "new_net_between",
    "next_ip",
    "parse_cidr",
    "parse_ip",
    "previous_ip",
    "sort_ips",
    "sort_nets",
    "uint64_to_ip6",
    "version",
]
