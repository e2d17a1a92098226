"""Address primitives and text renderings."""

from netblocks.address.ops import (
    IPV4_LEN,
    IPV4_ONES,
    IPV4_ZERO,
    IPV6_LEN,
    IPV6_ONES,
    IPV6_ZERO,
    MAX_IPV4,
    MAX_IPV6,
    MAX_UINT64,
    AddressLike,
    as_ip,
    compare_ips,
    decrement_ip4_by,
    decrement_ip6_by,
    decrement_ip_by,
    delta_ip,
    delta_ip4,
    delta_ip6,
    effective_version,
    force_ip4,
    increment_ip4_by,
    increment_ip6_by,
    increment_ip_by,
    int_to_ip4,
    int_to_ip6,
    ip4_to_int,
    ip6_to_uint64,
    ip_to_int,
    is_ipv4_mapped,
    next_ip,
    previous_ip,
    to_ip16,
    uint64_to_ip6,
    version,
)
from netblocks.address.text import (
    expand_ip6,
    hex_string_to_ip,
    ip4_to_arpa,
    ip6_to_arpa,
    ip_to_arpa,
    ip_to_binary_string,
    ip_to_hex_string,
    ip_to_string,
    parse_ip,
)

__all__ = [
    "IPV4_LEN",
    "IPV4_ONES",
    "IPV4_ZERO",
    "IPV6_LEN",
    "IPV6_ONES",
    "IPV6_ZERO",
    "MAX_IPV4",
    "MAX_IPV6",
    "MAX_UINT64",
    "AddressLike",
    "as_ip",
    "compare_ips",
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
    "next_ip",
    "parse_ip",
    "previous_ip",
    "to_ip16",
    "uint64_to_ip6",
    "version",
]
