"""IPv6 netblocks.

The concept exclusive to Net6 is the split between network and host
bytes. IPv6 blocks are usually handed out 64 bits at a time, with the low
64 bits left for interface identifiers, so next_ip() and previous_ip()
step within the leading `netbytes` bytes of the address (8 by default,
configurable through NETBLOCKS_IPV6_NETWORK_BYTES) and leave the
remaining bytes alone. With netbytes=16 they step one address at a time.

There is no broadcast address: first_address and last_address span the
whole block. A /127 (RFC 6164) counts 0 like an IPv4 /31 but enumerates
both of its addresses; a /128 counts and enumerates 1.
"""

import sys
from typing import Any, ClassVar

from pydantic import Field

from netblocks.address import (
    AddressLike,
    arith,
    as_ip,
    ip_to_string,
    is_ipv4_mapped,
)
from netblocks.config import get_settings
from netblocks.errors import AddressAtEndOfRangeError, UnsupportedFamilyError
from netblocks.net.base import Net, StepResult


def _default_network_bytes() -> int:
    return get_settings().ipv6_network_bytes


class Net6(Net):
    """An IPv6 netblock.

    Example:
        >>> n = Net6(parse_ip("2001:db8::"), 64)
        >>> n.count
        18446744073709551616
    """

    ADDR_LEN: ClassVar[int] = 16
    MAX_PREFIXLEN: ClassVar[int] = 128
    VERSION: ClassVar[int] = 6

    netbytes: int = Field(
        default_factory=_default_network_bytes,
        ge=1,
        le=16,
        description="Leading bytes that next_ip/previous_ip step within",
    )

    def __init__(self, ip: AddressLike, prefixlen: int, netbytes: int | None = None, **data: Any) -> None:
        if netbytes is not None:
            data["netbytes"] = netbytes
        super().__init__(ip, prefixlen, **data)

    @classmethod
    def _coerce_ip(cls, ip: Any) -> bytes:
        b = as_ip(ip)
        if len(b) != 16 or is_ipv4_mapped(b):
            raise UnsupportedFamilyError(
                f"Net6 requires an IPv6 address, got {ip_to_string(b)}",
                {"address": ip_to_string(b)},
            )
        return b

    def _derive(self, ip: bytes, prefixlen: int) -> "Net6":
        return Net6(ip, prefixlen, self.netbytes)

    def with_network_bytes(self, netbytes: int) -> "Net6":
        """Return a copy of this block that steps within `netbytes` leading bytes."""
        return Net6(self.ip, self.prefixlen, netbytes)

    @property
    def first_address(self) -> bytes:
        return self.ip

    @property
    def last_address(self) -> bytes:
        return self.final_address

    @property
    def count(self) -> int:
        """Addresses in the block: 2**(128 - prefixlen), or 0 for /127 and 1 for /128."""
        exp = self.MAX_PREFIXLEN - self.prefixlen
        if exp == 1:
            return 0
        if exp == 0:
            return 1
        return 2**exp

    def _span(self) -> tuple[int, int]:
        start = int.from_bytes(self.ip, "big")
        if self.prefixlen == 128:
            return start, 1
        if self.prefixlen == 127:
            return start, 2
        # sequence lengths are ssize_t
        return start, min(self.count, sys.maxsize)

    def next_ip(self, ip: AddressLike) -> StepResult:
        """Step up by one within the network bytes.

        Raises:
            AddressOutOfRangeError: If ip is not part of the block
            AddressAtEndOfRangeError: If the network bytes are exhausted or
                the step would leave the block
        """
        b = self._require_member(ip)
        xip = arith.step_up(b, self.netbytes)
        if xip is None or not self.contains(xip):
            raise AddressAtEndOfRangeError(ip_to_string(b), str(self))
        return StepResult(xip)

    def previous_ip(self, ip: AddressLike) -> StepResult:
        """Step down by one within the network bytes.

        Raises:
            AddressOutOfRangeError: If ip is not part of the block
            AddressAtEndOfRangeError: If the network bytes are exhausted or
                the step would leave the block
        """
        b = self._require_member(ip)
        xip = arith.step_down(b, self.netbytes)
        if xip is None or not self.contains(xip):
            raise AddressAtEndOfRangeError(ip_to_string(b), str(self))
        return StepResult(xip)
