"""IPv4 netblocks.

Net4 adds the broadcast and network addresses that have no IPv6
counterpart, and follows RFC 3021 for blocks with a single host bit:

- count reports 0 for a /31 and 1 for a /32
- first_address and network_address are equal for /31 and /32
- last_address and broadcast_address are equal for /31 and /32
- enumerating a /31 still yields both addresses, a /32 its one address
"""

from typing import Any, ClassVar

from netblocks.address import (
    AddressLike,
    arith,
    as_ip,
    effective_version,
    force_ip4,
    ip_to_string,
    next_ip,
    previous_ip,
)
from netblocks.errors import (
    AddressAtEndOfRangeError,
    BroadcastAddressReached,
    NetworkAddressReached,
    UnsupportedFamilyError,
)
from netblocks.net.base import Net, StepResult


class Net4(Net):
    """An IPv4 netblock.

    Example:
        >>> n = Net4(bytes([192, 168, 1, 61]), 26)
        >>> str(n), n.count
        ('192.168.1.0/26', 62)
    """

    ADDR_LEN: ClassVar[int] = 4
    MAX_PREFIXLEN: ClassVar[int] = 32
    VERSION: ClassVar[int] = 4

    @classmethod
    def _coerce_ip(cls, ip: Any) -> bytes:
        b = as_ip(ip)
        if effective_version(b) != 4:
            raise UnsupportedFamilyError(
                f"Net4 requires an IPv4 address, got {ip_to_string(b)}",
                {"address": ip_to_string(b)},
            )
        return force_ip4(b)

    @property
    def network_address(self) -> bytes:
        """Lowest address of the block."""
        return self.ip

    @property
    def broadcast_address(self) -> bytes:
        """Highest address of the block."""
        return self.final_address

    @property
    def first_address(self) -> bytes:
        if self.prefixlen >= 31:
            return self.ip
        return next_ip(self.ip)

    @property
    def last_address(self) -> bytes:
        if self.prefixlen >= 31:
            return self.final_address
        return previous_ip(self.final_address)

    @property
    def count(self) -> int:
        """Usable addresses: 2**(32 - prefixlen) - 2, or 0 for /31 and 1 for /32."""
        exp = self.MAX_PREFIXLEN - self.prefixlen
        if exp == 1:
            return 0
        if exp == 0:
            return 1
        return 2**exp - 2

    def _span(self) -> tuple[int, int]:
        if self.prefixlen == 32:
            return int.from_bytes(self.ip, "big"), 1
        if self.prefixlen == 31:
            return int.from_bytes(self.ip, "big"), 2
        return int.from_bytes(self.first_address, "big"), self.count

    def next_ip(self, ip: AddressLike) -> StepResult:
        """Step one address up within the block.

        The broadcast address is returned, flagged with BroadcastAddressReached.

        Raises:
            AddressOutOfRangeError: If ip is not part of the block
            AddressAtEndOfRangeError: If the step would leave the block
        """
        b = self._require_member(ip)
        xip = arith.step_up(b)
        if xip is None or not self.contains(xip):
            raise AddressAtEndOfRangeError(ip_to_string(b), str(self))
        if xip == self.broadcast_address:
            return StepResult(xip, BroadcastAddressReached(ip_to_string(xip)))
        return StepResult(xip)

    def previous_ip(self, ip: AddressLike) -> StepResult:
        """Step one address down within the block.

        The network address is returned, flagged with NetworkAddressReached.

        Raises:
            AddressOutOfRangeError: If ip is not part of the block
            AddressAtEndOfRangeError: If the step would leave the block
        """
        b = self._require_member(ip)
        xip = arith.step_down(b)
        if xip is None or not self.contains(xip):
            raise AddressAtEndOfRangeError(ip_to_string(b), str(self))
        if xip == self.network_address:
            return StepResult(xip, NetworkAddressReached(ip_to_string(xip)))
        return StepResult(xip)
