"""Netblock base model.

Net is the contract shared by the IPv4 and IPv6 netblocks: membership,
first and last addresses, masks, enumeration, stepping and sub/supernetting.
Netblocks are frozen pydantic models; the base address is always aligned
to the prefix, whatever address the block was built from.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from netblocks.address import AddressLike, as_ip, ip_to_string, next_ip, previous_ip
from netblocks.errors import (
    AddressAtEndOfRangeError,
    AddressOutOfRangeError,
    BoundaryAddressReached,
    InvalidMaskLengthError,
    UnsupportedFamilyError,
)
from netblocks.net.order import compare_nets


def mask_int(prefixlen: int, bits: int) -> int:
    """Integer netmask with the top `prefixlen` of `bits` bits set."""
    return ((1 << prefixlen) - 1) << (bits - prefixlen)


def describe(ip: Any) -> str:
    """Render ip for messages, falling back to repr() for non-addresses."""
    try:
        return ip_to_string(as_ip(ip))
    except UnsupportedFamilyError:
        return repr(ip)


@dataclass(frozen=True)
class StepResult:
    """Result of stepping to the next or previous address in a netblock.

    The address is always returned. When it is the network or broadcast
    address of an IPv4 block, boundary carries a NetworkAddressReached or
    BroadcastAddressReached so the caller can decide whether to use it.
    """

    address: bytes
    boundary: BoundaryAddressReached | None = None

    @property
    def usable(self) -> bool:
        return self.boundary is None


class AddressSequence(Sequence[bytes]):
    """Lazy, restartable sequence of consecutive addresses.

    Backed by a range of integers, so a block is never materialised unless
    the caller asks for it (e.g. with list()).

    Example:
        >>> seq = parse_cidr("192.168.0.0/30")[1].addresses()
        >>> [ip_to_string(ip) for ip in seq]
        ['192.168.0.1', '192.168.0.2']
    """

    def __init__(self, values: range, length: int) -> None:
        self._values = values
        self._length = length

    @property
    def size(self) -> int:
        """Number of addresses; unlike len() this works beyond sys.maxsize."""
        r = self._values
        if r.step > 0:
            n = (r.stop - r.start + r.step - 1) // r.step
        else:
            n = (r.start - r.stop - r.step - 1) // -r.step
        return max(0, n)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return AddressSequence(self._values[index], self._length)
        return self._values[index].to_bytes(self._length, "big")

    def __iter__(self) -> Iterator[bytes]:
        for value in self._values:
            yield value.to_bytes(self._length, "big")

    def __contains__(self, ip: object) -> bool:
        if not isinstance(ip, (bytes, bytearray)) or len(ip) != self._length:
            return False
        return int.from_bytes(ip, "big") in self._values

    def __repr__(self) -> str:
        return f"AddressSequence(size={self.size}, length={self._length})"


class Net(BaseModel, ABC):
    """A contiguous, mask-aligned block of addresses.

    Concrete netblocks are Net4 and Net6. Build them directly, e.g.
    Net4(b"\\xc0\\xa8\\x01\\x3d", 26), or through parse_cidr() and
    new_net_between().
    """

    model_config = ConfigDict(frozen=True)

    ADDR_LEN: ClassVar[int]
    MAX_PREFIXLEN: ClassVar[int]
    VERSION: ClassVar[int]

    ip: bytes = Field(..., description="Base (network) address, aligned to the prefix")
    prefixlen: int = Field(..., description="Prefix length in bits")

    def __init__(self, ip: AddressLike, prefixlen: int, **data: Any) -> None:
        super().__init__(ip=ip, prefixlen=prefixlen, **data)

    @classmethod
    @abstractmethod
    def _coerce_ip(cls, ip: Any) -> bytes:
        """Return ip as bytes of this family or raise UnsupportedFamilyError."""

    @model_validator(mode="before")
    @classmethod
    def _align(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        prefixlen = data.get("prefixlen")
        if not isinstance(prefixlen, int) or isinstance(prefixlen, bool):
            raise InvalidMaskLengthError(
                f"Prefix length must be an integer, got {prefixlen!r}",
                {"prefixlen": repr(prefixlen)},
            )
        if prefixlen > cls.MAX_PREFIXLEN:
            raise UnsupportedFamilyError(
                f"Prefix length {prefixlen} exceeds {cls.MAX_PREFIXLEN} bits",
                {"prefixlen": prefixlen, "max": cls.MAX_PREFIXLEN},
            )
        if prefixlen < 0:
            raise InvalidMaskLengthError(
                f"Prefix length must not be negative, got {prefixlen}",
                {"prefixlen": prefixlen},
            )
        ip = cls._coerce_ip(data.get("ip"))
        bits = cls.ADDR_LEN * 8
        aligned = int.from_bytes(ip, "big") & mask_int(prefixlen, bits)
        return {**data, "ip": aligned.to_bytes(cls.ADDR_LEN, "big"), "prefixlen": prefixlen}

    # Shared properties

    @property
    def version(self) -> int:
        """IP version of the block, 4 or 6."""
        return self.VERSION

    @property
    def max_prefixlen(self) -> int:
        return self.MAX_PREFIXLEN

    @property
    def mask(self) -> bytes:
        """Netmask as address-length bytes."""
        return mask_int(self.prefixlen, self.MAX_PREFIXLEN).to_bytes(self.ADDR_LEN, "big")

    @property
    def wildcard(self) -> bytes:
        """Bitwise complement of the netmask."""
        return bytes(0xFF - b for b in self.mask)

    @property
    def final_address(self) -> bytes:
        """Last address of the block, usable or not."""
        value = int.from_bytes(self.ip, "big") | int.from_bytes(self.wildcard, "big")
        return value.to_bytes(self.ADDR_LEN, "big")

    @property
    @abstractmethod
    def first_address(self) -> bytes:
        """First usable address of the block."""

    @property
    @abstractmethod
    def last_address(self) -> bytes:
        """Last usable address of the block."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of addresses in the block (see the family for /31, /127)."""

    # Membership

    def _member(self, ip: AddressLike) -> bytes | None:
        """Return ip as bytes of this family if it lies in the block, else None."""
        try:
            b = self._coerce_ip(ip)
        except UnsupportedFamilyError:
            return None
        bits = self.ADDR_LEN * 8
        if int.from_bytes(b, "big") & mask_int(self.prefixlen, bits) != int.from_bytes(self.ip, "big"):
            return None
        return b

    def contains(self, ip: AddressLike) -> bool:
        """True if ip is part of this block."""
        return self._member(ip) is not None

    def contains_net(self, other: "Net") -> bool:
        """True if other lies entirely within this block."""
        return self.prefixlen <= other.prefixlen and self.contains(other.ip)

    def _require_member(self, ip: AddressLike) -> bytes:
        b = self._member(ip)
        if b is None:
            raise AddressOutOfRangeError(describe(ip), str(self))
        return b

    # Enumeration

    @abstractmethod
    def _span(self) -> tuple[int, int]:
        """Return (first enumerated address as int, number of addresses)."""

    def addresses(self, size: int = 0, offset: int = 0) -> AddressSequence:
        """Lazily enumerate usable addresses.

        Starts at the offset-th usable address and yields up to size
        addresses; size=0 means all remaining. An offset past the end
        yields nothing.
        """
        if size < 0 or offset < 0:
            raise ValueError(f"size and offset must be non-negative, got {size}, {offset}")
        start, total = self._span()
        if offset >= total:
            return AddressSequence(range(0), self.ADDR_LEN)
        remaining = total - offset
        if size == 0 or size > remaining:
            size = remaining
        first = start + offset
        return AddressSequence(range(first, first + size), self.ADDR_LEN)

    def enumerate(self, size: int = 0, offset: int = 0) -> list[bytes]:
        """Like addresses(), but returns a list."""
        return list(self.addresses(size, offset))

    # Stepping

    @abstractmethod
    def next_ip(self, ip: AddressLike) -> StepResult:
        """Step one address up within the block."""

    @abstractmethod
    def previous_ip(self, ip: AddressLike) -> StepResult:
        """Step one address down within the block."""

    # Derivation

    def _derive(self, ip: bytes, prefixlen: int) -> "Net":
        return type(self)(ip, prefixlen)

    def iter_subnets(self, prefixlen: int = 0) -> Iterator["Net"]:
        """Lazily carve the block into subnets of prefixlen.

        prefixlen=0 splits the block in half. The prefix is checked before
        the iterator is returned.

        Raises:
            InvalidMaskLengthError: If prefixlen is shorter than the current prefix
            UnsupportedFamilyError: If prefixlen exceeds the family width
        """
        if prefixlen == 0:
            prefixlen = self.prefixlen + 1
        elif prefixlen < self.prefixlen:
            raise InvalidMaskLengthError(
                f"Cannot subnet /{self.prefixlen} into larger /{prefixlen} blocks",
                {"network": str(self), "prefixlen": prefixlen},
            )
        return self._walk_subnets(self._derive(self.ip, prefixlen))

    def _walk_subnets(self, first: "Net") -> Iterator["Net"]:
        end = self.final_address
        net = first
        while True:
            yield net
            if net.final_address >= end:
                return
            net = self._derive(next_ip(net.final_address), net.prefixlen)

    def subnet(self, prefixlen: int = 0) -> list["Net"]:
        """Carve the block into subnets of prefixlen (0 splits it in half).

        Example:
            192.168.1.0/24 .subnet(26) -> 192.168.1.0/26, .64/26, .128/26, .192/26
        """
        return list(self.iter_subnets(prefixlen))

    def supernet(self, prefixlen: int = 0) -> "Net":
        """Return the enclosing block at prefixlen (0 means one bit shorter).

        Example:
            192.168.1.0/24 .supernet(0) -> 192.168.0.0/23

        Raises:
            InvalidMaskLengthError: If prefixlen is longer than the current prefix
        """
        if prefixlen == 0:
            prefixlen = self.prefixlen - 1
        if prefixlen < 0 or prefixlen > self.prefixlen:
            raise InvalidMaskLengthError(
                f"Cannot supernet /{self.prefixlen} to /{prefixlen}",
                {"network": str(self), "prefixlen": prefixlen},
            )
        return self._derive(self.ip, prefixlen)

    def next_net(self, prefixlen: int | None = None) -> "Net":
        """Return the block of prefixlen starting right after this one.

        Defaults to the current prefix length.

        Raises:
            AddressAtEndOfRangeError: If the block ends at the all-ones address
        """
        if prefixlen is None:
            prefixlen = self.prefixlen
        start = next_ip(self.final_address)
        if start == self.final_address:
            raise AddressAtEndOfRangeError(ip_to_string(self.final_address), str(self))
        return self._derive(start, prefixlen)

    def previous_net(self, prefixlen: int | None = None) -> "Net":
        """Return the block of prefixlen ending right before this one.

        If prefixlen is shorter than the current one, the result may
        enclose this block, e.g. 192.168.4.0/22 -> 192.168.0.0/21.

        Raises:
            AddressAtEndOfRangeError: If the block starts at the all-zeros address
        """
        if prefixlen is None:
            prefixlen = self.prefixlen
        end = previous_ip(self.ip)
        if end == self.ip:
            raise AddressAtEndOfRangeError(ip_to_string(self.ip), str(self))
        return self._derive(end, prefixlen)

    # Rendering and ordering

    def __str__(self) -> str:
        return f"{ip_to_string(self.ip)}/{self.prefixlen}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Net):
            return NotImplemented
        return compare_nets(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Net):
            return NotImplemented
        return compare_nets(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Net):
            return NotImplemented
        return compare_nets(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Net):
            return NotImplemented
        return compare_nets(self, other) >= 0
