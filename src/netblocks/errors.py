"""Exception hierarchy for netblocks.

All exceptions inherit from NetblockError for consistent handling.
Specific exceptions provide context for different failure modes.
"""

from typing import Any


class NetblockError(Exception):
    """Base exception for all netblocks errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# Address Errors
class AddressError(NetblockError):
    """Base exception for address-related errors."""


class UnsupportedFamilyError(AddressError):
    """Address or prefix length does not belong to the expected family."""


class AddressOutOfRangeError(AddressError):
    """The given address is not a part of the netblock."""

    def __init__(self, address: str, network: str) -> None:
        super().__init__(
            f"Address {address} is not a part of {network}",
            {"address": address, "network": network},
        )
        self.address = address
        self.network = network


class AddressAtEndOfRangeError(AddressError):
    """Stepping from the address would exit the netblock."""

    def __init__(self, address: str, network: str) -> None:
        super().__init__(
            f"Stepping from {address} would exit {network}",
            {"address": address, "network": network},
        )
        self.address = address
        self.network = network


# Mask Errors
class MaskError(NetblockError):
    """Base exception for prefix length errors."""


class InvalidMaskLengthError(MaskError):
    """Prefix length is on the wrong side of the current one."""


# Search Errors
class NoValidRangeError(NetblockError):
    """No netblock can be found between the supplied addresses."""


# Text Errors
class MalformedTextError(NetblockError, ValueError):
    """Text input does not match the expected grammar."""


# Configuration Errors
class ConfigError(NetblockError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Configuration failed validation."""


# Advisory boundary signals. These are returned on a StepResult, never raised.
class BoundaryAddressReached(NetblockError):
    """A step landed on an address that is not considered usable."""


class NetworkAddressReached(BoundaryAddressReached):
    """Address is the network address of the netblock."""

    def __init__(self, address: str) -> None:
        super().__init__(
            f"Address {address} is the network address (and not considered usable)",
            {"address": address},
        )
        self.address = address


class BroadcastAddressReached(BoundaryAddressReached):
    """Address is the broadcast address of the netblock."""

    def __init__(self, address: str) -> None:
        super().__init__(
            f"Address {address} is the broadcast address (and not considered usable)",
            {"address": address},
        )
        self.address = address
