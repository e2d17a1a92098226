"""Saturating fixed-width byte arithmetic.

Shared by the address functions and both netblock families. Every helper
works on any address length; results never wrap, they clamp to the
all-zeros and all-ones values of that length.
"""


def limit(length: int, filler: int) -> bytes:
    """Return an address of `length` bytes, every byte set to `filler`."""
    return bytes([filler]) * length


def step_up(addr: bytes, width: int | None = None) -> bytes | None:
    """Add one to the first `width` bytes of addr, carrying leftwards.

    Bytes past `width` are left untouched. Returns None when the covered
    bytes are already all-ones.
    """
    buf = bytearray(addr)
    end = len(buf) if width is None else width
    for i in range(end - 1, -1, -1):
        if buf[i] == 0xFF:
            buf[i] = 0x00
            continue
        buf[i] += 1
        return bytes(buf)
    return None


def step_down(addr: bytes, width: int | None = None) -> bytes | None:
    """Subtract one from the first `width` bytes of addr, borrowing leftwards.

    Returns None when the covered bytes are already all-zeros.
    """
    buf = bytearray(addr)
    end = len(buf) if width is None else width
    for i in range(end - 1, -1, -1):
        if buf[i] == 0x00:
            buf[i] = 0xFF
            continue
        buf[i] -= 1
        return bytes(buf)
    return None


def from_int(value: int, length: int) -> bytes:
    """Big-endian encode value into `length` bytes, clamping out-of-range values."""
    if value <= 0:
        return limit(length, 0x00)
    if value.bit_length() > length * 8:
        return limit(length, 0xFF)
    return value.to_bytes(length, "big")


def add(addr: bytes, count: int) -> bytes:
    return from_int(int.from_bytes(addr, "big") + count, len(addr))


def sub(addr: bytes, count: int) -> bytes:
    return from_int(int.from_bytes(addr, "big") - count, len(addr))
