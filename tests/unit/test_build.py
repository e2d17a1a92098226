"""Unit tests for netblock construction."""

import pytest

from netblocks.address import parse_ip
from netblocks.errors import MalformedTextError, NoValidRangeError, UnsupportedFamilyError
from netblocks.net import Net4, Net6, new_net, new_net_between, parse_cidr


def ip(text: str) -> bytes:
    return parse_ip(text)


class TestNewNet:
    """Tests for new_net."""

    def test_ip4(self):
        """Test a 4-byte address builds a Net4."""
        n = new_net(ip("192.168.0.7"), 24)
        assert isinstance(n, Net4)
        assert str(n) == "192.168.0.0/24"

    def test_ip6(self):
        """Test a 16-byte address builds a Net6."""
        n = new_net(ip("2001:db8::7"), 64)
        assert isinstance(n, Net6)
        assert str(n) == "2001:db8::/64"

    def test_mapped_is_rejected(self):
        """Test a 16-byte IPv4-mapped address cannot form an IPv6 block."""
        with pytest.raises(UnsupportedFamilyError):
            new_net(ip("::ffff:10.0.0.1"), 120)

    def test_prefix_beyond_family(self):
        """Test an IPv4 block with an IPv6-sized prefix."""
        with pytest.raises(UnsupportedFamilyError):
            new_net(ip("10.0.0.1"), 64)


class TestParseCidr:
    """Tests for parse_cidr."""

    def test_ip4(self):
        """Test the address is kept as written and the block is aligned."""
        addr, n = parse_cidr("192.168.1.61/26")
        assert addr == ip("192.168.1.61")
        assert isinstance(n, Net4)
        assert str(n) == "192.168.1.0/26"
        assert n.count == 62

    def test_ip6(self):
        """Test IPv6 CIDR text."""
        addr, n = parse_cidr("2001:db8::1/64")
        assert addr == ip("2001:db8::1")
        assert isinstance(n, Net6)
        assert str(n) == "2001:db8::/64"

    def test_host_routes(self):
        """Test /32 and /128 blocks."""
        assert str(parse_cidr("10.1.2.3/32")[1]) == "10.1.2.3/32"
        assert str(parse_cidr("::1/128")[1]) == "::1/128"

    @pytest.mark.parametrize(
        "text",
        ["192.168.1.61", "192.168.1.0/33", "garbage/8", "2001:db8::/129", "10.0.0.0/-1", ""],
    )
    def test_malformed(self, text):
        """Test text that is not CIDR notation."""
        with pytest.raises(MalformedTextError):
            parse_cidr(text)

    def test_non_string(self):
        """Test non-text input."""
        with pytest.raises(MalformedTextError):
            parse_cidr(None)

    def test_mapped_text_rejected(self):
        """Test IPv4-mapped IPv6 notation does not form a block."""
        with pytest.raises(UnsupportedFamilyError):
            parse_cidr("::ffff:10.0.0.0/104")


class TestNewNetBetween:
    """Tests for new_net_between."""

    # (a, b, expected, exact)
    CASES = [
        ("192.168.0.255", "192.168.2.0", "192.168.1.0/24", True),
        ("192.168.0.255", "192.168.1.4", "192.168.1.0/30", True),
        ("192.168.1.0", "192.168.1.3", "192.168.1.1/32", False),
        ("192.168.0.254", "192.168.2.0", "192.168.0.255/32", False),
        ("192.168.0.255", "192.168.1.8", "192.168.1.0/29", True),
        ("10.0.0.0", "10.0.0.255", "10.0.0.1/32", False),
        (
            "2001:db7:ffff:ffff:ffff:ffff:ffff:ffff",
            "2001:db8:0:1::",
            "2001:db8::/64",
            True,
        ),
    ]

    @pytest.mark.parametrize("a,b,expected,exact", CASES)
    def test_between(self, a, b, expected, exact):
        """Test the widest fitting block and whether it fills the gap."""
        n, is_exact = new_net_between(ip(a), ip(b))
        assert str(n) == expected
        assert is_exact is exact

    def test_mapped_inputs(self):
        """Test IPv4-mapped input is treated as IPv4."""
        n, exact = new_net_between(ip("::ffff:192.168.0.255"), ip("192.168.2.0"))
        assert isinstance(n, Net4)
        assert str(n) == "192.168.1.0/24"
        assert exact

    def test_reversed(self):
        """Test a must sort below b."""
        with pytest.raises(NoValidRangeError):
            new_net_between(ip("192.168.2.0"), ip("192.168.0.255"))
        with pytest.raises(NoValidRangeError):
            new_net_between(ip("192.168.2.0"), ip("192.168.2.0"))

    def test_adjacent(self):
        """Test there is no room between neighbouring addresses."""
        with pytest.raises(NoValidRangeError):
            new_net_between(ip("192.168.1.1"), ip("192.168.1.2"))

    def test_mixed_families(self):
        """Test addresses of different families."""
        with pytest.raises(NoValidRangeError):
            new_net_between(ip("10.0.0.1"), ip("2001:db8::1"))
