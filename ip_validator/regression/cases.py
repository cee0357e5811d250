"""
IPValidator Regression Battery

Built-in labeled cases covering valid forms, boundary values and
adversarial input for both address families.

Zero-padded IPv4 octets ("192.001.002.003") are left out of the battery:
the reference parser rejects them while the default scanner policy
accepts them. That policy is covered by the unit tests instead.

Author: IPValidator Project
License: GNU GPL v3
"""

from typing import List, Optional, Tuple

from ..models import AddressFamily, RegressionCase


def _build(family: AddressFamily,
           rows: List[Tuple[str, Optional[str], bool]]) -> List[RegressionCase]:
    return [RegressionCase(name, text, expected, family) for name, text, expected in rows]


IPV4_CASES = _build(AddressFamily.IPV4, [
    # Standard valid addresses
    ("IPv4: Minimum address", "0.0.0.0", True),
    ("IPv4: Maximum address", "255.255.255.255", True),
    ("IPv4: Localhost", "127.0.0.1", True),
    ("IPv4: Private network", "192.168.1.1", True),
    ("IPv4: Public IP", "8.8.8.8", True),

    # Edge cases
    ("IPv4: Max octets", "255.255.255.254", True),
    ("IPv4: Mixed values", "1.2.3.4", True),

    # Out of range
    ("IPv4 Invalid: Octet > 255", "256.1.1.1", False),
    ("IPv4 Invalid: Large octet", "999.1.1.1", False),
    ("IPv4 Invalid: All high", "300.300.300.300", False),

    # Wrong number of octets
    ("IPv4 Invalid: Too few octets", "192.168.1", False),
    ("IPv4 Invalid: Too many octets", "192.168.1.1.1", False),
    ("IPv4 Invalid: Single octet", "192", False),

    # Empty/missing parts
    ("IPv4 Invalid: Empty octet", "192.168..1", False),
    ("IPv4 Invalid: Trailing dot", "192.168.1.1.", False),
    ("IPv4 Invalid: Leading dot", ".192.168.1.1", False),
    ("IPv4 Invalid: Empty string", "", False),
    ("IPv4 Invalid: NULL", None, False),

    # Invalid characters
    ("IPv4 Invalid: Letter in octet", "192.168.a.1", False),
    ("IPv4 Invalid: Special chars", "192.168.1.1!", False),
    ("IPv4 Invalid: Space", "192.168. 1.1", False),
    ("IPv4 Invalid: Negative", "192.168.-1.1", False),

    # Boundary attacks
    ("IPv4 Adversarial: 256 boundary", "255.255.255.256", False),
    ("IPv4 Adversarial: Overflow attempt", "99999999999.1.1.1", False),

    # Format confusion
    ("IPv4 Adversarial: Hex format", "0xC0.0xA8.0x01.0x01", False),
    ("IPv4 Adversarial: Octal-like", "0777.0777.0777.0777", False),

    # Injection attempts
    ("IPv4 Adversarial: SQL injection", "192'; DROP TABLE--", False),
    ("IPv4 Adversarial: Script injection", "192<script>", False),

    # Unicode/encoding tricks
    ("IPv4 Adversarial: Unicode digits", "１９２.１６８.１.１", False),

    # Multiple dots
    ("IPv4 Adversarial: Double dots", "192..168.1.1", False),
    ("IPv4 Adversarial: Triple dots", "192...168.1.1", False),

    # Trailing dot
    ("IPv4 Invalid: Trailing dot variant", "255.1.1.0.", False),
    ("IPv4 Invalid: Trailing dot max", "255.255.255.255.", False),
])


IPV6_CASES = _build(AddressFamily.IPV6, [
    # Standard format
    ("IPv6: Full format", "2001:0db8:0000:0000:0000:0000:0000:0001", True),
    ("IPv6: Compressed zeros", "2001:db8::1", True),
    ("IPv6: All zeros", "::", True),
    ("IPv6: Loopback", "::1", True),

    # Leading zeros
    ("IPv6: With leading zeros", "2001:0db8:0001:0000:0000:0ab9:C0A8:0102", True),
    ("IPv6: No leading zeros", "2001:db8:1:0:0:ab9:c0a8:102", True),

    # Mixed case
    ("IPv6: Lowercase", "2001:0db8:85a3:0000:0000:8a2e:0370:7334", True),
    ("IPv6: Uppercase", "2001:0DB8:85A3:0000:0000:8A2E:0370:7334", True),
    ("IPv6: Mixed case", "2001:0dB8:85a3:0000:0000:8A2e:0370:7334", True),

    # IPv4-mapped IPv6
    ("IPv6: IPv4-mapped 1", "::ffff:192.0.2.128", True),
    ("IPv6: IPv4-mapped 2", "::ffff:c000:0280", True),
    ("IPv6: IPv4-compatible", "::192.0.2.128", True),

    # Compression at different positions
    ("IPv6: Compression at start", "::8a2e:0370:7334", True),
    ("IPv6: Compression at end", "2001:db8::", True),
    ("IPv6: Compression in middle", "2001:db8::8a2e:0370:7334", True),

    # Link-local
    ("IPv6: Link-local", "fe80::1", True),
    ("IPv6: Link-local full", "fe80:0000:0000:0000:0204:61ff:fe9d:f156", True),

    # Triple colon and invalid compression
    ("IPv6 Invalid: Triple colon", "2001:db8:::1", False),
    ("IPv6 Invalid: Quad colon", "2001::::1", False),
    ("IPv6 Invalid: Multiple compressions", "2001::db8::1", False),

    # Too many groups
    ("IPv6 Invalid: Too many groups", "1:2:3:4:5:6:7:8:9", False),
    ("IPv6 Invalid: No compression with 9", "2001:0db8:0000:0000:0000:0000:0000:0000:0001", False),

    # Invalid characters
    ("IPv6 Invalid: Invalid hex", "2001:0db8:0g00:0000:0000:0000:0000:0001", False),
    ("IPv6 Invalid: Special char", "2001:0db8:0000:0000:0000:0000:0000:0001!", False),

    # Group too long
    ("IPv6 Invalid: Group > 4 digits", "2001:0db8:00000:0000:0000:0000:0000:0001", False),
    ("IPv6 Invalid: Very long group", "20011:0db8:0000:0000:0000:0000:0000:0001", False),

    # Empty/NULL
    ("IPv6 Invalid: Empty string", "", False),
    ("IPv6 Invalid: NULL", None, False),

    # Malformed IPv4 suffix
    ("IPv6 Invalid: Bad IPv4 suffix", "::ffff:999.0.2.128", False),
    ("IPv6 Invalid: IPv4 wrong position", "2001:db8:192.168.1.1::", False),

    # Single colon issues
    ("IPv6 Invalid: Single colon start", ":2001:db8::1", False),
    ("IPv6 Invalid: Single colon end", "2001:db8::1:", False),

    # Compression bypass attempts
    ("IPv6 Adversarial: Full no compress", "2001:0db8:0000:0000:0000:0000:0000:0001", True),
    ("IPv6 Adversarial: Valid with trailing ::", "2001:0db8:0001:0002:0003:0004:0005::", True),

    # Case confusion
    ("IPv6 Adversarial: Mixed extreme", "aBcD:EfGh:0000:0000:0000:0000:0000:0001", False),

    # Boundary overflows
    ("IPv6 Adversarial: Hex overflow", "ffffffff:0:0:0:0:0:0:1", False),

    # IPv4 confusion
    ("IPv6 Adversarial: IPv4 only", "192.168.1.1", False),
    ("IPv6 Adversarial: Mixed wrong", "2001:db8:192.168.1", False),

    # Colon edge cases
    ("IPv6 Adversarial: Only colons", ":::", False),
    ("IPv6 Adversarial: Many colons", "::::::::", False),
    ("IPv6 Adversarial: Alternating", ":1:2:3:4:5:6:7:8", False),

    # Empty groups
    ("IPv6 Adversarial: Empty groups", "2001::db8:::1", False),

    # Unicode tricks (U+2236 RATIO instead of ':')
    ("IPv6 Adversarial: Unicode colon", "2001:db8∶:1", False),

    # Injection attempts
    ("IPv6 Adversarial: Script tag", "2001:db8<script>::1", False),
    ("IPv6 Adversarial: SQL", "'; DROP TABLE--", False),

    # IPv4 vs IPv6 confusion
    ("Edge: Short string", "1", False),
    ("Edge: Just dots", "...", False),
    ("Edge: Just colons IPv6", ":", False),

    # Whitespace
    ("Edge: IPv4 with spaces", " 192.168.1.1", False),
    ("Edge: IPv4 trailing space", "192.168.1.1 ", False),
    ("Edge: IPv6 with space", " ::1", False),

    # Very long strings
    ("Edge: Very long invalid", "1" * 58, False),

    # Unicode/encoding tricks
    ("IPv6 Adversarial: Unicode digits", "１９２.１６８.１.１", False),
])


def cases_for(family: AddressFamily) -> List[RegressionCase]:
    """Return the built-in battery for an address family."""
    return IPV4_CASES if family is AddressFamily.IPV4 else IPV6_CASES
