"""
IPValidator IPv6 Scanner

Single-pass, no-backtracking validator for textual IPv6 addresses.

Handles:
- Up to eight 1-4 digit hexadecimal groups
- A single '::' zero-compression marker
- A trailing embedded IPv4 literal (e.g. ::ffff:192.0.2.128), which is
  delegated to the IPv4 scanner and counts as two groups

Zone IDs (fe80::1%eth0) and prefix lengths (2001:db8::/32) are not part
of the accepted grammar and are rejected.

Input is capped at 45 characters, the longest form with canonical octets.
This cap applies before the leading-zero policy, so a zero-padded suffix
that pushes the text past it (e.g.
0000:0000:0000:0000:0000:ffff:001.002.003.004, 47 characters) is rejected
even though the suffix alone passes validate_ipv4.

Author: IPValidator Project
License: GNU GPL v3
"""

from typing import Optional

from .digits import hex_digit_value, is_ascii_digit
from .ipv4 import validate_ipv4

# Longest legal form is "ffff:ffff:ffff:ffff:ffff:ffff:255.255.255.255"
MAX_IPV6_LENGTH = 45
MAX_GROUPS = 8
MAX_GROUP_DIGITS = 4
MAX_GROUP_VALUE = 0xFFFF
IPV4_SUFFIX_GROUPS = 2
IPV4_SUFFIX_DOTS = 3


def _is_ipv4_suffix(text: str, token_start: int, allow_leading_zeros: bool) -> bool:
    """Check that text[token_start:] is a complete dotted-quad and nothing else."""
    dots = 0
    for pos in range(token_start, len(text)):
        ch = text[pos]
        if ch == '.':
            dots += 1
        elif not is_ascii_digit(ch):
            return False

    if dots != IPV4_SUFFIX_DOTS:
        return False

    return validate_ipv4(text[token_start:], allow_leading_zeros=allow_leading_zeros)


def validate_ipv6(text: Optional[str], allow_leading_zeros: bool = True) -> bool:
    """
    Validate if string is a syntactically valid IPv6 address.

    Never raises: None, empty strings, non-string values and over-long
    input all return False.

    Args:
        text: Candidate address
        allow_leading_zeros: Leading-zero policy applied to an embedded
            IPv4 suffix (hex groups always allow zero padding)

    Returns:
        True if valid IPv6 text, False otherwise

    Example:
        >>> validate_ipv6("2001:db8::1")
        True
        >>> validate_ipv6("2001:db8:::1")
        False
    """
    if not isinstance(text, str) or not text:
        return False

    length = len(text)
    if length > MAX_IPV6_LENGTH:
        return False

    pos = 0

    # A leading colon is only legal as the first half of '::'
    if text[0] == ':':
        pos = 1
        if pos == length or text[pos] != ':':
            return False

    group_count = 0
    has_compression = False
    xdigits_seen = 0
    val = 0
    token_start = pos

    while pos < length:
        ch = text[pos]
        pos += 1

        digit = hex_digit_value(ch)
        if digit >= 0:
            if xdigits_seen == MAX_GROUP_DIGITS:
                return False
            val = (val << 4) | digit
            if val > MAX_GROUP_VALUE:
                return False
            xdigits_seen += 1
            continue

        if ch == ':':
            token_start = pos
            if xdigits_seen == 0:
                if has_compression:
                    # Second '::' or ':::'
                    return False
                has_compression = True
                continue
            if pos == length:
                # Trailing single colon
                return False

            group_count += 1
            if group_count > MAX_GROUPS:
                return False

            xdigits_seen = 0
            val = 0
            continue

        if ch == '.' and xdigits_seen > 0:
            if not _is_ipv4_suffix(text, token_start, allow_leading_zeros):
                return False

            # Nothing may follow the IPv4 suffix
            group_count += IPV4_SUFFIX_GROUPS
            xdigits_seen = 0
            break

        return False

    if xdigits_seen > 0:
        group_count += 1
        if group_count > MAX_GROUPS:
            return False

    if has_compression:
        # '::' must stand in for at least one zero group
        return group_count < MAX_GROUPS

    return group_count == MAX_GROUPS
