"""
IPValidator IPv4 Scanner

Single-pass validator for dotted-quad IPv4 text.

Accepts exactly four '.'-separated decimal octets in [0, 255]. Empty
segments, signs, whitespace, hex/octal prefixes and non-ASCII digits are
rejected. Leading zeros ("192.001.002.003") are accepted unless the caller
asks for the strict policy.

Author: IPValidator Project
License: GNU GPL v3
"""

from typing import Optional

from .digits import MAX_OCTET_VALUE, is_ascii_digit, parse_decimal_octet

# Longest legal form is "255.255.255.255"
MAX_IPV4_LENGTH = 15
IPV4_OCTET_COUNT = 4


def validate_ipv4(text: Optional[str], allow_leading_zeros: bool = True) -> bool:
    """
    Validate if string is a syntactically valid IPv4 address.

    Never raises: None, empty strings, non-string values and over-long
    input all return False.

    Args:
        text: Candidate address
        allow_leading_zeros: Accept zero-padded octets such as "010"

    Returns:
        True if valid dotted-quad, False otherwise

    Example:
        >>> validate_ipv4("192.168.1.1")
        True
        >>> validate_ipv4("192.168.1")
        False
    """
    if not isinstance(text, str) or not text:
        return False

    length = len(text)
    if length > MAX_IPV4_LENGTH:
        return False

    octet_count = 0
    octet_start = 0

    # Position == length acts as the terminating boundary
    for pos in range(length + 1):
        at_end = pos == length
        ch = '' if at_end else text[pos]

        if at_end or ch == '.':
            if pos == octet_start:
                # Empty octet: leading/trailing dot or '..'
                return False

            value = parse_decimal_octet(text, octet_start, pos, allow_leading_zeros)
            if value is None or value > MAX_OCTET_VALUE:
                return False

            octet_count += 1
            if octet_count > IPV4_OCTET_COUNT:
                return False
            octet_start = pos + 1

        elif not is_ascii_digit(ch):
            return False

    return octet_count == IPV4_OCTET_COUNT
