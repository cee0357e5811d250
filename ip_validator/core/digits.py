"""
IPValidator Digit Helpers

Low-level character decoding shared by the IPv4 and IPv6 scanners.

Provides:
- Bounded decimal octet parsing with early overflow detection
- Hexadecimal digit decoding

Both helpers report failure through a local sentinel (None / -1) that the
calling validator turns into a rejection. Only ASCII digits are recognised;
fullwidth and other unicode digits are rejected.

Author: IPValidator Project
License: GNU GPL v3
"""

from typing import Optional

MAX_OCTET_VALUE = 255


def is_ascii_digit(ch: str) -> bool:
    """Return True for the characters '0' through '9' only."""
    return '0' <= ch <= '9'


def parse_decimal_octet(
    text: str,
    start: int,
    end: int,
    allow_leading_zeros: bool = True
) -> Optional[int]:
    """
    Parse text[start:end] as an unsigned decimal octet.

    The accumulator is checked before every multiply-add, so a digit run
    such as "99999999999" is rejected as soon as the value can no longer
    stay within 0-255 instead of being parsed in full first.

    Args:
        text: Source string
        start: Inclusive start index
        end: Exclusive end index
        allow_leading_zeros: When False, multi-digit values starting
            with '0' (e.g. "01") are rejected

    Returns:
        Parsed value in [0, 255], or None if the range is empty, holds a
        non-digit, or overflows

    Example:
        >>> parse_decimal_octet("10.0.0.1", 0, 2)
        10
        >>> parse_decimal_octet("256", 0, 3) is None
        True
    """
    if start >= end or end > len(text):
        return None

    if not allow_leading_zeros and end - start > 1 and text[start] == '0':
        return None

    value = 0
    for i in range(start, end):
        ch = text[i]
        if not is_ascii_digit(ch):
            return None

        digit = ord(ch) - ord('0')
        # Overflow check before multiplication
        if value > 25 or (value == 25 and digit > 5):
            return None
        value = value * 10 + digit

    return value


def hex_digit_value(ch: str) -> int:
    """
    Convert a single hexadecimal character to its numeric value.

    Returns:
        0-15 for ASCII 0-9, a-f, A-F; -1 for anything else
    """
    if '0' <= ch <= '9':
        return ord(ch) - ord('0')
    if 'a' <= ch <= 'f':
        return ord(ch) - ord('a') + 10
    if 'A' <= ch <= 'F':
        return ord(ch) - ord('A') + 10
    return -1
