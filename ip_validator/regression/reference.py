"""
IPValidator Reference Parser

Reference verdicts from the standard library ipaddress module.

The regression harness compares the custom scanners against these
verdicts. This is the only place in the project that touches a platform
address parser; the scanners in ip_validator.core never do.

Author: IPValidator Project
License: GNU GPL v3
"""

import ipaddress
from typing import Optional


def reference_ipv4(text: Optional[str]) -> bool:
    """
    Validate IPv4 text with ipaddress.IPv4Address for parity testing.

    Args:
        text: Candidate IPv4 address string

    Returns:
        True if ipaddress accepts the text, False otherwise
    """
    if not isinstance(text, str) or not text:
        return False

    try:
        ipaddress.IPv4Address(text)
        return True
    except ValueError:
        return False


def reference_ipv6(text: Optional[str]) -> bool:
    """
    Validate IPv6 text with ipaddress.IPv6Address for parity testing.

    Args:
        text: Candidate IPv6 address string

    Returns:
        True if ipaddress accepts the text, False otherwise
    """
    if not isinstance(text, str) or not text:
        return False

    try:
        ipaddress.IPv6Address(text)
        return True
    except ValueError:
        return False
