"""
IPValidator - Strict IPv4/IPv6 Text Validation

Exposes the two validation entry points:

    >>> from ip_validator import validate_ipv4, validate_ipv6
    >>> validate_ipv4("10.0.0.1")
    True
    >>> validate_ipv6("::ffff:192.0.2.128")
    True

Author: IPValidator Project
License: GNU GPL v3
"""

from .core import validate_ipv4, validate_ipv6

__version__ = "1.0.0"

__all__ = ['validate_ipv4', 'validate_ipv6', '__version__']
