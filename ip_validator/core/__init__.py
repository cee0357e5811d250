"""
IPValidator Core Scanners

Pure, stateless address grammar validators.

Key features:
- IPv4 dotted-quad scanning with early octet overflow detection
- IPv6 scanning with zero compression and embedded IPv4 suffixes
- No platform address-parsing primitives

Author: IPValidator Project
License: GNU GPL v3
"""

from .ipv4 import validate_ipv4, MAX_IPV4_LENGTH
from .ipv6 import validate_ipv6, MAX_IPV6_LENGTH

__all__ = ['validate_ipv4', 'validate_ipv6', 'MAX_IPV4_LENGTH', 'MAX_IPV6_LENGTH']
