"""
IPValidator Regression Harness

Compares the custom scanners against the standard library reference
parser over a labeled case battery.

Author: IPValidator Project
License: GNU GPL v3
"""

from .cases import IPV4_CASES, IPV6_CASES, cases_for
from .reference import reference_ipv4, reference_ipv6
from .runner import RegressionRunner

__all__ = [
    'IPV4_CASES',
    'IPV6_CASES',
    'cases_for',
    'reference_ipv4',
    'reference_ipv6',
    'RegressionRunner'
]
