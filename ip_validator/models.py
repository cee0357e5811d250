"""
IPValidator Data Models

Data structures used by the regression harness.

This module defines:
- AddressFamily: IPv4 / IPv6 selector
- RegressionCase: One labeled (input, expected verdict) pair
- CaseResult: Outcome of running a case against both validators
- SuiteStats: Aggregated pass/fail counts per address family

The validators themselves keep no state and use none of these types.

Author: IPValidator Project
License: GNU GPL v3
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AddressFamily(Enum):
    """
    Address family a case or check belongs to.

    Values:
        IPV4: Dotted-quad IPv4 text
        IPV6: Textual IPv6 (hextets, '::', optional IPv4 suffix)
    """
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def label(self) -> str:
        """Display label used in reports (e.g. 'IPv4')."""
        return "IPv4" if self is AddressFamily.IPV4 else "IPv6"


@dataclass(frozen=True)
class RegressionCase:
    """
    Single labeled regression case.

    Attributes:
        name: Human-readable label (e.g. "IPv4: Localhost")
        text: Input string, or None to exercise the null-input path
        expected: Expected verdict
        family: Which validator the case targets
    """
    name: str
    text: Optional[str]
    expected: bool
    family: AddressFamily

    @property
    def display_text(self) -> str:
        """Input as printed in reports; None renders as NULL."""
        return self.text if self.text is not None else "NULL"


@dataclass
class CaseResult:
    """
    Outcome of one regression case.

    A case passes only when both the reference parser and the custom
    validator agree with the expected verdict.
    """
    case: RegressionCase
    reference: bool
    custom: bool

    @property
    def passed(self) -> bool:
        return self.reference == self.case.expected and self.custom == self.case.expected


@dataclass
class SuiteStats:
    """
    Pass/fail counters for one suite run.

    Attributes:
        total: Number of cases executed
        passed: Number of cases where every verdict matched expectations
    """
    total: int = 0
    passed: int = 0

    @property
    def failed(self) -> int:
        return self.total - self.passed

    def add(self, result: CaseResult) -> None:
        """Count a finished case."""
        self.total += 1
        if result.passed:
            self.passed += 1

    def merge(self, other: 'SuiteStats') -> 'SuiteStats':
        """Return combined counters of self and other."""
        return SuiteStats(total=self.total + other.total, passed=self.passed + other.passed)
