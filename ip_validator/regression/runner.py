"""
IPValidator Regression Runner

Runs labeled cases against both the custom scanners and the reference
parser, prints per-case PASS/FAIL lines and aggregates totals per
address family.

A mismatch is only reported; it never alters validator behavior.

Author: IPValidator Project
License: GNU GPL v3
"""

import logging
import sys
from typing import Callable, Dict, Iterable, Optional, TextIO, Tuple

from ..core import validate_ipv4, validate_ipv6
from ..models import AddressFamily, CaseResult, RegressionCase, SuiteStats
from .cases import cases_for
from .reference import reference_ipv4, reference_ipv6

ANSI_RED = "\x1b[31m"
ANSI_RESET = "\x1b[0m"

REFERENCE_VALIDATORS: Dict[AddressFamily, Callable[[Optional[str]], bool]] = {
    AddressFamily.IPV4: reference_ipv4,
    AddressFamily.IPV6: reference_ipv6,
}


def _verdict(value: bool) -> str:
    return "valid" if value else "invalid"


class RegressionRunner:
    """Compares custom validators with the reference parser and reports results"""

    def __init__(self, allow_leading_zeros: bool = True, color: bool = True,
                 out: Optional[TextIO] = None):
        """
        Initialize runner.

        Args:
            allow_leading_zeros: Leading-zero policy passed to the scanners
            color: Highlight FAIL lines with ANSI red
            out: Stream for report lines (default: sys.stdout)
        """
        self.allow_leading_zeros = allow_leading_zeros
        self.color = color
        self.out = out if out is not None else sys.stdout
        self.logger = logging.getLogger(__name__)

    def _emit(self, line: str):
        print(line, file=self.out)

    def custom_verdict(self, family: AddressFamily, text: Optional[str]) -> bool:
        """Run the custom scanner for a family."""
        if family is AddressFamily.IPV4:
            return validate_ipv4(text, allow_leading_zeros=self.allow_leading_zeros)
        return validate_ipv6(text, allow_leading_zeros=self.allow_leading_zeros)

    def reference_verdict(self, family: AddressFamily, text: Optional[str]) -> bool:
        """Run the reference parser for a family."""
        return REFERENCE_VALIDATORS[family](text)

    def run_case(self, case: RegressionCase) -> CaseResult:
        """
        Execute one case and print its outcome.

        Returns:
            CaseResult with both verdicts
        """
        result = CaseResult(
            case=case,
            reference=self.reference_verdict(case.family, case.text),
            custom=self.custom_verdict(case.family, case.text)
        )

        if result.passed:
            self._emit(f'PASS {case.name}: "{case.display_text}" -> {_verdict(result.reference)}')
            return result

        line = (
            f'FAIL {case.name}: "{case.display_text}" -> '
            f'Expected: {_verdict(case.expected)}, '
            f'reference: {_verdict(result.reference)}, '
            f'custom: {_verdict(result.custom)}'
        )
        if self.color:
            line = f"{ANSI_RED}{line}{ANSI_RESET}"
        self._emit(line)

        self.logger.warning(
            f"Regression mismatch in '{case.name}' ({case.family.label}): "
            f"expected={case.expected} reference={result.reference} custom={result.custom}"
        )
        return result

    def run_suite(self, family: AddressFamily,
                  cases: Optional[Iterable[RegressionCase]] = None) -> SuiteStats:
        """
        Run a battery of cases for one family.

        Args:
            family: Address family being tested
            cases: Cases to run (default: built-in battery for family)

        Returns:
            SuiteStats with total and passed counts
        """
        if cases is None:
            cases = cases_for(family)

        stats = SuiteStats()
        for case in cases:
            stats.add(self.run_case(case))

        self.logger.debug(
            f"{family.label} suite finished: {stats.passed}/{stats.total} passed"
        )
        return stats

    def run_all(self) -> Dict[AddressFamily, SuiteStats]:
        """Run the built-in IPv4 and IPv6 batteries."""
        return {
            AddressFamily.IPV4: self.run_suite(AddressFamily.IPV4),
            AddressFamily.IPV6: self.run_suite(AddressFamily.IPV6),
        }

    def print_summary(self, results: Dict[AddressFamily, SuiteStats]) -> SuiteStats:
        """
        Print per-family and combined totals as "total:passed failed".

        Returns:
            Combined SuiteStats
        """
        combined = SuiteStats()
        for family in (AddressFamily.IPV4, AddressFamily.IPV6):
            stats = results.get(family, SuiteStats())
            self._emit(f"{family.label} totals {stats.total}:{stats.passed} {stats.failed}")
            combined = combined.merge(stats)

        self._emit(f"Combined {combined.total}:{combined.passed} {combined.failed}")
        return combined

    def check_single(self, family: AddressFamily, text: str) -> Tuple[bool, bool]:
        """
        Validate one address with both validators and print the verdicts.

        Returns:
            (custom verdict, reference verdict)
        """
        custom = self.custom_verdict(family, text)
        reference = self.reference_verdict(family, text)

        self._emit(f"Custom {family.label} validator: {text} is {_verdict(custom)}")
        self._emit(f"Reference {family.label} parser: {text} is {_verdict(reference)}")

        if custom != reference:
            self.logger.info(
                f"Custom and reference verdicts differ for {family.label} input '{text}'"
            )
        return custom, reference
