"""
Regression Harness Test Suite

Tests for the reference parser wrappers, the built-in case battery and
RegressionRunner reporting (PASS/FAIL lines, totals, single checks).

Author: IPValidator Project
License: GNU GPL v3
"""

import io
import unittest

from ip_validator.models import AddressFamily, CaseResult, RegressionCase, SuiteStats
from ip_validator.regression import IPV4_CASES, IPV6_CASES, RegressionRunner
from ip_validator.regression.reference import reference_ipv4, reference_ipv6
from ip_validator.regression.runner import ANSI_RED, ANSI_RESET


class TestReferenceParser(unittest.TestCase):
    """Reference verdicts from the ipaddress module."""

    def test_reference_ipv4(self):
        self.assertTrue(reference_ipv4("192.168.1.1"))
        self.assertFalse(reference_ipv4("256.1.1.1"))
        self.assertFalse(reference_ipv4(None))
        self.assertFalse(reference_ipv4(""))

    def test_reference_ipv6(self):
        self.assertTrue(reference_ipv6("2001:db8::1"))
        self.assertTrue(reference_ipv6("::ffff:192.0.2.128"))
        self.assertFalse(reference_ipv6("2001:db8:::1"))
        self.assertFalse(reference_ipv6(None))
        self.assertFalse(reference_ipv6(""))


class TestCaseBattery(unittest.TestCase):
    """Sanity of the built-in battery."""

    def test_families_are_consistent(self):
        self.assertTrue(all(c.family is AddressFamily.IPV4 for c in IPV4_CASES))
        self.assertTrue(all(c.family is AddressFamily.IPV6 for c in IPV6_CASES))

    def test_battery_includes_null_and_empty(self):
        for cases in (IPV4_CASES, IPV6_CASES):
            texts = [c.text for c in cases]
            self.assertIn(None, texts)
            self.assertIn("", texts)

    def test_case_names_are_unique(self):
        for cases in (IPV4_CASES, IPV6_CASES):
            names = [c.name for c in cases]
            self.assertEqual(len(names), len(set(names)))


class TestSuiteStats(unittest.TestCase):
    """Counter arithmetic."""

    def test_add_and_merge(self):
        case = RegressionCase("x", "1.2.3.4", True, AddressFamily.IPV4)
        stats = SuiteStats()
        stats.add(CaseResult(case, reference=True, custom=True))
        stats.add(CaseResult(case, reference=True, custom=False))

        self.assertEqual((stats.total, stats.passed, stats.failed), (2, 1, 1))

        combined = stats.merge(SuiteStats(total=3, passed=3))
        self.assertEqual((combined.total, combined.passed, combined.failed), (5, 4, 1))

    def test_case_result_requires_both_verdicts(self):
        case = RegressionCase("x", "1.2.3.4", True, AddressFamily.IPV4)
        self.assertTrue(CaseResult(case, True, True).passed)
        self.assertFalse(CaseResult(case, False, True).passed)
        self.assertFalse(CaseResult(case, True, False).passed)


class TestRegressionRunner(unittest.TestCase):
    """Runner output and aggregation."""

    def setUp(self):
        self.out = io.StringIO()
        self.runner = RegressionRunner(color=False, out=self.out)

    def test_builtin_battery_passes(self):
        results = self.runner.run_all()

        ipv4 = results[AddressFamily.IPV4]
        ipv6 = results[AddressFamily.IPV6]
        self.assertEqual(ipv4.total, len(IPV4_CASES))
        self.assertEqual(ipv6.total, len(IPV6_CASES))
        self.assertEqual(ipv4.failed, 0, self.out.getvalue())
        self.assertEqual(ipv6.failed, 0, self.out.getvalue())
        self.assertNotIn("FAIL", self.out.getvalue())

    def test_pass_line_format(self):
        case = RegressionCase("IPv4: Localhost", "127.0.0.1", True, AddressFamily.IPV4)
        self.runner.run_case(case)
        self.assertEqual(self.out.getvalue(), 'PASS IPv4: Localhost: "127.0.0.1" -> valid\n')

    def test_null_input_rendered_as_null(self):
        case = RegressionCase("IPv6 Invalid: NULL", None, False, AddressFamily.IPV6)
        result = self.runner.run_case(case)
        self.assertTrue(result.passed)
        self.assertIn('"NULL" -> invalid', self.out.getvalue())

    def test_fail_line_reports_all_verdicts(self):
        case = RegressionCase("Wrong expectation", "1.2.3.4", False, AddressFamily.IPV4)
        with self.assertLogs('ip_validator.regression.runner', level='WARNING'):
            result = self.runner.run_case(case)

        self.assertFalse(result.passed)
        self.assertEqual(
            self.out.getvalue(),
            'FAIL Wrong expectation: "1.2.3.4" -> Expected: invalid, '
            'reference: valid, custom: valid\n'
        )

    def test_fail_line_colored(self):
        runner = RegressionRunner(color=True, out=self.out)
        case = RegressionCase("Wrong expectation", "::1", False, AddressFamily.IPV6)
        with self.assertLogs('ip_validator.regression.runner', level='WARNING'):
            runner.run_case(case)

        line = self.out.getvalue().rstrip('\n')
        self.assertTrue(line.startswith(f"{ANSI_RED}FAIL"))
        self.assertTrue(line.endswith(ANSI_RESET))

    def test_leading_zero_disagreement_is_reported_not_changed(self):
        """Default policy accepts padding; the reference parser does not."""
        case = RegressionCase("IPv4: Leading zeros", "192.001.002.003", True, AddressFamily.IPV4)
        with self.assertLogs('ip_validator.regression.runner', level='WARNING'):
            result = self.runner.run_case(case)

        self.assertTrue(result.custom)
        self.assertFalse(result.reference)
        self.assertFalse(result.passed)

    def test_strict_policy_is_passed_to_scanners(self):
        runner = RegressionRunner(allow_leading_zeros=False, color=False, out=self.out)
        self.assertFalse(runner.custom_verdict(AddressFamily.IPV4, "010.0.0.1"))
        self.assertFalse(runner.custom_verdict(AddressFamily.IPV6, "::ffff:010.0.0.1"))
        self.assertTrue(self.runner.custom_verdict(AddressFamily.IPV4, "010.0.0.1"))

    def test_summary_format(self):
        cases = [
            RegressionCase("ok", "1.2.3.4", True, AddressFamily.IPV4),
            RegressionCase("bad", "1.2.3.4", False, AddressFamily.IPV4),
        ]
        with self.assertLogs('ip_validator.regression.runner', level='WARNING'):
            stats = self.runner.run_suite(AddressFamily.IPV4, cases)

        self.out.seek(0)
        self.out.truncate()
        combined = self.runner.print_summary({AddressFamily.IPV4: stats})

        self.assertEqual(
            self.out.getvalue().splitlines(),
            ["IPv4 totals 2:1 1", "IPv6 totals 0:0 0", "Combined 2:1 1"]
        )
        self.assertEqual(combined.failed, 1)

    def test_check_single(self):
        custom, reference = self.runner.check_single(AddressFamily.IPV6, "2001:db8::1")

        self.assertTrue(custom)
        self.assertTrue(reference)
        self.assertEqual(
            self.out.getvalue().splitlines(),
            ["Custom IPv6 validator: 2001:db8::1 is valid",
             "Reference IPv6 parser: 2001:db8::1 is valid"]
        )

    def test_check_single_invalid(self):
        custom, reference = self.runner.check_single(AddressFamily.IPV4, "256.1.1.1")
        self.assertFalse(custom)
        self.assertFalse(reference)
        self.assertIn("Custom IPv4 validator: 256.1.1.1 is invalid", self.out.getvalue())


if __name__ == '__main__':
    unittest.main()
