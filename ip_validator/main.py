#!/usr/bin/env python3
"""
IPValidator - Strict IPv4/IPv6 Text Validation

Main entry point for the regression harness and single-address checks.

Usage:
    ipvalidator                          # Run IPv4 and IPv6 regression suites
    ipvalidator -4 192.168.1.1           # Check one IPv4 address
    ipvalidator -6 2001:db8::1           # Check one IPv6 address
    ipvalidator -4 10.0.0.1 -6 ::1       # Check both
    ipvalidator --strict-leading-zeros   # Reject zero-padded IPv4 octets

Author: IPValidator Project
License: GNU GPL v3
"""

import sys
import argparse
import logging
from typing import List, Optional

from ip_validator.config import get_config
from ip_validator.models import AddressFamily
from ip_validator.regression.runner import RegressionRunner
from ip_validator.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog='ipvalidator',
        description='IPValidator - strict IPv4/IPv6 text validation and regression harness',
        epilog='No address arguments: run IPv4 and IPv6 regression suites.'
    )
    parser.add_argument('-4', dest='ipv4', metavar='ADDRESS', type=str,
                        help='Validate a single IPv4 address')
    parser.add_argument('-6', dest='ipv6', metavar='ADDRESS', type=str,
                        help='Validate a single IPv6 address')
    parser.add_argument('--strict-leading-zeros', action='store_true',
                        help='Reject zero-padded IPv4 octets (e.g. 192.001.002.003)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable ANSI color in FAIL lines')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point with argument parsing.

    Supported operations:
    - Regression suites (no address arguments)
    - Single-address checks (-4 / -6)

    Returns:
        Process exit code: 0 on success, 1 if any regression case failed
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()

    log_level = logging.DEBUG if (args.verbose or config.verbose) else logging.INFO
    setup_logging(level=log_level)
    logger = logging.getLogger(__name__)

    allow_leading_zeros = config.allow_leading_zeros and not args.strict_leading_zeros
    runner = RegressionRunner(
        allow_leading_zeros=allow_leading_zeros,
        color=config.color_output and not args.no_color
    )
    logger.debug(f"Leading-zero policy: {'accept' if allow_leading_zeros else 'reject'}")

    if args.ipv4 is None and args.ipv6 is None:
        results = runner.run_all()
        combined = runner.print_summary(results)
        if combined.failed:
            logger.error(f"{combined.failed} regression case(s) failed")
            return 1
        return 0

    if args.ipv4 is not None:
        runner.check_single(AddressFamily.IPV4, args.ipv4)

    if args.ipv6 is not None:
        runner.check_single(AddressFamily.IPV6, args.ipv6)

    return 0


if __name__ == '__main__':
    sys.exit(main())
