"""
Main entry point for the verification harness.
"""

import argparse
import logging
import sys
from dataclasses import replace

from src.core.config import Config, setup_logging
from src.verification.harness import VerificationHarness


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Verify is_prime, is_fibonacci and find_primes against fixed test vectors."
    )
    parser.add_argument("--vectors", type=str, default=None,
                        help="Path to vector catalog JSON (default: contracts/vectors/magic_numbers.json)")
    parser.add_argument("--extra-print", action="store_true",
                        help="Log every checked value with its result and call time")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: LOG_LEVEL env or INFO)")
    parser.add_argument("--fib-limit", type=int, default=90,
                        help="Last index of the Fibonacci sequence category (default: 90)")
    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.vectors:
        config = replace(config, VECTORS_PATH=args.vectors)
    if args.extra_print:
        config = replace(config, EXTRA_PRINT=True)
    if args.log_level:
        config = replace(config, LOG_LEVEL=args.log_level.upper())

    if args.fib_limit < 0:
        parser.error(f"--fib-limit must be non-negative, got {args.fib_limit}")

    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    setup_logging(config.LOG_LEVEL)

    harness = VerificationHarness(config=config, fibonacci_sequence_limit=args.fib_limit)
    report = harness.run()
    harness.timing.log_summary()

    if not report.passed:
        logging.error(f"{len(report.failed_categories())} of {len(report.results)} categories failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
