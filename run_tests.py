#!/usr/bin/env python
"""Test runner for LiteLLM Formatter."""

import sys
import subprocess
import argparse


def main():
    """Run the formatter test suite."""
    parser = argparse.ArgumentParser(description="Run LiteLLM formatter tests")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--integration", action="store_true", help="Run end-to-end tests only")
    parser.add_argument("--core", action="store_true",
                        help="Run only normalizer and document helper tests")
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest"]

    if args.core:
        cmd.extend(["tests/unit/test_normalizer.py", "tests/unit/test_document.py"])
    elif args.unit:
        cmd.append("tests/unit")
    elif args.integration:
        cmd.extend(["tests/integration", "-m", "integration"])

    if args.verbose:
        cmd.append("-vv")

    if args.coverage:
        cmd.extend([
            "--cov=litellm_formatter",
            "--cov-report=term-missing",
        ])

    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=".").returncode


if __name__ == "__main__":
    sys.exit(main())
