#!/usr/bin/env python3
"""
Simple test runner for the ENSIP frontmatter validator.
"""
import os
import subprocess
import sys


def run_tests():
    """Run tests with proper configuration."""
    print("ENSIP Frontmatter - Test Runner")
    print("=" * 40)

    # Set environment for testing
    env = os.environ.copy()
    env["PYTHONPATH"] = "."

    result = subprocess.run([sys.executable, "-m", "pytest", "-v", "--tb=short", *sys.argv[1:]], env=env)

    print("\n" + "=" * 40)
    if result.returncode == 0:
        print("All tests passed!")
        return 0
    else:
        print("Some tests failed.")
        return 1


if __name__ == "__main__":
    exit_code = run_tests()
    sys.exit(exit_code)
