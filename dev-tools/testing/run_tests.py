#!/usr/bin/env python3
"""Test runner script for OOP Concepts."""
import argparse
import logging
import subprocess
import sys
from typing import List

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

LAYERS = ["unit", "integration", "e2e", "regression", "performance"]


def run_command(cmd: List[str], description: str) -> bool:
    """Run a command and return success status."""
    logger.info(f"Running: {description}")
    logger.debug(f"Command: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, check=True, capture_output=False)
        logger.info(f"PASS {description}")
        return True
    except subprocess.CalledProcessError as e:
        logger.error(f"FAIL {description} (exit code: {e.returncode})")
        return False
    except FileNotFoundError:
        logger.error(f"FAIL {description} (command not found)")
        return False


def build_pytest_command(args: argparse.Namespace) -> List[str]:
    """Translate runner options into a pytest command line."""
    pytest_cmd = [sys.executable, "-m", "pytest"]
    pytest_cmd.append("-v" if args.verbose else "-q")
    pytest_cmd.extend(["--maxfail", str(args.maxfail)])

    if args.coverage or args.html_coverage:
        pytest_cmd.extend(
            ["--cov=oop_concepts", "--cov-report=term-missing", "--cov-branch", "--no-cov-on-fail"]
        )
        if args.html_coverage:
            pytest_cmd.append("--cov-report=html:htmlcov")

    # Layers are OR-ed together, then combined with the remaining filters
    selected_layers = [layer for layer in LAYERS if getattr(args, layer)]
    markers = []
    if selected_layers:
        markers.append("(" + " or ".join(selected_layers) + ")")
    if args.fast:
        markers.append("not slow")
    if args.markers:
        markers.append(f"({args.markers})")

    pytest_cmd.append(args.path or "tests/")

    if markers:
        pytest_cmd.extend(["-m", " and ".join(markers)])
    if args.keyword:
        pytest_cmd.extend(["-k", args.keyword])

    return pytest_cmd


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(description="Run tests for OOP Concepts")
    for layer in LAYERS:
        parser.add_argument(f"--{layer}", action="store_true", help=f"Run {layer} tests")
    parser.add_argument("--coverage", action="store_true", help="Run tests with coverage")
    parser.add_argument(
        "--html-coverage", action="store_true", help="Generate HTML coverage report"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--fast", action="store_true", help="Skip slow tests")
    parser.add_argument("--markers", type=str, help="Run tests with specific markers")
    parser.add_argument("--path", type=str, help="Run tests in specific path")
    parser.add_argument("--keyword", "-k", type=str, help="Run tests matching keyword")
    parser.add_argument("--maxfail", type=int, default=5, help="Stop after N failures")

    args = parser.parse_args()

    success = run_command(build_pytest_command(args), "Running Tests")

    if success:
        print("\nAll tests passed!")
        if args.html_coverage:
            print("Coverage report generated in htmlcov/index.html")
    else:
        print("\nSome tests failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
