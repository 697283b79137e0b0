#!/usr/bin/env python3
"""Run the reactor reboot test suite, optionally with a coverage report.

Anything after the known options is handed to pytest unchanged, e.g.
``python run_tests.py -k TestDiffAndSplit -x``.
"""

import argparse
import subprocess
import sys
from pathlib import Path


def pytest_command(coverage: bool, extra: list[str]) -> list[str]:
    cmd = [sys.executable, "-m", "pytest", "tests/"]
    if coverage:
        cmd += ["--cov=reactor_reboot", "--cov-report=term-missing"]
    return cmd + extra


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--coverage", action="store_true", help="report line coverage of reactor_reboot")
    args, extra = parser.parse_known_args(argv)

    cmd = pytest_command(args.coverage, extra)
    print(" ".join(cmd))
    return subprocess.call(cmd, cwd=Path(__file__).parent)


if __name__ == "__main__":
    sys.exit(main())
