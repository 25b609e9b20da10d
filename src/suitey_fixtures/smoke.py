"""
Shell-style smoke checks shipped with the bats fixture project.

These are not framework tests. They exercise basic operations a harness
should be able to detect and run as a plain script.
"""

import os
import tempfile
from typing import Callable, List, Optional, Tuple

from loguru import logger

from suitey_fixtures.arithmetic import add
from suitey_fixtures.models import SmokeCheckResult, SmokeReport

FIXTURE_STRING = "suitey"
FILE_CONTENT = "test"


def check_arithmetic(workdir: Optional[str] = None) -> Tuple[bool, str]:
    result = add(5, 3)
    if result == 8:
        return True, ""
    return False, f"expected 8, got {result}"


def check_string_length(workdir: Optional[str] = None) -> Tuple[bool, str]:
    length = len(FIXTURE_STRING)
    if length == 6:
        return True, ""
    return False, f"expected 6, got {length}"


def check_file_operations(workdir: Optional[str] = None) -> Tuple[bool, str]:
    """Write a temp file, read it back and remove it."""
    fd, temp_file = tempfile.mkstemp(prefix="shell_test_", suffix=".tmp", dir=workdir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(FILE_CONTENT)
        with open(temp_file, "r", encoding="utf-8") as f:
            content = f.read()
        if os.path.isfile(temp_file) and content == FILE_CONTENT:
            return True, ""
        return False, f"expected {FILE_CONTENT!r}, read {content!r}"
    finally:
        if os.path.exists(temp_file):
            os.remove(temp_file)


SMOKE_CHECKS: List[Tuple[str, Callable[[Optional[str]], Tuple[bool, str]]]] = [
    ("Arithmetic", check_arithmetic),
    ("String length", check_string_length),
    ("File operations", check_file_operations),
]


def run_smoke_checks(workdir: Optional[str] = None) -> SmokeReport:
    """
    Run every smoke check in order and collect the results.

    A check that raises is recorded as failed and the remaining checks still run.

    Args:
        workdir (Optional[str]): Directory for temporary files, defaults to the system temp dir.

    Returns:
        SmokeReport: Results in execution order.
    """
    report = SmokeReport()
    for name, check in SMOKE_CHECKS:
        try:
            passed, message = check(workdir)
        except Exception as e:
            logger.warning(f"Smoke check '{name}' raised: {e}")
            passed, message = False, str(e)
        report.results.append(SmokeCheckResult(name=name, passed=passed, message=message))
        logger.debug(f"Smoke check '{name}': {'passed' if passed else 'failed'}")

    logger.info(f"Smoke checks completed: {report.passed_count}/{report.total_count} passed")
    return report
