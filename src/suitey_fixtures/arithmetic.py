"""
A simple library for basic arithmetic operations over signed 32-bit integers.

Example project used to check that a test harness can detect, build and run it.
"""

from typing import Optional, Union

from suitey_fixtures.int32 import apply_overflow_policy, check_i32
from suitey_fixtures.models import OverflowPolicy


def add(a: int, b: int, *, policy: Optional[Union[OverflowPolicy, str]] = None) -> int:
    """
    Return a + b.

    Args:
        a (int): First i32 operand.
        b (int): Second i32 operand.
        policy (Optional[OverflowPolicy]): Overflow policy, defaults to the active config.

    Raises:
        Int32OverflowError: If the sum does not fit and the policy is fail.
    """
    check_i32(a, "a")
    check_i32(b, "b")
    return apply_overflow_policy(a + b, policy, "add")


def multiply(a: int, b: int, *, policy: Optional[Union[OverflowPolicy, str]] = None) -> int:
    """Return a * b, same i32 domain and overflow handling as add()."""
    check_i32(a, "a")
    check_i32(b, "b")
    return apply_overflow_policy(a * b, policy, "multiply")


def is_even(n: int) -> bool:
    check_i32(n, "n")
    return n % 2 == 0
