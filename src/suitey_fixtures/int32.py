"""
Signed 32-bit integer domain used by the arithmetic fixtures.
"""

from typing import Optional, Union

from suitey_fixtures.config import resolve_overflow_policy
from suitey_fixtures.errors import Int32OverflowError, Int32RangeError
from suitey_fixtures.models import OverflowPolicy

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1

_I32_SPAN = 2 ** 32


def check_i32(value: int, name: str = "value") -> int:
    """
    Validate that an operand is a plain int inside the i32 range.

    Args:
        value (int): The operand.
        name (str): Operand name used in error messages.

    Returns:
        int: The operand, unchanged.

    Raises:
        TypeError: If the operand is not an int (bool is rejected too).
        Int32RangeError: If the operand does not fit in i32.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < I32_MIN or value > I32_MAX:
        raise Int32RangeError(name, value)
    return value


def wrap_i32(value: int) -> int:
    """Two's-complement wrap of an arbitrary int into i32."""
    wrapped = (value - I32_MIN) % _I32_SPAN + I32_MIN
    return wrapped


def saturate_i32(value: int) -> int:
    return max(I32_MIN, min(I32_MAX, value))


def apply_overflow_policy(value: int, policy: Optional[Union[OverflowPolicy, str]], operation: str) -> int:
    """
    Bring an exact result back into i32 according to the overflow policy.

    Args:
        value (int): Exact mathematical result.
        policy (Optional[OverflowPolicy | str]): One of wrap, saturate, fail. None means the
            active config's policy, which is only looked up when the value is out of range.
        operation (str): Operation name ("add", "multiply") for the error message.

    Returns:
        int: A value inside [I32_MIN, I32_MAX].

    Raises:
        Int32OverflowError: If the value is out of range and the policy is fail.
    """
    if policy is not None:
        policy = OverflowPolicy(policy)
    if I32_MIN <= value <= I32_MAX:
        return value

    policy = resolve_overflow_policy(policy)
    if policy == OverflowPolicy.WRAP:
        return wrap_i32(value)
    if policy == OverflowPolicy.SATURATE:
        return saturate_i32(value)
    raise Int32OverflowError(operation, value)
