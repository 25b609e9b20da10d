"""
Fixture module for a project that mixes a compiled library with shell tests.
"""

from typing import Optional, Union

from suitey_fixtures.int32 import apply_overflow_policy, check_i32
from suitey_fixtures.models import OverflowPolicy


def combined_add(a: int, b: int, *, policy: Optional[Union[OverflowPolicy, str]] = None) -> int:
    check_i32(a, "a")
    check_i32(b, "b")
    return apply_overflow_policy(a + b, policy, "add")
