from suitey_fixtures.arithmetic import add, is_even, multiply
from suitey_fixtures.combined import combined_add
from suitey_fixtures.errors import ConfigError, FixtureError, Int32OverflowError, Int32RangeError
from suitey_fixtures.int32 import I32_MAX, I32_MIN
from suitey_fixtures.models import FixtureConfig, OverflowPolicy
from suitey_fixtures.version import __version__

__all__ = [
    "add",
    "multiply",
    "is_even",
    "combined_add",
    "I32_MIN",
    "I32_MAX",
    "OverflowPolicy",
    "FixtureConfig",
    "FixtureError",
    "Int32OverflowError",
    "Int32RangeError",
    "ConfigError",
    "__version__",
]
