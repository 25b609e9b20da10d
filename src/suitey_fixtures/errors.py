"""
Exception types raised by the fixture library.
"""


class FixtureError(Exception):
    """Base class for all fixture library errors."""


class Int32RangeError(FixtureError, ValueError):
    """An operand does not fit in a signed 32-bit integer."""

    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(f"{name}={value} is outside the i32 range")


class Int32OverflowError(FixtureError, ArithmeticError):
    """An arithmetic result does not fit in a signed 32-bit integer."""

    def __init__(self, operation: str, value: int):
        self.operation = operation
        self.value = value
        super().__init__(f"attempt to {operation} with overflow")


class ConfigError(FixtureError):
    pass
