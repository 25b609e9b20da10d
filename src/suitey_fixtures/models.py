"""
Pydantic models shared by the fixture library and its command line.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class OverflowPolicy(str, Enum):
    """What an i32 operation does when the exact result does not fit."""
    WRAP = "wrap"  # two's-complement wrap
    SATURATE = "saturate"  # clamp to I32_MIN / I32_MAX
    FAIL = "fail"  # raise Int32OverflowError


class FixtureConfig(BaseModel):
    overflow_policy: OverflowPolicy = Field(
        OverflowPolicy.FAIL, description="Policy applied to add/multiply results outside the i32 range"
    )
    log_level: str = Field("WARNING", description="loguru level used by the command line sink")


class SmokeCheckResult(BaseModel):
    """Outcome of a single smoke check."""
    name: str = Field(..., description="Short check name, e.g. 'Arithmetic'")
    passed: bool = Field(..., description="Whether the check passed")
    message: str = Field("", description="Failure detail, empty when the check passed")

    def to_str(self) -> str:
        if self.passed:
            return f"✓ {self.name} test passed"
        line = f"✗ {self.name} test failed"
        if self.message:
            line += f": {self.message}"
        return line


class SmokeReport(BaseModel):
    results: List[SmokeCheckResult] = Field(default_factory=list, description="Checks in execution order")

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def success(self) -> bool:
        return self.passed_count == self.total_count

    def to_str(self) -> str:
        """
        Render the report the way the shell fixture prints it.

        Returns:
            str: One line per check followed by the summary line.
        """
        lines = ["Running shell script tests..."]
        lines.extend(r.to_str() for r in self.results)
        lines.append(f"Tests completed: {self.passed_count}/{self.total_count} passed")
        return "\n".join(lines)
