from typing import List

from suitey_fixtures.counters.base_counter import BaseCounter


class BatsCounter(BaseCounter):
    """Counts @test annotations in BATS files, ignoring comment lines."""

    framework = "bats"

    def get_supported_extensions(self) -> List[str]:
        return [".bats"]

    def count_source(self, source: str, file_path: str) -> int:
        count = 0
        for line in source.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "@test" in line:
                count += 1
        return count
