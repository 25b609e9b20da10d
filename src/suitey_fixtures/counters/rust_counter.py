import re
from pathlib import Path
from typing import List

from suitey_fixtures.counters.base_counter import BaseCounter

_CFG_TEST = re.compile(r"#\[cfg\(test\)\]")
_MOD_DECL = re.compile(r"^\s*(pub\s+)?mod\s")
_TEST_ATTR = re.compile(r"#\[test\]")


class RustCounter(BaseCounter):
    """
    Counts #[test] functions in Rust sources.

    Files inside a tests/ directory are integration tests and every #[test]
    counts. Elsewhere only tests inside a #[cfg(test)] module count; the end
    of that module is found by tracking brace depth.
    """

    framework = "rust"

    def get_supported_extensions(self) -> List[str]:
        return [".rs"]

    @staticmethod
    def is_integration_test_file(file_path: str) -> bool:
        return "tests" in Path(file_path).parts[:-1]

    def count_source(self, source: str, file_path: str) -> int:
        integration = self.is_integration_test_file(file_path)
        count = 0
        in_test_module = False
        module_started = False
        brace_depth = 0

        for line in source.splitlines():
            if not line.strip():
                continue

            brace_depth += line.count("{") - line.count("}")

            if _CFG_TEST.search(line):
                in_test_module = True
                module_started = False
                brace_depth = 0
                continue

            if in_test_module and _MOD_DECL.match(line):
                module_started = True
                continue

            if _TEST_ATTR.search(line):
                if integration or (in_test_module and module_started):
                    count += 1

            if in_test_module and module_started and brace_depth <= 0:
                in_test_module = False
                module_started = False

        return count
