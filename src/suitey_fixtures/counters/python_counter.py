import ast
from typing import List

from suitey_fixtures.counters.base_counter import BaseCounter

_TEST_FUNCTIONS = (ast.FunctionDef, ast.AsyncFunctionDef)


class PythonCounter(BaseCounter):
    """
    Counts pytest-style tests: module level test* functions and test* methods
    of Test* classes.
    """

    framework = "python"

    def get_supported_extensions(self) -> List[str]:
        return [".py"]

    def count_source(self, source: str, file_path: str) -> int:
        tree = ast.parse(source, filename=file_path)
        count = 0
        for node in tree.body:
            if isinstance(node, _TEST_FUNCTIONS) and node.name.startswith("test"):
                count += 1
            elif isinstance(node, ast.ClassDef) and node.name.startswith("Test"):
                count += sum(
                    1
                    for item in node.body
                    if isinstance(item, _TEST_FUNCTIONS) and item.name.startswith("test")
                )
        return count
