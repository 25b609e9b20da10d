from suitey_fixtures.counters.base_counter import BaseCounter
from suitey_fixtures.counters.bats_counter import BatsCounter
from suitey_fixtures.counters.counter_factory import (
    CounterFactory,
    count_tests,
    count_tests_in_file,
    count_tests_in_files,
)
from suitey_fixtures.counters.models import CountSummary, FileCountResult
from suitey_fixtures.counters.python_counter import PythonCounter
from suitey_fixtures.counters.rust_counter import RustCounter

__all__ = [
    "BaseCounter",
    "BatsCounter",
    "RustCounter",
    "PythonCounter",
    "CounterFactory",
    "CountSummary",
    "FileCountResult",
    "count_tests",
    "count_tests_in_file",
    "count_tests_in_files",
]
