"""
Module providing a factory for creating framework-specific test counters.
"""

import os
from typing import Dict, Iterable, List, Optional, Type

from loguru import logger

from suitey_fixtures.counters.base_counter import BaseCounter
from suitey_fixtures.counters.bats_counter import BatsCounter
from suitey_fixtures.counters.models import CountSummary, FileCountResult
from suitey_fixtures.counters.python_counter import PythonCounter
from suitey_fixtures.counters.rust_counter import RustCounter


class CounterFactory:
    """
    Factory class for creating the counter matching a framework or file type.
    """

    counter_map: Dict[str, Type[BaseCounter]] = {
        'bats': BatsCounter,
        'rust': RustCounter,
        'cargo': RustCounter,
        'python': PythonCounter,
        'pytest': PythonCounter,
    }

    extension_map: Dict[str, str] = {
        '.bats': 'bats',
        '.rs': 'rust',
        '.py': 'python',
    }

    @classmethod
    def create_counter(cls, framework: Optional[str] = None, file_path: Optional[str] = None, verbose: bool = False) -> Optional[BaseCounter]:
        """
        Create a counter for a framework name or, failing that, a file's extension.

        Args:
            framework (Optional[str]): Framework identifier ('bats', 'rust', 'python', ...).
            file_path (Optional[str]): File to infer the framework from.
            verbose (bool): Whether the counter logs every file it counts.

        Returns:
            Optional[BaseCounter]: A counter, or None if the framework is unknown.

        Raises:
            ValueError: If neither framework nor file_path is given.
        """
        if framework is None and file_path is None:
            raise ValueError("Either framework or file_path must be provided")

        if framework is None:
            framework = cls.detect_framework_from_file(file_path)

        counter_class = cls.counter_map.get(framework.lower() if framework else None)
        if counter_class is None:
            return None
        return counter_class(verbose=verbose)

    @classmethod
    def detect_framework_from_file(cls, file_path: str) -> Optional[str]:
        _, ext = os.path.splitext(file_path)
        return cls.extension_map.get(ext.lower())

    @classmethod
    def get_supported_frameworks(cls) -> List[str]:
        return sorted(set(cls.extension_map.values()))

    @classmethod
    def count_file(cls, file_path: str, verbose: bool = False) -> FileCountResult:
        counter = cls.create_counter(file_path=file_path or "", verbose=verbose)
        if counter is None:
            logger.debug(f"No test counter for {file_path}")
            return FileCountResult(file_path=file_path or "", test_count=0)
        return counter.count_file(file_path)


def count_tests(file_paths: Iterable[str], verbose: bool = False) -> CountSummary:
    """
    Count tests in each file and collect the per-file results.

    Args:
        file_paths (Iterable[str]): Files to count; empty entries are skipped and
            a path given twice is counted twice.
        verbose (bool): Whether counters log every file.

    Returns:
        CountSummary: Per-file counts and totals.
    """
    summary = CountSummary()
    for file_path in file_paths:
        if not file_path:
            continue
        summary.file_results.append(CounterFactory.count_file(file_path, verbose=verbose))
    return summary


def count_tests_in_file(file_path: str) -> int:
    return CounterFactory.count_file(file_path).test_count


def count_tests_in_files(file_paths: Iterable[str]) -> int:
    return count_tests(file_paths).total_tests
