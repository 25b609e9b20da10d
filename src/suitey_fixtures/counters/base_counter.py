"""
Base class for framework-specific test counters.
"""

import os
from abc import ABC, abstractmethod
from typing import List

from loguru import logger

from suitey_fixtures.counters.models import FileCountResult


class BaseCounter(ABC):
    """
    Count the tests declared in a source file without running it.
    """

    framework: str = ""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    @abstractmethod
    def get_supported_extensions(self) -> List[str]:
        """
        Get the list of file extensions supported by this counter.

        Returns:
            List[str]: Supported extensions (lowercase, with dot).
        """
        pass

    @abstractmethod
    def count_source(self, source: str, file_path: str) -> int:
        """
        Count tests in already loaded source text.

        Args:
            source (str): File content.
            file_path (str): Path of the file, some frameworks depend on its location.

        Returns:
            int: Number of tests found.
        """
        pass

    def get_file_extension(self, file_path: str) -> str:
        _, ext = os.path.splitext(file_path)
        return ext.lower()

    def is_supported_file(self, file_path: str) -> bool:
        return self.get_file_extension(file_path) in self.get_supported_extensions()

    def count_file(self, file_path: str) -> FileCountResult:
        """
        Count tests in a single file.

        Missing or unsupported files count as zero tests. Read and parse
        errors are reported in the result instead of being raised.

        Args:
            file_path (str): Path to the file.

        Returns:
            FileCountResult: Count and status for the file.
        """
        if not file_path or not os.path.isfile(file_path):
            return FileCountResult(file_path=file_path or "", framework=self.framework, test_count=0)

        if not self.is_supported_file(file_path):
            return FileCountResult(file_path=file_path, framework=self.framework, test_count=0)

        try:
            with open(file_path, "r", encoding="utf-8", errors="replace") as f:
                source = f.read()
            count = self.count_source(source, file_path)
        except (OSError, SyntaxError, ValueError) as e:
            logger.warning(f"Failed to count tests in {file_path}: {e}")
            return FileCountResult(
                file_path=file_path,
                framework=self.framework,
                test_count=0,
                success=False,
                error=str(e),
            )

        if self.verbose:
            logger.info(f"Counted {count} {self.framework} test(s) in {file_path}")
        return FileCountResult(file_path=file_path, framework=self.framework, test_count=count)
