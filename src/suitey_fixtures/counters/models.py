"""
Pydantic models describing test counts found in fixture files.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class FileCountResult(BaseModel):
    """Test count for a single file."""
    file_path: str = Field(..., description="Path of the counted file")
    framework: Optional[str] = Field(None, description="Counter used for the file (bats, rust, python)")
    test_count: int = Field(0, description="Number of tests declared in the file")
    success: bool = Field(True, description="Whether the file could be read and parsed")
    error: Optional[str] = Field(None, description="Error message when success is False")

    def to_str(self) -> str:
        if not self.success:
            return f"{self.file_path}: error ({self.error or 'unknown error'})"
        framework = self.framework or "unknown"
        return f"{self.file_path}: {self.test_count} test(s) [{framework}]"


class CountSummary(BaseModel):
    """Test counts for a group of files."""
    file_results: List[FileCountResult] = Field(default_factory=list, description="One entry per counted path, in input order")

    @property
    def total_files(self) -> int:
        return len(self.file_results)

    @property
    def total_tests(self) -> int:
        return sum(r.test_count for r in self.file_results)

    def to_str(self) -> str:
        lines = [r.to_str() for r in self.file_results]
        lines.append(f"Total: {self.total_tests} test(s) in {self.total_files} file(s)")
        return "\n".join(lines)

    @property
    def success(self) -> bool:
        return all(r.success for r in self.file_results)

    def get_file_result(self, file_path: str) -> Optional[FileCountResult]:
        """
        Get the first result recorded for a file.

        Args:
            file_path (str): Path as it was passed to count_tests.

        Returns:
            Optional[FileCountResult]: The result, or None if the file was not counted.
        """
        return next((r for r in self.file_results if r.file_path == file_path), None)
