import os
from unittest.mock import patch

from suitey_fixtures import smoke
from suitey_fixtures.models import SmokeCheckResult, SmokeReport
from suitey_fixtures.smoke import run_smoke_checks


class TestSmokeChecks:

    def test_all_checks_pass(self, tmp_path):
        report = run_smoke_checks(str(tmp_path))

        assert report.total_count == 3
        assert report.passed_count == 3
        assert report.success
        assert [r.name for r in report.results] == ["Arithmetic", "String length", "File operations"]

    def test_file_check_cleans_up(self, tmp_path):
        run_smoke_checks(str(tmp_path))
        assert os.listdir(tmp_path) == []

    def test_report_text(self, tmp_path):
        text = run_smoke_checks(str(tmp_path)).to_str()

        assert "✓ Arithmetic test passed" in text
        assert "✓ String length test passed" in text
        assert "✓ File operations test passed" in text
        assert text.splitlines()[-1] == "Tests completed: 3/3 passed"

    def test_failing_check_is_reported(self, tmp_path):
        with patch.object(smoke, "FIXTURE_STRING", "suite"):
            report = run_smoke_checks(str(tmp_path))

        assert report.passed_count == 2
        assert not report.success
        failed = report.results[1]
        assert not failed.passed
        assert failed.message == "expected 6, got 5"
        assert "Tests completed: 2/3 passed" in report.to_str()

    def test_raising_check_does_not_stop_the_run(self, tmp_path):
        with patch.object(smoke, "add", side_effect=RuntimeError("boom")):
            report = run_smoke_checks(str(tmp_path))

        assert report.results[0].passed is False
        assert report.results[0].message == "boom"
        assert report.results[1].passed
        assert report.results[2].passed

    def test_file_check_removes_file_when_read_fails(self, tmp_path):
        with patch("builtins.open", side_effect=OSError("read failed")):
            report = run_smoke_checks(str(tmp_path))

        assert report.results[2].passed is False
        assert "read failed" in report.results[2].message
        assert os.listdir(tmp_path) == []


class TestSmokeReport:

    def test_empty_report(self):
        report = SmokeReport()
        assert report.success
        assert report.to_str().splitlines()[-1] == "Tests completed: 0/0 passed"

    def test_failed_line_includes_message(self):
        result = SmokeCheckResult(name="Arithmetic", passed=False, message="expected 8, got 9")
        assert result.to_str() == "✗ Arithmetic test failed: expected 8, got 9"
