import argparse
from unittest.mock import patch

import pytest

from suitey_fixtures.cli import build_parser, main
from suitey_fixtures.config import get_config
from suitey_fixtures.int32 import I32_MAX, I32_MIN
from suitey_fixtures.models import OverflowPolicy


class TestCli:

    def test_add(self, captured_printer):
        printer, buffer = captured_printer
        assert main(["add", "2", "3"], printer=printer) == 0
        assert buffer.getvalue().strip() == "5"

    def test_multiply_negative(self, captured_printer):
        printer, buffer = captured_printer
        assert main(["multiply", "-2", "3"], printer=printer) == 0
        assert buffer.getvalue().strip() == "-6"

    def test_combined_add(self, captured_printer):
        printer, buffer = captured_printer
        assert main(["combined-add", "1", "2"], printer=printer) == 0
        assert buffer.getvalue().strip() == "3"

    @pytest.mark.parametrize("n,expected", [("2", "true"), ("-1", "false"), ("0", "true")])
    def test_is_even(self, captured_printer, n, expected):
        printer, buffer = captured_printer
        assert main(["is-even", n], printer=printer) == 0
        assert buffer.getvalue().strip() == expected

    def test_overflow_fails_by_default(self, captured_printer):
        printer, buffer = captured_printer
        assert main(["add", str(I32_MAX), "1"], printer=printer) == 1
        assert "attempt to add with overflow" in buffer.getvalue()

    def test_overflow_policy_option(self, captured_printer):
        printer, buffer = captured_printer
        assert main(["--overflow-policy", "wrap", "add", str(I32_MAX), "1"], printer=printer) == 0
        assert buffer.getvalue().strip() == str(I32_MIN)
        assert get_config().overflow_policy == OverflowPolicy.WRAP

    def test_config_file(self, captured_printer, tmp_path):
        printer, buffer = captured_printer
        path = tmp_path / "suitey.yml"
        path.write_text("overflow_policy: saturate\n", encoding="utf-8")
        assert main(["--config", str(path), "multiply", str(I32_MAX), "2"], printer=printer) == 0
        assert buffer.getvalue().strip() == str(I32_MAX)

    def test_invalid_config_file(self, captured_printer, tmp_path):
        printer, buffer = captured_printer
        path = tmp_path / "suitey.yml"
        path.write_text("overflow_policy: explode\n", encoding="utf-8")
        assert main(["--config", str(path), "add", "1", "2"], printer=printer) == 1
        assert "Invalid fixture configuration" in buffer.getvalue()

    def test_out_of_range_operand(self, captured_printer):
        printer, buffer = captured_printer
        assert main(["add", str(I32_MAX + 1), "0"], printer=printer) == 1
        assert "outside the i32 range" in buffer.getvalue()

    def test_smoke(self, captured_printer, tmp_path):
        printer, buffer = captured_printer
        assert main(["smoke", "--workdir", str(tmp_path)], printer=printer) == 0
        output = buffer.getvalue()
        assert "Smoke checks" in output
        assert "Tests completed: 3/3 passed" in output

    def test_count(self, captured_printer, tmp_path):
        printer, buffer = captured_printer
        path = tmp_path / "suite.bats"
        path.write_text('@test "one" {\n  true\n}\n', encoding="utf-8")
        assert main(["count", str(path)], printer=printer) == 0
        assert "Total: 1 test(s) in 1 file(s)" in buffer.getvalue()

    def test_count_reports_parse_errors(self, captured_printer, tmp_path):
        printer, buffer = captured_printer
        path = tmp_path / "test_broken.py"
        path.write_text("def test_x(:\n", encoding="utf-8")
        assert main(["count", str(path)], printer=printer) == 1
        assert "error" in buffer.getvalue()

    def test_no_command_prints_help(self, captured_printer, capsys):
        printer, _ = captured_printer
        assert main([], printer=printer) == 2
        assert "suitey-fixtures" in capsys.readouterr().out

    def test_parser_rejects_unknown_policy(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--overflow-policy", "explode", "add", "1", "2"])

    def test_subcommand_without_handler_is_a_usage_error(self, captured_printer):
        printer, _ = captured_printer
        parser = build_parser()
        subparsers = next(a for a in parser._actions if isinstance(a, argparse._SubParsersAction))
        subparsers.add_parser("noop")

        with patch("suitey_fixtures.cli.build_parser", return_value=parser):
            with pytest.raises(SystemExit) as exc_info:
                main(["noop"], printer=printer)
        assert exc_info.value.code == 2

    def test_count_same_file_twice(self, captured_printer, tmp_path):
        printer, buffer = captured_printer
        path = tmp_path / "suite.bats"
        path.write_text('@test "one" {\n  true\n}\n', encoding="utf-8")
        assert main(["count", str(path), str(path)], printer=printer) == 0
        assert "Total: 2 test(s) in 2 file(s)" in buffer.getvalue()
