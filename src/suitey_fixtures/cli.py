import argparse
import sys
from typing import List, Optional

from loguru import logger

from suitey_fixtures.arithmetic import add, is_even, multiply
from suitey_fixtures.combined import combined_add
from suitey_fixtures.config import load_config, set_config
from suitey_fixtures.counters import count_tests
from suitey_fixtures.errors import FixtureError
from suitey_fixtures.models import OverflowPolicy
from suitey_fixtures.printer import Printer
from suitey_fixtures.smoke import run_smoke_checks
from suitey_fixtures.version import __version__

BINARY_OPERATIONS = {
    "add": add,
    "multiply": multiply,
    "combined-add": combined_add,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suitey-fixtures",
        description="Arithmetic fixtures and smoke checks for test harness validation",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="YAML file with overflow_policy / log_level")
    parser.add_argument(
        "--overflow-policy",
        choices=[p.value for p in OverflowPolicy],
        default=None,
        help="Override the i32 overflow policy",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")

    subparsers = parser.add_subparsers(dest="command")

    for name in BINARY_OPERATIONS:
        op_parser = subparsers.add_parser(name, help=f"Print {name.replace('-', ' ')}(A, B)")
        op_parser.add_argument("a", type=int)
        op_parser.add_argument("b", type=int)

    even_parser = subparsers.add_parser("is-even", help="Print whether N is even")
    even_parser.add_argument("n", type=int)

    smoke_parser = subparsers.add_parser("smoke", help="Run the shell smoke checks")
    smoke_parser.add_argument("--workdir", default=None, help="Directory for temporary files")

    count_parser = subparsers.add_parser("count", help="Count tests declared in fixture files")
    count_parser.add_argument("paths", nargs="+")

    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(input_args: Optional[List[str]] = None, printer: Optional[Printer] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(input_args)
    printer = printer or Printer()

    if args.command is None:
        parser.print_help()
        return 2

    try:
        config = load_config(args.config)
        if args.overflow_policy:
            config = config.model_copy(update={"overflow_policy": OverflowPolicy(args.overflow_policy)})
        set_config(config)
        configure_logging("DEBUG" if args.verbose else config.log_level)

        if args.command in BINARY_OPERATIONS:
            result = BINARY_OPERATIONS[args.command](args.a, args.b)
            printer.print_str_in_terminal(str(result))
            return 0
        elif args.command == "is-even":
            printer.print_str_in_terminal("true" if is_even(args.n) else "false")
            return 0
        elif args.command == "smoke":
            report = run_smoke_checks(args.workdir)
            printer.print_panel(
                report.to_str(),
                text_options={},
                panel_options={"title": "Smoke checks", "border_style": "green" if report.success else "red"},
            )
            return 0 if report.success else 1
        elif args.command == "count":
            summary = count_tests(args.paths, verbose=args.verbose)
            printer.print_str_in_terminal(summary.to_str())
            return 0 if summary.success else 1
        else:
            parser.error(f"unknown command: {args.command}")

    except (FixtureError, TypeError, ValueError) as e:
        printer.print_error(f"Error: {e}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
