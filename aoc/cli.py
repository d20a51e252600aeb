import argparse
import sys
from typing import List, Optional

import structlog
from rich.console import Console
from rich.table import Table

from aoc import runner
from aoc.core.app import initialize_app
from aoc.core.errors import AocError

logger = structlog.get_logger(__name__)


def _run_command(args, context) -> int:
    path = args.input or context.settings.paths.input_file(args.year, args.day)
    answer = runner.solve_file(args.year, args.day, args.part, path)
    print(answer)
    return 0


def _list_command(args, context) -> int:
    days = runner.available_days(args.year)
    console = Console()
    table = Table(title="Available puzzles", header_style="bold magenta")
    table.add_column("Year", style="cyan")
    table.add_column("Day", justify="right")
    for year, day in days:
        table.add_row(str(year), str(day))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc", description="Advent of Code 2022-2023 solutions."
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="sub-command help"
    )

    # --- Run Command ---
    parser_run = subparsers.add_parser(
        "run", help="Solve one part of one day's puzzle."
    )
    parser_run.add_argument("year", type=int)
    parser_run.add_argument("day", type=int)
    parser_run.add_argument("part", type=int)
    parser_run.add_argument(
        "input",
        nargs="?",
        help="Puzzle input file (default: <input_dir>/<year>/dayDD.txt).",
    )
    parser_run.set_defaults(func=_run_command)

    # --- List Command ---
    parser_list = subparsers.add_parser("list", help="List the available puzzles.")
    parser_list.add_argument("--year", type=int, default=None)
    parser_list.set_defaults(func=_list_command)

    return parser


def run_cli(argv: List[str]) -> int:
    """
    Parses command-line arguments and executes the corresponding command.
    This function is separate from main() to be easily testable.
    """
    # `aoc <year> <day> <part> <input>` is shorthand for `aoc run ...`
    if argv and argv[0].isdigit():
        argv = ["run"] + list(argv)

    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on a usage error and 0 after --help
        return 1 if e.code else 0

    try:
        context = initialize_app()
        logger.info(f"Executing command: {args.command}")
        status = args.func(args, context)
    except (AocError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info(f"Command '{args.command}' finished.")
    return status


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the application's command-line interface.
    """
    sys.exit(run_cli(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
