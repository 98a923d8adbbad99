"""Command-line front door for aocsolver.

Parses CLI options, resolves where the puzzle input comes from, and reads it.
Then dispatches into the year's solver collection and prints the answers.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .puzzle import (
    PuzzleInputError,
    PuzzlePart,
    UnknownDayError,
    YearSolverCollection,
    available_years,
    collection_for_year,
)

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise SystemExit(f"Path not found: {path} ({exc.strerror or exc})") from exc


def read_input(day: int, input_arg: str | None) -> bytes:
    """Read puzzle input bytes.

    ``--input`` wins (``-`` meaning stdin); otherwise ``dayNN.txt`` from the
    configured input directory is used when present, else stdin.
    """
    if input_arg is not None and input_arg != "-":
        path = Path(input_arg)
        if not path.is_file():
            raise SystemExit(f"Path not found: {path}")
        return _read_file(path)

    if input_arg is None:
        configured = config.input_path_for_day(day)
        if configured is not None:
            logger.debug(f"Reading input from {configured}")
            return _read_file(configured)

    return sys.stdin.buffer.read()


def resolve_collection(year: int, day: int) -> YearSolverCollection:
    """Look up the year's solvers and check ``day`` exists before any input is read."""
    try:
        collection = collection_for_year(year)
        collection.solver_for(day)
    except UnknownDayError as exc:
        raise SystemExit(str(exc)) from exc
    return collection


def solve_day(collection: YearSolverCollection, day: int, data: bytes, part: PuzzlePart | None) -> list[str]:
    """Solve one part, or both parts when ``part`` is ``None``."""
    parts = [part] if part is not None else list(PuzzlePart)
    return [collection.solve(day, data, selected) for selected in parts]


def main() -> None:
    """Parse CLI arguments, solve the requested day, and print the answer(s)."""
    parser = argparse.ArgumentParser(description="Solve Advent of Code puzzles from raw input bytes.")
    parser.add_argument("day", type=_positive_int, help="Puzzle day number.")
    parser.add_argument(
        "--year",
        type=_positive_int,
        default=None,
        help="Event year (default: configured year or %d)." % config.DEFAULT_YEAR,
    )
    parser.add_argument("--part", type=int, choices=(1, 2), default=None, help="Solve only this part.")
    parser.add_argument("--input", metavar="PATH", default=None, help="Input file, or '-' for stdin.")
    parser.add_argument(
        "--save-input-dir",
        metavar="DIR",
        default=None,
        help="Remember DIR as the directory holding dayNN.txt inputs.",
    )
    parser.add_argument(
        "--save-year",
        metavar="YEAR",
        type=_positive_int,
        default=None,
        help="Remember YEAR as the default event year.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.save_input_dir is not None:
        input_dir = Path(args.save_input_dir)
        if not input_dir.is_dir():
            raise SystemExit(f"Path not found: {input_dir}")
        config.save_input_dir(input_dir)

    if args.save_year is not None:
        if args.save_year not in available_years():
            raise SystemExit(f"no solvers for year {args.save_year}")
        config.save_default_year(args.save_year)

    year = args.year if args.year is not None else config.load_default_year()
    part = PuzzlePart.from_number(args.part) if args.part is not None else None
    collection = resolve_collection(year, args.day)
    data = read_input(args.day, args.input)

    try:
        answers = solve_day(collection, args.day, data, part)
    except PuzzleInputError as exc:
        raise SystemExit(f"Malformed input for day {args.day}: {exc}") from exc

    if part is not None:
        print(answers[0])
    else:
        print(f"The solutions for day {args.day} are '{answers[0]}' and '{answers[1]}'")
