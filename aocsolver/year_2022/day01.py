"""Day 1: calorie counting over blank-line separated groups."""

from __future__ import annotations

from collections.abc import Iterable

from ..line_pipeline import parse_int, read_lines
from ..puzzle import PuzzlePart, PuzzleSolver


def group_totals(data: Iterable[int]) -> list[int]:
    """Sum each blank-line separated group of numbers."""
    totals: list[int] = []
    current = 0
    in_group = False

    for line in read_lines(data, drop_trailing_blank=False):
        if not line:
            if in_group:
                totals.append(current)
            current = 0
            in_group = False
            continue
        current += parse_int(line)
        in_group = True

    if in_group:
        totals.append(current)
    return totals


class Day1(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        totals = sorted(group_totals(data), reverse=True)
        if part is PuzzlePart.PART1:
            return str(totals[0] if totals else 0)
        return str(sum(totals[:3]))
