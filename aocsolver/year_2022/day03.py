"""Day 3: rucksack item priorities."""

from __future__ import annotations

from collections.abc import Iterable

from ..line_pipeline import read_lines
from ..puzzle import PuzzleInputError, PuzzlePart, PuzzleSolver

GROUP_SIZE = 3


def item_priority(item: int) -> int:
    """a-z map to 1-26, A-Z to 27-52."""
    if ord("a") <= item <= ord("z"):
        return item - ord("a") + 1
    if ord("A") <= item <= ord("Z"):
        return item - ord("A") + 27
    raise PuzzleInputError(f"unexpected item {chr(item)!r}")


def _single_common_item(*collections: bytes) -> int:
    common = set(collections[0])
    for items in collections[1:]:
        common &= set(items)
    if not common:
        raise PuzzleInputError(f"no item shared by {collections!r}")
    # Valid input shares exactly one item.
    return min(common)


def compartment_priority(line: bytes) -> int:
    if len(line) < 2 or len(line) % 2:
        raise PuzzleInputError(f"rucksack needs two equal compartments: {line!r}")
    half = len(line) // 2
    return item_priority(_single_common_item(line[:half], line[half:]))


def badge_priorities(lines: list[bytes]) -> int:
    if len(lines) % GROUP_SIZE:
        raise PuzzleInputError(f"{len(lines)} rucksacks do not split into groups of {GROUP_SIZE}")
    total = 0
    for start in range(0, len(lines), GROUP_SIZE):
        total += item_priority(_single_common_item(*lines[start:start + GROUP_SIZE]))
    return total


class Day3(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        lines = read_lines(data)
        if part is PuzzlePart.PART1:
            return str(sum(compartment_priority(line) for line in lines))
        return str(badge_priorities(list(lines)))
