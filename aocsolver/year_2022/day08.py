"""Day 8: tree visibility and scenic scores."""

from __future__ import annotations

from collections.abc import Iterable

from ..forest import best_scenic_score, build_forest, mark_visible
from ..puzzle import PuzzlePart, PuzzleSolver


class Day8(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        forest = build_forest(data)
        if part is PuzzlePart.PART1:
            return str(mark_visible(forest))
        return str(best_scenic_score(forest))
