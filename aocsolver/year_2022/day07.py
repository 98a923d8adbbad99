"""Day 7: directory sizes from a terminal transcript."""

from __future__ import annotations

from collections.abc import Iterable

from ..filesystem import build_file_system, smallest_folder_to_free, sum_of_small_folders
from ..puzzle import PuzzlePart, PuzzleSolver


class Day7(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        fs = build_file_system(data)
        if part is PuzzlePart.PART1:
            return str(sum_of_small_folders(fs))
        return str(smallest_folder_to_free(fs))
