"""Day 6: first position after a run of distinct bytes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from ..puzzle import PuzzleInputError, PuzzlePart, PuzzleSolver

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def marker_end(data: Iterable[int], window_size: int) -> int:
    """Number of bytes read once the last ``window_size`` bytes are all distinct."""
    window: deque[int] = deque(maxlen=window_size)
    for consumed, byte in enumerate(data, start=1):
        window.append(byte)
        if len(window) == window_size and len(set(window)) == window_size:
            return consumed
    raise PuzzleInputError(f"no run of {window_size} distinct bytes in input")


class Day6(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        size = PACKET_MARKER_SIZE if part is PuzzlePart.PART1 else MESSAGE_MARKER_SIZE
        return str(marker_end(data, size))
