"""Day 5: crate stacks rearranged by a crane."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..line_pipeline import parse_int, read_lines
from ..puzzle import PuzzleInputError, PuzzlePart, PuzzleSolver


@dataclass(frozen=True)
class Move:
    count: int
    source: int
    target: int


def parse_stacks(drawing: list[bytes], labels: bytes) -> list[list[int]]:
    """Turn the crate drawing into stacks, bottom crate first.

    Each column is three characters wide with one space between columns, so
    the crate letter of column ``i`` sits at offset ``4 * i + 1``.
    """
    stacks: list[list[int]] = [[] for _ in labels.split()]
    for row in reversed(drawing):
        for i, stack in enumerate(stacks):
            pos = 4 * i + 1
            if pos + 1 < len(row) and row[pos - 1] == ord("[") and row[pos + 1] == ord("]"):
                stack.append(row[pos])
    return stacks


def parse_move(line: bytes) -> Move:
    parts = line.split(b" ")
    if len(parts) != 6 or parts[0] != b"move" or parts[2] != b"from" or parts[4] != b"to":
        raise PuzzleInputError(f"malformed move: {line!r}")
    return Move(parse_int(parts[1]), parse_int(parts[3]) - 1, parse_int(parts[5]) - 1)


def apply_move(stacks: list[list[int]], move: Move, keep_order: bool) -> None:
    if not (0 <= move.source < len(stacks) and 0 <= move.target < len(stacks)):
        raise PuzzleInputError(f"move references a missing stack: {move}")
    source = stacks[move.source]
    if move.count > len(source):
        raise PuzzleInputError(f"cannot move {move.count} crates from a stack of {len(source)}")

    lifted = source[len(source) - move.count:]
    del source[len(source) - move.count:]
    if not keep_order:
        lifted.reverse()
    stacks[move.target].extend(lifted)


class Day5(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        lines = list(read_lines(data))

        label_row = next(
            (i for i, line in enumerate(lines) if line.strip()[:1] == b"1"),
            None,
        )
        if label_row is None:
            raise PuzzleInputError("crate drawing has no stack number row")
        stacks = parse_stacks(lines[:label_row], lines[label_row])

        rest = lines[label_row + 1:]
        if not rest or rest[0]:
            raise PuzzleInputError("expected a blank line after the stack numbers")

        keep_order = part is PuzzlePart.PART2
        for line in rest[1:]:
            apply_move(stacks, parse_move(line), keep_order)

        return bytes(stack[-1] for stack in stacks if stack).decode("ascii")
