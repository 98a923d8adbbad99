"""Day 4: overlapping section assignments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..line_pipeline import parse_int, read_lines, split_once
from ..puzzle import PuzzlePart, PuzzleSolver


@dataclass(frozen=True)
class SectionRange:
    start: int
    end: int

    def contains(self, other: "SectionRange") -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps_with(self, other: "SectionRange") -> bool:
        return self.start <= other.end and other.start <= self.end


def parse_range(data: bytes) -> SectionRange:
    start, end = split_once(b"-", data)
    return SectionRange(parse_int(start), parse_int(end))


def parse_pair(line: bytes) -> tuple[SectionRange, SectionRange]:
    first, second = split_once(b",", line)
    return parse_range(first), parse_range(second)


class Day4(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        count = 0
        for line in read_lines(data):
            a, b = parse_pair(line)
            if part is PuzzlePart.PART1:
                matched = a.contains(b) or b.contains(a)
            else:
                matched = a.overlaps_with(b)
            if matched:
                count += 1
        return str(count)
