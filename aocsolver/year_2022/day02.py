"""Day 2: rock-paper-scissors strategy guide scoring."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from ..line_pipeline import read_lines
from ..puzzle import PuzzleInputError, PuzzlePart, PuzzleSolver


class HandGesture(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def beats(self) -> "HandGesture":
        """The gesture this one wins against."""
        return _BEATS[self]

    def play(self, other: "HandGesture") -> "GameOutcome":
        if self is other:
            return GameOutcome.DRAW
        if self.beats() is other:
            return GameOutcome.WIN
        return GameOutcome.LOSE


class GameOutcome(Enum):
    LOSE = 0
    DRAW = 3
    WIN = 6


_BEATS = {
    HandGesture.ROCK: HandGesture.SCISSORS,
    HandGesture.PAPER: HandGesture.ROCK,
    HandGesture.SCISSORS: HandGesture.PAPER,
}

OPPONENT_CODES = {ord("A"): HandGesture.ROCK, ord("B"): HandGesture.PAPER, ord("C"): HandGesture.SCISSORS}
MY_CODES = {ord("X"): HandGesture.ROCK, ord("Y"): HandGesture.PAPER, ord("Z"): HandGesture.SCISSORS}
OUTCOME_CODES = {ord("X"): GameOutcome.LOSE, ord("Y"): GameOutcome.DRAW, ord("Z"): GameOutcome.WIN}


def shape_for_outcome(opponent: HandGesture, outcome: GameOutcome) -> HandGesture:
    """Pick my gesture so that playing it against ``opponent`` gives ``outcome``."""
    if outcome is GameOutcome.DRAW:
        return opponent
    if outcome is GameOutcome.LOSE:
        return opponent.beats()
    return next(gesture for gesture in HandGesture if gesture.beats() is opponent)


def _decode(table: dict, code: int, what: str):
    try:
        return table[code]
    except KeyError:
        raise PuzzleInputError(f"invalid code for {what}: {chr(code)!r}") from None


def round_score(line: bytes, part: PuzzlePart) -> int:
    if len(line) != 3 or line[1] != ord(" "):
        raise PuzzleInputError(f"expected '<code> <code>', got {line!r}")

    opponent = _decode(OPPONENT_CODES, line[0], "opponent shape")
    if part is PuzzlePart.PART1:
        mine = _decode(MY_CODES, line[2], "my shape")
        outcome = mine.play(opponent)
    else:
        outcome = _decode(OUTCOME_CODES, line[2], "outcome")
        mine = shape_for_outcome(opponent, outcome)
    return mine.value + outcome.value


class Day2(PuzzleSolver):
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        return str(sum(round_score(line, part) for line in read_lines(data)))
