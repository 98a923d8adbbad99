"""Parse digit rows into a ``Forest``."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..line_pipeline import read_lines
from ..puzzle import PuzzleInputError
from .types import Forest, Tree

logger = logging.getLogger(__name__)

DIGIT_ZERO = ord("0")
DIGIT_NINE = ord("9")


def build_forest(data: Iterable[int]) -> Forest:
    """Build the grid from raw input: one row per line, one digit per tree."""
    width: int | None = None
    rows = 0
    trees: list[Tree] = []

    for line in read_lines(data):
        if width is None:
            if not line:
                raise PuzzleInputError("first grid row is empty")
            width = len(line)
        elif len(line) != width:
            raise PuzzleInputError(f"row {rows + 1} has {len(line)} cells, expected {width}")

        for byte in line:
            if not DIGIT_ZERO <= byte <= DIGIT_NINE:
                raise PuzzleInputError(f"tree height must be a digit, got {chr(byte)!r} in row {rows + 1}")
            trees.append(Tree(byte - DIGIT_ZERO))
        rows += 1

    if width is None:
        raise PuzzleInputError("grid input is empty")

    logger.debug(f"Built {width}x{rows} forest")
    return Forest(width=width, height=rows, trees=trees)
