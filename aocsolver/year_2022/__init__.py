"""Solvers for the 2022 event, registered in day order."""

from __future__ import annotations

from ..puzzle import YearSolverCollection
from .day01 import Day1
from .day02 import Day2
from .day03 import Day3
from .day04 import Day4
from .day05 import Day5
from .day06 import Day6
from .day07 import Day7
from .day08 import Day8

YEAR = 2022


def build_collection() -> YearSolverCollection:
    collection = YearSolverCollection(YEAR)
    for solver_cls in (Day1, Day2, Day3, Day4, Day5, Day6, Day7, Day8):
        collection.add(solver_cls)
    return collection


__all__ = [
    "YEAR",
    "build_collection",
    "Day1",
    "Day2",
    "Day3",
    "Day4",
    "Day5",
    "Day6",
    "Day7",
    "Day8",
]
