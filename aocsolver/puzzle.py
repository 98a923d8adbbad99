"""Puzzle-part selector, solver protocol, and per-year solver collections."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum

logger = logging.getLogger(__name__)


class PuzzleInputError(ValueError):
    """Raised when puzzle input does not have the expected shape."""


class UnknownDayError(LookupError):
    """Raised when no solver is registered for a requested year/day."""


class PuzzlePart(Enum):
    PART1 = 1
    PART2 = 2

    @classmethod
    def from_number(cls, number: int) -> "PuzzlePart":
        """Map the CLI part number (1 or 2) to a ``PuzzlePart``."""
        try:
            return cls(number)
        except ValueError as exc:
            raise ValueError(f"puzzle part must be 1 or 2, got {number!r}") from exc


class PuzzleSolver(ABC):
    """One day's solver: raw input bytes plus a part selector in, answer out."""

    @abstractmethod
    def solve(self, data: Iterable[int], part: PuzzlePart) -> str:
        """Compute the answer for ``part`` from the raw puzzle input bytes."""


class YearSolverCollection:
    """Ordered day solvers for one event year.

    Days are numbered by registration order, so ``add`` must be called for
    day 1, day 2, ... in sequence.
    """

    def __init__(self, year: int) -> None:
        self.year = year
        self._solvers: list[PuzzleSolver] = []

    def add(self, solver_cls: type[PuzzleSolver]) -> None:
        self._solvers.append(solver_cls())

    @property
    def days(self) -> list[int]:
        return list(range(1, len(self._solvers) + 1))

    def solver_for(self, day: int) -> PuzzleSolver:
        if day < 1 or day > len(self._solvers):
            raise UnknownDayError(f"day {day} of {self.year} is not implemented")
        return self._solvers[day - 1]

    def solve(self, day: int, data: Iterable[int], part: PuzzlePart) -> str:
        solver = self.solver_for(day)
        logger.debug(f"Solving {self.year} day {day} {part.name} with {type(solver).__name__}")
        return solver.solve(data, part)


def available_years() -> list[int]:
    """Return event years with a registered solver collection."""
    return sorted(_COLLECTION_BUILDERS)


def collection_for_year(year: int) -> YearSolverCollection:
    """Build the solver collection for ``year``."""
    builder = _COLLECTION_BUILDERS.get(year)
    if builder is None:
        raise UnknownDayError(f"no solvers for year {year}")
    return builder()


def _build_2022() -> YearSolverCollection:
    from .year_2022 import build_collection

    return build_collection()


_COLLECTION_BUILDERS = {
    2022: _build_2022,
}
