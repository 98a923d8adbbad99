"""Visibility sweeps and scenic scores over a ``Forest``."""

from __future__ import annotations

from collections.abc import Iterable

from ..stepped_range import inclusive_indices
from .types import Forest


def _sweep(forest: Forest, cells: Iterable[int]) -> None:
    """Mark trees taller than everything before them along ``cells``."""
    tallest = -1
    for index in cells:
        tree = forest.trees[index]
        if tree.height > tallest:
            tree.visible = True
            tallest = tree.height


def mark_visible(forest: Forest) -> int:
    """Mark every tree visible from outside the grid and return the count."""
    last_x = forest.width - 1
    last_y = forest.height - 1

    for y in inclusive_indices(0, last_y):
        row_start = forest.index(0, y)
        _sweep(forest, (row_start + x for x in inclusive_indices(0, last_x)))
        _sweep(forest, (row_start + x for x in inclusive_indices(last_x, 0)))

    for x in inclusive_indices(0, last_x):
        _sweep(forest, (forest.index(x, y) for y in inclusive_indices(0, last_y)))
        _sweep(forest, (forest.index(x, y) for y in inclusive_indices(last_y, 0)))

    return forest.visible_count()


def viewing_distance(forest: Forest, origin: int, cells: Iterable[int]) -> int:
    """Count trees seen from ``origin`` along ``cells``, including the blocker."""
    limit = forest.trees[origin].height
    distance = 0
    for index in cells:
        distance += 1
        if forest.trees[index].height >= limit:
            break
    return distance


def scenic_score(forest: Forest, x: int, y: int) -> int:
    """Product of the four viewing distances; border trees score 0."""
    last_x = forest.width - 1
    last_y = forest.height - 1
    if x in (0, last_x) or y in (0, last_y):
        return 0
    origin = forest.index(x, y)

    left = viewing_distance(forest, origin, (forest.index(cx, y) for cx in inclusive_indices(x - 1, 0)))
    right = viewing_distance(forest, origin, (forest.index(cx, y) for cx in inclusive_indices(x + 1, last_x)))
    up = viewing_distance(forest, origin, (forest.index(x, cy) for cy in inclusive_indices(y - 1, 0)))
    down = viewing_distance(forest, origin, (forest.index(x, cy) for cy in inclusive_indices(y + 1, last_y)))
    return left * right * up * down


def best_scenic_score(forest: Forest) -> int:
    """Highest scenic score of any interior tree, 0 without an interior."""
    if forest.width < 3 or forest.height < 3:
        return 0

    best = 0
    for y in inclusive_indices(1, forest.height - 2):
        for x in inclusive_indices(1, forest.width - 2):
            best = max(best, scenic_score(forest, x, y))
    return best
