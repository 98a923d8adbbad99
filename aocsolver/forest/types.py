"""Grid datatypes for the tree-height map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tree:
    height: int
    visible: bool = False


@dataclass
class Forest:
    """Row-major grid of trees; every row holds exactly ``width`` cells."""

    width: int
    height: int
    trees: list[Tree]

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def at(self, x: int, y: int) -> Tree:
        return self.trees[self.index(x, y)]

    def visible_count(self) -> int:
        return sum(1 for tree in self.trees if tree.visible)


__all__ = [
    "Tree",
    "Forest",
]
