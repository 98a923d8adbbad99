"""Tree-height grid with outside visibility and scenic-score scanning."""

from __future__ import annotations

from .build import build_forest
from .scan import best_scenic_score, mark_visible, scenic_score, viewing_distance
from .types import Forest, Tree

__all__ = [
    "Tree",
    "Forest",
    "build_forest",
    "mark_visible",
    "viewing_distance",
    "scenic_score",
    "best_scenic_score",
]
