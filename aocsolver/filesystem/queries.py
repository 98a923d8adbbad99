"""Size queries over a replayed filesystem."""

from __future__ import annotations

import logging

from .tree import ROOT_INDEX, FileSystem

logger = logging.getLogger(__name__)

SMALL_FOLDER_LIMIT = 100_000
TOTAL_DISK_SPACE = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000


def sum_of_small_folders(fs: FileSystem, limit: int = SMALL_FOLDER_LIMIT) -> int:
    """Sum the sizes of all folders no larger than ``limit``.

    Nested folders are counted on their own as well as inside their parents.
    """
    total = 0
    for index in fs.folder_indices():
        size = fs.folder_size(index)
        if size <= limit:
            total += size
    return total


def smallest_folder_to_free(
    fs: FileSystem,
    total_space: int = TOTAL_DISK_SPACE,
    required_free: int = REQUIRED_FREE_SPACE,
) -> int:
    """Size of the smallest folder whose deletion frees enough space.

    Returns ``0`` when enough space is already free. Among equal sizes the
    first folder in pre-order wins.
    """
    used = fs.folder_size(ROOT_INDEX)
    needed = required_free - (total_space - used)
    if needed <= 0:
        return 0

    best_index: int | None = None
    best_size = used + 1
    for index in fs.folder_indices():
        size = fs.folder_size(index)
        if needed <= size < best_size:
            best_index = index
            best_size = size

    if best_index is not None:
        logger.debug(f"Deleting {fs.path_of(best_index)} frees {best_size} (needed {needed})")
    return best_size
