"""Directory tree rebuilt from a ``cd``/``ls`` shell transcript.

This package contains:
- file/folder node datatypes stored in an index-addressed arena
- the navigable tree with cached recursive folder sizes
- transcript replay and the size queries answered on top of it
"""

from __future__ import annotations

from .queries import (
    REQUIRED_FREE_SPACE,
    SMALL_FOLDER_LIMIT,
    TOTAL_DISK_SPACE,
    smallest_folder_to_free,
    sum_of_small_folders,
)
from .transcript import build_file_system
from .tree import ROOT_INDEX, FileSystem
from .types import FileNode, FileSystemNode, FolderNode

__all__ = [
    "FileNode",
    "FolderNode",
    "FileSystemNode",
    "FileSystem",
    "ROOT_INDEX",
    "build_file_system",
    "sum_of_small_folders",
    "smallest_folder_to_free",
    "SMALL_FOLDER_LIMIT",
    "TOTAL_DISK_SPACE",
    "REQUIRED_FREE_SPACE",
]
