"""Node datatypes for the transcript-built filesystem tree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileNode:
    """Plain file observed in an ``ls`` listing."""

    name: str
    size: int


@dataclass
class FolderNode:
    """Directory with children referenced by arena index.

    ``size`` caches the recursive size and is ``None`` until computed or after
    a child was added.
    """

    name: str
    parent: int | None
    children: list[int] = field(default_factory=list)
    size: int | None = None


FileSystemNode = FolderNode | FileNode


__all__ = [
    "FileNode",
    "FolderNode",
    "FileSystemNode",
]
