"""Arena-backed directory tree with a working directory and cached sizes."""

from __future__ import annotations

from collections.abc import Iterator

from .types import FileNode, FileSystemNode, FolderNode

ROOT_INDEX = 0


class FileSystem:
    """Directory tree navigated like a shell session.

    Nodes live in ``nodes`` and refer to each other by index; folders keep
    their parent index so ``cd ..`` needs no path stack.
    """

    def __init__(self) -> None:
        self.nodes: list[FileSystemNode] = [FolderNode(name="", parent=None)]
        self.working_dir = ROOT_INDEX

    @property
    def root(self) -> FolderNode:
        return self.folder(ROOT_INDEX)

    def folder(self, index: int) -> FolderNode:
        node = self.nodes[index]
        if not isinstance(node, FolderNode):
            raise TypeError(f"node {index} is a file, not a folder")
        return node

    def cd(self, name: str) -> None:
        """Change into a directory, creating it when it does not exist yet."""
        if name == "/":
            self.working_dir = ROOT_INDEX
            return

        if name == "..":
            parent = self.folder(self.working_dir).parent
            if parent is not None:
                self.working_dir = parent
            return

        self.working_dir = self.find_or_create_subdirectory(name)

    def find_subdirectory(self, name: str) -> int | None:
        """Return the index of the working directory's child folder ``name``."""
        for child in self.folder(self.working_dir).children:
            node = self.nodes[child]
            if isinstance(node, FolderNode) and node.name == name:
                return child
        return None

    def find_or_create_subdirectory(self, name: str) -> int:
        found = self.find_subdirectory(name)
        if found is not None:
            return found
        return self._attach(FolderNode(name=name, parent=self.working_dir))

    def add_file(self, name: str, size: int) -> int:
        """Record a file in the working directory."""
        return self._attach(FileNode(name=name, size=size))

    def _attach(self, node: FileSystemNode) -> int:
        index = len(self.nodes)
        self.nodes.append(node)
        directory = self.folder(self.working_dir)
        directory.children.append(index)
        directory.size = None
        return index

    def folder_size(self, index: int = ROOT_INDEX) -> int:
        """Recursive folder size, cached on each folder once computed.

        Uncached folders below ``index`` are collected in pre-order and filled
        in reverse, so every child is cached before its parent is summed and
        nesting depth never touches the interpreter stack.
        """
        directory = self.folder(index)
        if directory.size is not None:
            return directory.size

        pending = [index]
        order: list[int] = []
        while pending:
            current = pending.pop()
            order.append(current)
            for child in self.folder(current).children:
                node = self.nodes[child]
                if isinstance(node, FolderNode) and node.size is None:
                    pending.append(child)

        for current in reversed(order):
            folder = self.folder(current)
            # Files carry a size; child folders were filled earlier in this loop.
            folder.size = sum(self.nodes[child].size for child in folder.children)

        return directory.size

    def walk(self) -> Iterator[int]:
        """Yield node indices depth-first, each node before its children."""
        stack = [ROOT_INDEX]
        while stack:
            index = stack.pop()
            yield index
            node = self.nodes[index]
            if isinstance(node, FolderNode):
                stack.extend(reversed(node.children))

    def folder_indices(self) -> Iterator[int]:
        for index in self.walk():
            if isinstance(self.nodes[index], FolderNode):
                yield index

    def path_of(self, index: int) -> str:
        """Absolute ``/``-separated path of a folder, used in log output."""
        parts: list[str] = []
        current: int | None = index
        while current is not None and current != ROOT_INDEX:
            directory = self.folder(current)
            parts.append(directory.name)
            current = directory.parent
        return "/" + "/".join(reversed(parts))
