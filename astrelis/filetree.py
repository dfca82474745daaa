"""A snapshot of a directory tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .file import File, PathLike


@dataclass(eq=False)
class Node:
    """One entry of the tree with its children, if it is a directory."""

    file: File
    nodes: List["Node"] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.file == other.file

    def __hash__(self) -> int:
        return hash(self.file)

    def walk(self) -> Iterator["Node"]:
        """This node and all its descendants, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.nodes))


class FileTree:
    """The directory tree below a root directory, read once at construction."""

    def __init__(self, root: PathLike) -> None:
        self._root = Node(File(root))
        pending = [self._root]
        while pending:
            node = pending.pop()
            for child in node.file.list_files():
                child_node = Node(child)
                node.nodes.append(child_node)
                if child.is_directory():
                    pending.append(child_node)

    @property
    def root(self) -> Node:
        return self._root

    def files(self) -> Iterator[File]:
        """Every entry that is not a directory, depth first."""
        return (node.file for node in self._root.walk() if not node.file.is_directory())

    def find(self, path: PathLike) -> Optional[Node]:
        """The node for path, or None if it is not in the tree."""
        target = File(path)
        return next((node for node in self._root.walk() if node.file == target), None)