"""A small file tree whose nodes report their full path as a name

Each node knows its base name and parent directory. `get_full_name()`
walks up to the root and builds a `StringName` delimited by `/`, so
`RootNode` -> `Directory("usr")` -> `File("ls")` renders as `/usr/ls`.
"""

import logging
from enum import Enum
from typing import Optional, Set

from .contracts import require
from .escaping import mask
from .name import AbstractName, StringName


logger = logging.getLogger(__name__)

PATH_DELIMITER = "/"


class FileState(Enum):
    OPEN = 1
    CLOSED = 2
    DELETED = 3


class Node:
    """A named entry in a directory"""

    def __init__(self, base_name: str, parent: Optional["Directory"]):
        self._do_set_base_name(base_name)
        self._initialize(parent)

    def _initialize(self, parent: Optional["Directory"]) -> None:
        require(isinstance(parent, Directory), f"Parent node must be a directory, got {parent!r}")
        self._parent_node: Directory = parent  # type: ignore[assignment]
        self._parent_node.add_child_node(self)

    def move(self, to: "Directory") -> None:
        require(isinstance(to, Directory), f"Target must be a directory, got {to!r}")
        node = to
        while True:
            require(node is not self, f"Cannot move {self!r} into its own subtree")
            if node.get_parent_node() is node:
                break
            node = node.get_parent_node()
        self._parent_node.remove_child_node(self)
        to.add_child_node(self)
        self._parent_node = to
        logger.debug("Moved %r to %s", self._base_name, to.get_full_name().as_string())

    def get_full_name(self) -> AbstractName:
        """Full path of this node; a fresh name on every call"""
        result = self._parent_node.get_full_name()
        result.append(mask(self.get_base_name(), result.get_delimiter_character()))
        return result

    def get_base_name(self) -> str:
        return self._do_get_base_name()

    def _do_get_base_name(self) -> str:
        return self._base_name

    def rename(self, base_name: str) -> None:
        self._do_set_base_name(base_name)

    def _do_set_base_name(self, base_name: str) -> None:
        require(isinstance(base_name, str), f"Base name must be a string, got {base_name!r}")
        require(base_name != "", "Base name cannot be empty")
        self._base_name = base_name

    def get_parent_node(self) -> "Directory":
        return self._parent_node

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_name!r})"


class Directory(Node):

    def __init__(self, base_name: str, parent: Optional["Directory"]):
        self._child_nodes: Set[Node] = set()
        super().__init__(base_name, parent)

    def has_child_node(self, child: Node) -> bool:
        require(child is not None, "Child node cannot be None")
        return child in self._child_nodes

    def add_child_node(self, child: Node) -> None:
        require(isinstance(child, Node), f"Child must be a node, got {child!r}")
        self._child_nodes.add(child)

    def remove_child_node(self, child: Node) -> None:
        require(child is not None, "Child node cannot be None")
        require(child in self._child_nodes, f"{child!r} is not in {self!r}")
        self._child_nodes.remove(child)

    def get_child_nodes(self) -> Set[Node]:
        return set(self._child_nodes)


class RootNode(Directory):
    """Top of the tree: empty base name, its own parent"""

    def __init__(self) -> None:
        super().__init__("", None)

    def _initialize(self, parent: Optional[Directory]) -> None:
        self._parent_node = self

    def _do_set_base_name(self, base_name: str) -> None:
        require(base_name == "", "Root node base name must be empty")
        self._base_name = base_name

    def get_full_name(self) -> AbstractName:
        return StringName("", PATH_DELIMITER)

    def move(self, to: Directory) -> None:
        require(False, "Root node cannot be moved")


class File(Node):

    def __init__(self, base_name: str, parent: Directory):
        super().__init__(base_name, parent)
        self._state = FileState.CLOSED

    def open(self) -> None:
        require(self._state != FileState.DELETED, "Cannot open a deleted file")
        require(self._state != FileState.OPEN, "File is already open")
        self._state = FileState.OPEN

    def read(self, no_bytes: int) -> bytes:
        require(self._state == FileState.OPEN, f"File must be open to read, is {self._state.name}")
        require(isinstance(no_bytes, int) and no_bytes >= 0, "Number of bytes must be non-negative")
        return bytes(no_bytes)

    def close(self) -> None:
        require(self._state == FileState.OPEN, f"Cannot close a file that is {self._state.name}")
        self._state = FileState.CLOSED

    def delete(self) -> None:
        require(self._state != FileState.DELETED, "File is already deleted")
        self._state = FileState.DELETED

    def get_file_state(self) -> FileState:
        return self._state
