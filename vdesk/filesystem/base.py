"""
Node model for the virtual desktop filesystem

A tree is a single root DirectoryNode that owns every other node through
ordered child lists. Nodes keep no parent references.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

SEPARATOR = '/'


class DirEntry(BaseModel):
    """Listing record returned by ls()"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    is_directory: bool = Field(alias='isDirectory')


class Node:
    """A file or directory in the tree"""
    is_directory = False

    def __init__(self, name: str):
        self.name = name

    def entry(self) -> DirEntry:
        return DirEntry(name=self.name, is_directory=self.is_directory)

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class FileNode(Node):
    """File node holding a text blob"""

    def __init__(self, name: str, content: str = ''):
        super().__init__(name)
        self.content = content


class DirectoryNode(Node):
    """Directory node owning an ordered list of children"""
    is_directory = True

    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[Node] = []

    def get_child(self, name: str) -> Optional[Node]:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, node: Node) -> None:
        # Callers check for duplicates before mutating
        self.children.append(node)

    def remove_child(self, node: Node) -> None:
        for index, child in enumerate(self.children):
            if child is node:
                del self.children[index]
                return
        raise ValueError(f"{node!r} is not a child of {self!r}")
