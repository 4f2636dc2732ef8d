"""
In-memory virtual filesystem shared by the desktop applications

Every call is one synchronous transaction: resolve, validate, mutate,
return. All checks run before the first mutation, so a failing call leaves
the tree untouched.
"""
from contextlib import contextmanager
from typing import Callable, Iterator, List, Tuple

from ..exceptions import (
    FileNotFound, NotADirectory, IsADirectory, AlreadyExists,
    InvalidOperation
)
from .base import SEPARATOR, DirEntry, DirectoryNode, FileNode, Node
from .paths import (
    format_path, join_path, normalize_path, resolve, resolve_chain,
    resolve_parent, resolve_parent_chain, split_path, validate_name
)

Listener = Callable[[int], None]


class VirtualFileSystem:
    """Path-addressed file tree with a change version counter"""

    def __init__(self):
        self._root = DirectoryNode(SEPARATOR)
        self._version = 0
        self._listeners: List[Listener] = []
        self._busy = False

    @property
    def version(self) -> int:
        """Bumped once after every successful mutation"""
        return self._version

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener(version) after each mutation; returns an unsubscriber"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def _operation(self, name: str):
        if self._busy:
            raise InvalidOperation(f"{name}: filesystem is busy with another operation")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _commit(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            listener(self._version)

    def _directory(self, path: str) -> DirectoryNode:
        node = resolve(self._root, path)
        if not node.is_directory:
            raise NotADirectory(f"Not a directory: {path}", path)
        return node

    def _file(self, path: str) -> FileNode:
        node = resolve(self._root, path)
        if node.is_directory:
            raise IsADirectory(f"Is a directory: {path}", path)
        return node

    # Queries

    def exists(self, path: str) -> bool:
        with self._operation('exists'):
            try:
                resolve(self._root, path)
            except (FileNotFound, NotADirectory):
                return False
            return True

    def is_dir(self, path: str) -> bool:
        with self._operation('is_dir'):
            return resolve(self._root, path).is_directory

    def ls(self, path: str = SEPARATOR) -> List[DirEntry]:
        """List the immediate children of a directory, in insertion order"""
        with self._operation('ls'):
            return [child.entry() for child in self._directory(path).children]

    def cat(self, path: str) -> str:
        with self._operation('cat'):
            return self._file(path).content

    def walk(self, path: str = SEPARATOR) -> List[Tuple[str, DirEntry]]:
        """Every descendant of a directory as (path, entry), depth-first pre-order"""
        with self._operation('walk'):
            start = self._directory(path)
            descendants = self._descendants(start, normalize_path(path))
            return [(node_path, node.entry()) for node_path, node in descendants]

    def search(self, path: str, query: str) -> List[str]:
        """
        Paths under a directory whose name contains query (ignoring case)
        or, for files, whose content contains query.
        """
        with self._operation('search'):
            start = self._directory(path)
            needle = query.lower()
            matches = []
            for node_path, node in self._descendants(start, normalize_path(path)):
                if needle in node.name.lower():
                    matches.append(node_path)
                elif not node.is_directory and query in node.content:
                    matches.append(node_path)
            return matches

    def _descendants(self, directory: DirectoryNode, base: str) -> Iterator[Tuple[str, Node]]:
        for child in directory.children:
            child_path = join_path(base, child.name)
            yield child_path, child
            if child.is_directory:
                yield from self._descendants(child, child_path)

    # Mutations

    def mkdir(self, path: str) -> None:
        self._create(path, DirectoryNode, 'mkdir')

    def touch(self, path: str) -> None:
        self._create(path, FileNode, 'touch')

    def _create(self, path: str, node_type: type, operation: str) -> None:
        with self._operation(operation):
            parent, name = resolve_parent(self._root, path)
            if parent.get_child(name) is not None:
                raise AlreadyExists(f"File exists: {path}", path)
            parent.add_child(node_type(name))
        self._commit()

    def update_file(self, path: str, content: str) -> None:
        """Replace a file's content"""
        if not isinstance(content, str):
            raise TypeError(f"content must be str, not {type(content).__name__}")
        with self._operation('update_file'):
            self._file(path).content = content
        self._commit()

    updateFile = update_file

    def rm(self, path: str) -> None:
        """Remove a file or a whole directory subtree"""
        with self._operation('rm'):
            chain = resolve_chain(self._root, path)
            if len(chain) == 1:
                raise InvalidOperation("Cannot remove the root directory", path)
            chain[-2].remove_child(chain[-1])
        self._commit()

    def mv(self, src: str, dst: str) -> None:
        """Rename and/or re-parent the node at src so it lives at dst"""
        with self._operation('mv'):
            src_chain = resolve_chain(self._root, src)
            node = src_chain[-1]
            if len(src_chain) == 1:
                raise InvalidOperation("Cannot move the root directory", src)
            src_parent = src_chain[-2]

            dst_chain, name = resolve_parent_chain(self._root, dst)
            dst_parent = dst_chain[-1]

            if dst_parent is src_parent and name == node.name:
                raise InvalidOperation(f"Source and destination are the same: {src}", dst)
            if any(ancestor is node for ancestor in dst_chain):
                raise InvalidOperation(f"Cannot move {src} into itself: {dst}", dst)
            if dst_parent.get_child(name) is not None:
                raise AlreadyExists(f"File exists: {dst}", dst)

            if dst_parent is src_parent:
                node.name = name
            else:
                src_parent.remove_child(node)
                node.name = name
                dst_parent.add_child(node)
        self._commit()

    def rename(self, path: str, new_name: str) -> None:
        """Rename a node within its directory"""
        validate_name(new_name, path)
        self.mv(path, join_path(format_path(split_path(path)[:-1]), new_name))


def makedirs(fs: VirtualFileSystem, path: str) -> None:
    """Create path and any missing parents; existing directories are kept"""
    current = []
    for segment in split_path(path):
        current.append(segment)
        target = format_path(current)
        if not fs.exists(target):
            fs.mkdir(target)
