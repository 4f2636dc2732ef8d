"""
Path handling for the virtual desktop filesystem

Paths are absolute and '/'-separated. Empty segments and '.' are dropped;
'..' is rejected rather than interpreted.
"""
from typing import List, Tuple

from ..exceptions import (
    FileNotFound, NotADirectory, InvalidOperation, InvalidPath
)
from .base import SEPARATOR, Node, DirectoryNode


def split_path(path: str) -> List[str]:
    """Split a path into its normalized segments ([] for the root)"""
    if not isinstance(path, str):
        raise TypeError(f"path must be str, not {type(path).__name__}")

    segments = []
    for segment in path.split(SEPARATOR):
        if not segment or segment == '.':
            continue
        if segment == '..':
            raise InvalidPath(f"Parent traversal is not supported: {path}", path)
        segments.append(segment)
    return segments


def format_path(segments: List[str]) -> str:
    return SEPARATOR + SEPARATOR.join(segments)


def normalize_path(path: str) -> str:
    return format_path(split_path(path))


def join_path(parent: str, name: str) -> str:
    return format_path(split_path(parent) + [name])


def validate_name(name: str, path: str = None) -> str:
    """Check that name can be used for a node"""
    if not name:
        raise InvalidPath("Name must not be empty", path)
    if SEPARATOR in name:
        raise InvalidPath(f"Name must not contain '{SEPARATOR}': {name}", path)
    if name in ('.', '..'):
        raise InvalidPath(f"Reserved name: {name}", path)
    return name


def _walk(root: DirectoryNode, segments: List[str], path: str) -> List[Node]:
    chain = [root]
    node = root
    for depth, segment in enumerate(segments):
        if not node.is_directory:
            parent = format_path(segments[:depth])
            raise NotADirectory(f"Not a directory: {parent}", path)
        child = node.get_child(segment)
        if child is None:
            raise FileNotFound(f"No such file or directory: {path}", path)
        chain.append(child)
        node = child
    return chain


def resolve_chain(root: DirectoryNode, path: str) -> List[Node]:
    """Resolve path to the list of nodes from the root down to its target"""
    return _walk(root, split_path(path), path)


def resolve(root: DirectoryNode, path: str) -> Node:
    """Resolve path to its node"""
    return resolve_chain(root, path)[-1]


def resolve_parent_chain(root: DirectoryNode, path: str) -> Tuple[List[Node], str]:
    """Resolve the ancestry of path's final segment, and that segment"""
    segments = split_path(path)
    if not segments:
        raise InvalidOperation("The root has no parent", path)

    name = validate_name(segments[-1], path)
    chain = _walk(root, segments[:-1], path)
    if not chain[-1].is_directory:
        raise NotADirectory(f"Not a directory: {format_path(segments[:-1])}", path)
    return chain, name


def resolve_parent(root: DirectoryNode, path: str) -> Tuple[DirectoryNode, str]:
    """Resolve the directory that holds (or would hold) path's final segment"""
    chain, name = resolve_parent_chain(root, path)
    return chain[-1], name
