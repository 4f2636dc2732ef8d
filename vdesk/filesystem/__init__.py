"""
Virtual desktop filesystem
"""
from ..exceptions import (
    FileSystemError, FileNotFound, NotADirectory, IsADirectory,
    AlreadyExists, InvalidOperation, InvalidPath
)
from .base import SEPARATOR, DirEntry, Node, FileNode, DirectoryNode
from .paths import format_path, join_path, normalize_path, split_path
from .vfs import VirtualFileSystem, makedirs

__all__ = [
    'FileSystemError', 'FileNotFound', 'NotADirectory', 'IsADirectory',
    'AlreadyExists', 'InvalidOperation', 'InvalidPath',
    'SEPARATOR', 'DirEntry', 'Node', 'FileNode', 'DirectoryNode',
    'format_path', 'join_path', 'normalize_path', 'split_path',
    'VirtualFileSystem', 'makedirs',
]
