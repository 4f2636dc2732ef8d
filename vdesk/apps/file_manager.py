"""
File manager model over the shared filesystem
"""
import logging
from typing import List, Tuple

from ..exceptions import NotADirectory
from ..filesystem import (
    SEPARATOR, DirEntry, VirtualFileSystem, format_path, join_path,
    normalize_path, split_path
)
from ..filesystem.paths import validate_name

logger = logging.getLogger('vdesk.apps.file_manager')


class FileManager:
    """Browses one directory at a time"""

    def __init__(self, fs: VirtualFileSystem, path: str = SEPARATOR):
        self.fs = fs
        self.cwd = SEPARATOR
        self._seen_version = None
        self.go(path)

    def _path(self, name: str) -> str:
        return join_path(self.cwd, validate_name(name))

    def go(self, path: str) -> str:
        path = normalize_path(path)
        if not self.fs.is_dir(path):
            raise NotADirectory(f"Not a directory: {path}", path)
        self.cwd = path
        self._seen_version = None
        return self.cwd

    def enter(self, name: str) -> str:
        return self.go(self._path(name))

    def up(self) -> str:
        return self.go(format_path(split_path(self.cwd)[:-1]))

    def breadcrumbs(self) -> List[Tuple[str, str]]:
        """(label, path) pairs from the root to cwd"""
        crumbs = [(SEPARATOR, SEPARATOR)]
        segments = split_path(self.cwd)
        for depth, segment in enumerate(segments, 1):
            crumbs.append((segment, format_path(segments[:depth])))
        return crumbs

    @property
    def refresh_needed(self) -> bool:
        return self._seen_version != self.fs.version

    def listing(self) -> List[DirEntry]:
        """Entries of cwd for display: directories first, then by name"""
        entries = self.fs.ls(self.cwd)
        self._seen_version = self.fs.version
        return sorted(entries, key=lambda e: (not e.is_directory, e.name.lower(), e.name))

    def create_folder(self, name: str) -> None:
        self.fs.mkdir(self._path(name))
        logger.debug(f"Created folder {self._path(name)}")

    def create_file(self, name: str, content: str = '') -> None:
        path = self._path(name)
        self.fs.touch(path)
        if content:
            self.fs.update_file(path, content)
        logger.debug(f"Created file {path}")

    def read(self, name: str) -> str:
        return self.fs.cat(self._path(name))

    def write(self, name: str, content: str) -> None:
        self.fs.update_file(self._path(name), content)

    def delete(self, name: str) -> None:
        self.fs.rm(self._path(name))
        logger.debug(f"Deleted {self._path(name)}")

    def rename(self, name: str, new_name: str) -> None:
        self.fs.rename(self._path(name), validate_name(new_name))

    def move(self, name: str, destination: str) -> None:
        """Move an entry of cwd to an absolute destination path"""
        self.fs.mv(self._path(name), destination)
