"""
Code editor model

Works inside a workspace directory of the shared filesystem. The editor owns
the unsaved buffer; the filesystem only sees content when save() is called.
"""
import logging
from typing import List, Optional

from ..exceptions import InvalidOperation
from ..filesystem import DirEntry, VirtualFileSystem, join_path, makedirs, normalize_path
from ..filesystem.paths import validate_name

logger = logging.getLogger('vdesk.apps.editor')

LANGUAGES = {
    'js': 'javascript',
    'ts': 'typescript',
    'py': 'python',
    'html': 'html',
    'css': 'css',
}


def detect_language(filename: str) -> str:
    """Editor language for a file name, by extension"""
    extension = filename.split('.')[-1]
    return LANGUAGES.get(extension, 'plaintext')


class CodeEditor:
    """Single-buffer editor bound to a workspace directory"""

    def __init__(self, fs: VirtualFileSystem, workspace: str = '/vscode'):
        self.fs = fs
        self.current_path = normalize_path(workspace)
        makedirs(self.fs, self.current_path)

        self.current_file: Optional[str] = None
        self.buffer = ''
        self.language = 'plaintext'
        self.dirty = False
        self._seen_version = self.fs.version

    def _path(self, name: str) -> str:
        return join_path(self.current_path, validate_name(name))

    @property
    def stale(self) -> bool:
        """True when the filesystem changed since the editor last read it"""
        return self.fs.version != self._seen_version

    def files(self, subdir: Optional[str] = None) -> List[DirEntry]:
        """Entries of the workspace, or of one of its subdirectories"""
        path = join_path(self.current_path, subdir) if subdir else self.current_path
        entries = self.fs.ls(path)
        self._seen_version = self.fs.version
        return entries

    def open(self, name: str) -> str:
        """Load a file of the current directory into the buffer"""
        content = self.fs.cat(self._path(name))
        self.current_file = name
        self.buffer = content
        self.language = detect_language(name)
        self.dirty = False
        self._seen_version = self.fs.version
        logger.debug(f"Opened {name} as {self.language}")
        return content

    def edit(self, text: str) -> None:
        if self.current_file is None:
            raise InvalidOperation("No file is open")
        self.buffer = text
        self.dirty = True

    def save(self) -> None:
        if self.current_file is None:
            raise InvalidOperation("No file is open")
        self.fs.update_file(self._path(self.current_file), self.buffer)
        self.dirty = False
        self._seen_version = self.fs.version
        logger.info(f"Saved {self.current_file}")

    def close(self) -> None:
        self.current_file = None
        self.buffer = ''
        self.language = 'plaintext'
        self.dirty = False

    def new_file(self, name: str) -> None:
        self.fs.touch(self._path(name))

    def new_folder(self, name: str) -> None:
        self.fs.mkdir(self._path(name))

    def rename(self, name: str, new_name: str) -> None:
        self.fs.mv(self._path(name), self._path(new_name))
        if self.current_file == name:
            self.current_file = new_name
            self.language = detect_language(new_name)
        logger.debug(f"Renamed {name} to {new_name}")

    def delete(self, name: str) -> None:
        self.fs.rm(self._path(name))
        if self.current_file == name:
            self.close()
        logger.debug(f"Deleted {name}")

    def search(self, query: str) -> List[str]:
        return self.fs.search(self.current_path, query)
