"""
Desktop session: the single owner of the virtual filesystem

Applications never build their own tree. They receive the session's
VirtualFileSystem, which exposes operations only, never the nodes.
"""
import logging
from typing import Optional

from .apps.editor import CodeEditor
from .apps.file_manager import FileManager
from .config import DesktopConfig, load_config
from .filesystem import VirtualFileSystem, format_path, makedirs, split_path
from .filesystem.base import SEPARATOR

logger = logging.getLogger('vdesk.session')

_session = None


class DesktopSession:
    """Holds the filesystem for the lifetime of a desktop session"""

    def __init__(self, config: Optional[DesktopConfig] = None):
        self.config = config or DesktopConfig()
        self._filesystem = VirtualFileSystem()
        self._bootstrap()

    @property
    def filesystem(self) -> VirtualFileSystem:
        return self._filesystem

    def _bootstrap(self):
        """Create the configured workspace directories and seed files"""
        for path in self.config.workspace_dirs:
            makedirs(self._filesystem, path)
            logger.debug(f"Workspace directory ready: {path}")

        for path, content in self.config.seed_files.items():
            segments = split_path(path)
            makedirs(self._filesystem, format_path(segments[:-1]))
            if not self._filesystem.exists(path):
                self._filesystem.touch(path)
            self._filesystem.update_file(path, content)
            logger.debug(f"Seeded file: {path}")

        logger.info(f"Desktop session ready ({len(self.config.workspace_dirs)} workspace directories)")

    def editor(self, workspace: Optional[str] = None) -> CodeEditor:
        return CodeEditor(self._filesystem, workspace or self.config.editor_workspace)

    def file_manager(self, path: str = SEPARATOR) -> FileManager:
        return FileManager(self._filesystem, path)


def get_session() -> DesktopSession:
    """Return the process-wide desktop session, creating it on first use"""
    global _session
    if _session is None:
        _session = DesktopSession(load_config())
    return _session


def reset_session() -> None:
    """Discard the process-wide session; the next get_session() starts fresh"""
    global _session
    _session = None
