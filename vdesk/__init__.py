"""
vdesk - Virtual Desktop

An in-memory hierarchical file system shared by the desktop's code editor
and file manager, with a shell for working on it interactively.

Example Usage:

    from vdesk import get_session

    fs = get_session().filesystem
    fs.mkdir('/proj')
    fs.touch('/proj/a.txt')
    fs.update_file('/proj/a.txt', 'hello')
    fs.search('/proj', 'ell')   # ['/proj/a.txt']
"""

__version__ = "1.0.0"

from .exceptions import (
    VDeskError,
    ConfigError,
    FileSystemError,
    FileNotFound,
    NotADirectory,
    IsADirectory,
    AlreadyExists,
    InvalidOperation,
    InvalidPath
)
from .filesystem import VirtualFileSystem, DirEntry
from .config import DesktopConfig, load_config
from .session import DesktopSession, get_session, reset_session

__all__ = [
    'VDeskError', 'ConfigError', 'FileSystemError', 'FileNotFound',
    'NotADirectory', 'IsADirectory', 'AlreadyExists', 'InvalidOperation',
    'InvalidPath',
    'VirtualFileSystem', 'DirEntry',
    'DesktopConfig', 'load_config',
    'DesktopSession', 'get_session', 'reset_session',
]
