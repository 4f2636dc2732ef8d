class VDeskError(Exception):
    """Base exception for the virtual desktop"""
    pass


class ConfigError(VDeskError):
    """Raised when the desktop configuration cannot be loaded"""
    pass


class FileSystemError(VDeskError):
    """Base exception for filesystem operations"""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class FileNotFound(FileSystemError):
    """Raised when a path segment does not match any node"""
    pass


class NotADirectory(FileSystemError):
    """Raised when path is not a directory"""
    pass


class IsADirectory(FileSystemError):
    """Raised when path is a directory but file operation is attempted"""
    pass


class AlreadyExists(FileSystemError):
    """Raised when a sibling with the same name already exists"""
    pass


class InvalidOperation(FileSystemError):
    """Raised for root removal, cyclic moves and re-entrant calls"""
    pass


class InvalidPath(InvalidOperation):
    """Raised when a path or node name is not legal"""
    pass
