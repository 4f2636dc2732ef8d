"""
Desktop applications built on the shared filesystem
"""
from .editor import CodeEditor, detect_language
from .file_manager import FileManager

__all__ = ['CodeEditor', 'FileManager', 'detect_language']
