"""
File Utilities

Local file management, upload handling, cached remote downloads
and file search.
"""

from .config import FileManagerConfig
from .exceptions import FileIOError, FileUtilsError, NetworkError, ValidationError
from .files import FileManager, UploadDescriptor, WriteMode

__all__ = [
    "FileManager",
    "FileManagerConfig",
    "UploadDescriptor",
    "WriteMode",
    "FileUtilsError",
    "FileIOError",
    "ValidationError",
    "NetworkError",
]
