"""
Exception Classes

Every error raised by the package derives from FileUtilsError and
carries the values it was raised for as attributes.
"""

from pathlib import Path
from typing import Any, Optional, Union

PathLike = Union[str, Path]


class FileUtilsError(Exception):
    """Base exception for File Utilities operations."""


class FileIOError(FileUtilsError):
    """Raised when a local file cannot be opened, read, written, copied or deleted."""
    
    def __init__(
        self,
        message: str,
        path: PathLike,
        target: Optional[PathLike] = None,
        os_error: Optional[Union[OSError, UnicodeError]] = None,
    ):
        super().__init__(message)
        self.path = Path(path)
        self.target = Path(target) if target is not None else None
        self.os_error = os_error


class ValidationError(FileUtilsError):
    """Raised when an upload is rejected."""
    
    def __init__(self, message: str, value: Any = None, limit: Any = None):
        super().__init__(message)
        self.value = value
        self.limit = limit


class NetworkError(FileUtilsError):
    """Raised when a remote file cannot be fetched."""
    
    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
