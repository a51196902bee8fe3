"""
File Management Module

Provides local file operations, upload promotion, cached remote
downloads and file search.
"""

from .folders import FolderLister
from .manager import FileManager
from .models import FileNameParts, UploadDescriptor, WriteMode
from .names import get_file_name_and_extension
from .parsers import parse_csv_line, parse_text_line

__all__ = [
    "FileManager",
    "FolderLister",
    "FileNameParts",
    "UploadDescriptor",
    "WriteMode",
    "get_file_name_and_extension",
    "parse_csv_line",
    "parse_text_line",
]
