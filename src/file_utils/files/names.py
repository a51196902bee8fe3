"""
File Name Helpers

Splits URLs and paths into a base name and an extension.
"""

import posixpath
from urllib.parse import urlsplit

from .models import FileNameParts


def get_file_name_and_extension(url_or_path: str) -> FileNameParts:
    """
    Split a URL or path into its file name and extension.
    
    The query string and fragment of a URL are ignored. The file name
    keeps its extension; the extension is the text after the last dot
    of the file name, or an empty string when it has none.
    
    Args:
        url_or_path: A URL such as "https://host/data/report.csv?x=1"
                     or a local path.
    
    Returns:
        FileNameParts, e.g. ("report.csv", "csv").
    """
    parts = urlsplit(url_or_path)
    if parts.scheme and parts.netloc:
        path = parts.path
    else:
        path = url_or_path.replace("\\", "/")
    
    file_name = posixpath.basename(path.rstrip("/"))
    _, dot, extension = file_name.rpartition(".")
    
    return FileNameParts(file_name, extension if dot else "")
