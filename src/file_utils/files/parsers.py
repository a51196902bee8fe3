"""
Line Parsers

Ready-made line parsing callbacks for FileManager.download_and_parse_file.
A parser receives the downloaded file's extension and one trimmed,
non-empty line; a falsy return value drops the line.
"""

import csv
from typing import List, Optional, Union


def parse_text_line(file_extension: str, line: str) -> str:
    """Return the line unchanged."""
    return line


def parse_csv_line(file_extension: str, line: str) -> Optional[Union[List[str], str]]:
    """
    Split a csv line into its field values.
    
    Fields are separated by commas and may be enclosed in double quotes.
    Lines of files that are not csv files are returned unchanged.
    
    Returns:
        The list of field values, or None when the line holds no values.
    """
    if file_extension.lower() != "csv":
        return parse_text_line(file_extension, line)
    
    fields = next(csv.reader([line], skipinitialspace=True), [])
    if not any(field.strip() for field in fields):
        return None
    return fields
