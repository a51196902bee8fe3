"""
File Data Models

Value types exchanged with the FileManager.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional, Union


class WriteMode(str, Enum):
    """Mode a local file is opened in for writing."""
    OVERWRITE = "w"
    APPEND = "a"
    
    @classmethod
    def parse(cls, mode: Union[str, "WriteMode"]) -> "WriteMode":
        """Accept a WriteMode, an open() mode letter or the mode's name."""
        if isinstance(mode, cls):
            return mode
        lowered = str(mode).lower()
        for member in cls:
            if lowered in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unsupported write mode: {mode!r}")


class FileNameParts(NamedTuple):
    """Base name and extension of a URL or path."""
    file_name: str
    file_extension: str


@dataclass(frozen=True)
class UploadDescriptor:
    """A file staged by the host's upload intake, awaiting promotion."""
    name: Optional[str]
    size: int  # bytes
    tmp_path: Path
    
    def __post_init__(self):
        object.__setattr__(self, "tmp_path", Path(self.tmp_path))
    
    @classmethod
    def from_file_data(cls, file_data: dict) -> "UploadDescriptor":
        """Build a descriptor from a dict with name, size and tmp_name keys."""
        return cls(
            name=file_data.get("name"),
            size=int(file_data.get("size", 0)),
            tmp_path=Path(file_data.get("tmp_name") or file_data.get("tmp_path", "")),
        )
