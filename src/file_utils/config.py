"""
Configuration for the File Utilities package.

This module centralizes the tunable parameters of the package. The
FileManager settings are not read from the module-level instance: they
are built by the caller and injected into each FileManager.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class FileManagerConfig:
    """Upload folder, permitted extensions and size limit of a FileManager."""
    upload_folder: Path
    allowed_extensions: Tuple[str, ...] = ()
    max_allowed_file_size: int = 0  # Kb
    
    # Folder the host's upload intake stages temp files in.
    # None means descriptors are trusted as given.
    upload_staging_folder: Optional[Path] = None
    
    def __post_init__(self):
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "upload_folder", Path(self.upload_folder))
        object.__setattr__(
            self, "allowed_extensions", tuple(self.allowed_extensions)
        )
        if self.upload_staging_folder is not None:
            object.__setattr__(
                self, "upload_staging_folder", Path(self.upload_staging_folder)
            )
    
    @classmethod
    def from_parameters(cls, parameters: dict) -> "FileManagerConfig":
        """Build a config from a plain parameters dict."""
        extensions: Sequence[str] = parameters.get("allowed_extensions") or ()
        return cls(
            upload_folder=Path(parameters.get("upload_folder", "")),
            allowed_extensions=tuple(extensions),
            max_allowed_file_size=int(parameters.get("max_allowed_file_size", 0)),
            upload_staging_folder=parameters.get("upload_staging_folder"),
        )


@dataclass
class NetworkConfig:
    """Remote file download configuration."""
    timeout_seconds: float = 10.0
    follow_redirects: bool = True
    user_agent: str = "file-utils/1.0"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "file_utils.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    network: NetworkConfig = field(default_factory=NetworkConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
