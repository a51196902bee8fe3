"""
File Manager Module

Manages local files and remote file downloads.
Handles reading, writing, copying, deleting, upload promotion,
download caching and file search within folder trees.
"""

import logging
import math
import os
import shutil
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TypeVar, Union
from urllib.parse import unquote_plus

from ..api import RemoteFileClient
from ..config import FileManagerConfig
from ..exceptions import FileIOError, ValidationError
from .folders import FolderLister
from .models import FileNameParts, UploadDescriptor, WriteMode
from .names import get_file_name_and_extension


logger = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = Union[str, Path]
LineParser = Callable[[str, str], Optional[T]]


def _path_in_folder(folder: PathLike, file_name: str) -> Path:
    """Join a file name onto a folder, keeping the result inside the folder."""
    return Path(folder) / file_name.lstrip("/\\")


class FileManager:
    """
    Manager for local and remote file operations.

    Holds an immutable FileManagerConfig. The remote client, name
    splitter and folder lister can be replaced by passing them in.
    """

    def __init__(
        self,
        settings: FileManagerConfig,
        remote_client: Optional[RemoteFileClient] = None,
        name_splitter: Optional[Callable[[str], FileNameParts]] = None,
        folder_lister: Optional[FolderLister] = None,
    ):
        """Initialize the file manager."""
        self.settings = settings
        self.remote_client = remote_client or RemoteFileClient()
        self.name_splitter = name_splitter or get_file_name_and_extension
        self.folder_lister = folder_lister or FolderLister()
        logger.info(f"FileManager initialized (upload folder: {settings.upload_folder})")

    # ------------------------------------------------------------------
    # Local file I/O
    # ------------------------------------------------------------------

    def read_local_file(self, file_path: PathLike) -> str:
        """
        Read the contents of a file on disk.

        Args:
            file_path: Path to the file.

        Returns:
            The file contents, or an empty string for an empty file.

        Raises:
            FileIOError: If the file could not be read.
        """
        path = Path(file_path)

        try:
            if path.stat().st_size == 0:
                logger.debug(f"Empty file: {path}")
                return ""
            with open(path, "r", encoding="utf-8", newline="") as f:
                contents = f.read()
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise FileIOError(
                f"File could not be read: {path}", path=path, os_error=e
            ) from e

        logger.debug(f"Read {len(contents)} characters from {path}")
        return contents

    def write_local_file(
        self,
        file_text: str,
        file_path: PathLike,
        file_mode: Union[str, WriteMode] = WriteMode.OVERWRITE,
    ) -> None:
        """
        Write text to a file on disk.

        Args:
            file_text: The text to write.
            file_path: Path to the file.
            file_mode: WriteMode.OVERWRITE ("w") or WriteMode.APPEND ("a").

        Raises:
            FileIOError: If the text could not be written.
        """
        path = Path(file_path)
        mode = WriteMode.parse(file_mode)

        try:
            with open(path, mode.value, encoding="utf-8", newline="") as f:
                written = f.write(file_text)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write {path}: {e}")
            raise FileIOError(
                f"Text could not be written to the file: {path}", path=path, os_error=e
            ) from e

        if file_text and not written:
            raise FileIOError(f"Text could not be written to the file: {path}", path=path)

        logger.debug(f"Wrote {written} characters to {path} (mode: {mode.name.lower()})")

    def copy_file(self, source_file: PathLike, target_file: PathLike) -> None:
        """
        Copy the source file over the target file.

        Raises:
            FileIOError: If the file could not be copied.
        """
        source, target = Path(source_file), Path(target_file)

        try:
            shutil.copyfile(source, target)
        except OSError as e:
            logger.error(f"Failed to copy {source} to {target}: {e}")
            raise FileIOError(
                f"Source file: {source} could not be copied to target file: {target}",
                path=source,
                target=target,
                os_error=e,
            ) from e

        logger.debug(f"Copied {source} to {target}")

    def delete_local_file(self, file_path: PathLike) -> None:
        """
        Delete a file from disk.

        Raises:
            FileIOError: If the file could not be deleted.
        """
        path = Path(file_path)

        try:
            path.unlink()
        except OSError as e:
            logger.error(f"Failed to delete {path}: {e}")
            raise FileIOError(
                f"File could not be deleted: {path}", path=path, os_error=e
            ) from e

        logger.info(f"Deleted: {path}")

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------

    def upload_file(self, upload: UploadDescriptor) -> Path:
        """
        Move an uploaded file into the upload folder.

        The name, size and extension are validated before anything is
        copied. The size limit is in Kb, rounded up.

        Args:
            upload: The staged upload.

        Returns:
            Path of the file in the upload folder.

        Raises:
            ValidationError: If the upload is missing, too large, of an
                unsupported type or was not staged by the upload intake.
            FileIOError: If the file could not be copied.
        """
        if not upload.name:
            raise ValidationError("No file to upload", value=upload.name)

        max_size = self.settings.max_allowed_file_size
        file_size = math.ceil(upload.size / 1024)
        if file_size > max_size:
            logger.warning(f"Rejected {upload.name}: {file_size} Kb exceeds {max_size} Kb")
            raise ValidationError(
                f"Size of file should be less than {max_size} Kb",
                value=file_size,
                limit=max_size,
            )

        allowed = self.settings.allowed_extensions
        _, dot, file_ext = upload.name.rpartition(".")
        file_ext = file_ext if dot else ""
        if not any(ext.lower() == file_ext.lower() for ext in allowed):
            logger.warning(f"Rejected {upload.name}: unsupported type {file_ext!r}")
            raise ValidationError(
                "The uploaded file is not a supported file type. "
                f"Only the following file types are supported: {','.join(allowed)}",
                value=file_ext,
                limit=allowed,
            )

        path = _path_in_folder(self.settings.upload_folder, upload.name)
        tmp_path = upload.tmp_path

        if not self._is_staged_upload(tmp_path):
            logger.warning(f"Rejected {upload.name}: {tmp_path} is not a staged upload")
            raise ValidationError(
                f"The file {tmp_path} was not staged by the upload intake",
                value=tmp_path,
                limit=self.settings.upload_staging_folder,
            )

        if tmp_path != path:
            try:
                shutil.copyfile(tmp_path, path)
            except OSError as e:
                logger.error(f"Failed to copy upload {tmp_path} to {path}: {e}")
                raise FileIOError(
                    f"Error while copying the uploaded file from: {tmp_path} to {path}",
                    path=tmp_path,
                    target=path,
                    os_error=e,
                ) from e

        logger.info(f"Uploaded {upload.name} ({file_size} Kb) to {path}")
        return path

    def _is_staged_upload(self, tmp_path: Path) -> bool:
        """Check that tmp_path is a file inside the staging folder, if one is set."""
        staging = self.settings.upload_staging_folder
        if staging is None:
            return True

        resolved = tmp_path.resolve()
        return resolved.is_file() and resolved.is_relative_to(staging.resolve())

    # ------------------------------------------------------------------
    # Remote files
    # ------------------------------------------------------------------

    def download_and_parse_file(
        self,
        file_url: str,
        local_dir: PathLike,
        line_parser: LineParser,
    ) -> List[T]:
        """
        Download a file, cache it locally and parse its lines.

        A local copy in local_dir is used instead of downloading when
        present. Lines are trimmed and parsed in order up to the first
        empty line. Lines the parser returns a falsy value for are
        left out of the result.

        Args:
            file_url: URL of the file.
            local_dir: Folder the file is cached in.
            line_parser: Called as line_parser(file_extension, line).

        Returns:
            The parsed lines.

        Raises:
            NetworkError: If the file could not be downloaded.
            FileIOError: If the local copy could not be read or written.
        """
        file_name, file_extension = self.name_splitter(file_url)
        file_name = unquote_plus(file_name)
        file_path = _path_in_folder(local_dir, file_name)

        if file_path.is_file():
            logger.debug(f"Using cached copy: {file_path}")
            file_contents = self.read_local_file(file_path)
        else:
            file_contents = self.remote_client.fetch_text(file_url)
            self.write_local_file(file_contents, file_path)
            logger.info(f"Cached {file_url} at {file_path}")

        data: List[T] = []
        for raw_line in file_contents.split("\n"):
            line = raw_line.strip()
            if not line:
                break
            parsed_line = line_parser(file_extension, line)
            if parsed_line:
                data.append(parsed_line)

        logger.debug(f"Parsed {len(data)} lines from {file_path}")
        return data

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_file(self, search_folders: Iterable[PathLike], file_name: str) -> str:
        """
        Search folders for a file.

        Folders are searched in order and the first file whose path
        contains "/<file_name>" is returned.

        Args:
            search_folders: Folders to search, highest priority first.
            file_name: Name, or trailing part of the path, of the file.

        Returns:
            Absolute path of the file, or an empty string if not found.
        """
        needle = os.sep + file_name.lstrip(os.sep)

        for folder in search_folders:
            folder_contents = self.folder_lister.list_contents(
                folder, -1, "", "", True
            )
            for item_path in folder_contents:
                if item_path.is_dir():
                    continue
                if needle in str(item_path):
                    logger.debug(f"Found {file_name} at {item_path}")
                    return str(item_path)

        logger.debug(f"{file_name} not found")
        return ""
