"""
Folder Listing Module

Recursive listing of a folder's contents.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from ..exceptions import FileIOError


logger = logging.getLogger(__name__)


class FolderLister:
    """
    Lists the files and folders under a root folder.
    
    The listing is depth-first: the entries of each folder are sorted
    by name and a folder is listed immediately before its contents.
    """
    
    def list_contents(
        self,
        root: Union[str, Path],
        depth: int = -1,
        name_filter: str = "",
        ext_filter: str = "",
        include_dirs: bool = False,
    ) -> List[Path]:
        """
        List the contents of a folder.
        
        Args:
            root: Folder to list.
            depth: Number of levels to descend. Any negative value lists the
                   whole tree, 1 lists only the direct children and 0
                   lists nothing.
            name_filter: If set, only files whose name contains it are kept.
            ext_filter: If set, only files with this extension are kept.
            include_dirs: Whether folders are included in the result.
        
        Returns:
            Absolute paths of the matching entries.
        
        Raises:
            FileIOError: If the root folder cannot be read.
        """
        root_path = Path(root).absolute()
        if not root_path.is_dir():
            raise FileIOError(f"Folder not found: {root_path}", path=root_path)
        
        if depth == 0:
            return []
        
        contents: List[Path] = []
        self._walk(
            root_path, depth, name_filter, ext_filter.lstrip(".").lower(),
            include_dirs, contents
        )
        logger.debug(f"Listed {len(contents)} entries under {root_path}")
        return contents
    
    def _walk(
        self,
        folder: Path,
        depth: int,
        name_filter: str,
        ext_filter: str,
        include_dirs: bool,
        contents: List[Path],
    ) -> None:
        try:
            with os.scandir(folder) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise FileIOError(
                f"Folder could not be read: {folder}", path=folder, os_error=e
            ) from e
        
        for entry in entries:
            entry_path = Path(entry.path)
            
            if entry.is_dir():
                if include_dirs:
                    contents.append(entry_path)
                if depth != 1 and not entry.is_symlink():
                    self._walk(
                        entry_path, depth - 1 if depth > 0 else depth,
                        name_filter, ext_filter, include_dirs, contents
                    )
                continue
            
            if name_filter and name_filter not in entry.name:
                continue
            if ext_filter and entry_path.suffix.lstrip(".").lower() != ext_filter:
                continue
            contents.append(entry_path)
