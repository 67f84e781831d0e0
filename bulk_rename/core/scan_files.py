"""
scan_files.py - File Scanning Module

Provides non-recursive, glob-filtered file listing
"""

from pathlib import Path
from typing import List
import fnmatch
import logging

from .errors import DirectoryNotFound, ListingError
from .models_fs import FileItem

logger = logging.getLogger(__name__)


def list_files(directory: Path, pattern: str) -> List[FileItem]:
    """
    List files directly inside a directory that match a glob pattern

    Subdirectories are neither returned nor entered. The order of the
    result follows the filesystem and must not be relied upon.

    Args:
        directory: Directory to scan
        pattern: Shell-style pattern matched against filenames (e.g., *.jpg)

    Returns:
        Matched files, empty if nothing matches

    Raises:
        DirectoryNotFound: directory does not exist
        ListingError: directory could not be read
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFound(directory)

    results: List[FileItem] = []

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise ListingError(directory, e) from e

    for item in entries:
        # Only process files, not directories
        if not item.is_file():
            continue

        if not fnmatch.fnmatch(item.name, pattern):
            continue

        results.append(FileItem.from_path(item))

    logger.debug("Matched %d files with '%s' in %s", len(results), pattern, directory)
    return results

