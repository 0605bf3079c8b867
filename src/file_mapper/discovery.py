"""Discovery of markdown files under a source directory."""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from .errors import FilesystemError

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ('md', 'markdown')


def is_candidate(path: Union[str, Path]) -> bool:
    """Check whether a path is a markdown file to sync.

    Directories are never candidates, whatever their name. Files qualify
    when their extension is exactly ``md`` or ``markdown``.

    Args:
        path: Path to check

    Returns:
        True if the path should be synced
    """
    path = Path(path)
    if path.is_dir():
        return False
    return path.suffix[1:] in MARKDOWN_EXTENSIONS


def discover_documents(source: Union[str, Path]) -> Iterator[Path]:
    """Walk source recursively and yield candidate markdown files.

    Directories and files are visited in sorted order so runs are
    reproducible. Entries that cannot be listed are skipped with a warning.

    Args:
        source: Root directory (or a single markdown file)

    Yields:
        Paths of candidate files

    Raises:
        FilesystemError: If source does not exist
    """
    root = Path(source)
    if not root.exists():
        raise FilesystemError(str(root), 'walk', 'Source path does not exist')

    if root.is_file():
        if is_candidate(root):
            yield root
        return

    def on_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable path {error.filename}: {error.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_candidate(path):
                yield path
