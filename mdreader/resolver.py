"""Maps a bare markdown filename to one file inside the configured directories."""

import logging
import os

from mdreader.config_reader import Config
from mdreader.errors import InvalidInputError, NotFoundError
from mdreader.finder import MARKDOWN_EXTENSION, IgnoreFilter, is_markdown, iter_markdown_files, resolve_root

logger = logging.getLogger(__name__)

_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def check_filename(filename: str) -> None:
    """Reject names that could escape the configured directories.

    Runs before any filesystem access. Raises InvalidInputError for an
    empty name, a ".." sequence or any path separator.
    """
    if not filename:
        raise InvalidInputError("filename is required")
    if ".." in filename:
        raise InvalidInputError("invalid file path: directory traversal not allowed")
    if any(sep in filename for sep in _SEPARATORS):
        raise InvalidInputError(
            "filename looks like a path, it should be just the name of file"
        )


def normalize_filename(filename: str) -> str:
    """Append .md unless the name already carries it (any case)."""
    if is_markdown(filename):
        return filename
    return filename + MARKDOWN_EXTENSION


class NameResolver:
    """Finds the first file with a given name, searching roots in order."""

    def __init__(self, config: Config, ignore_filter: IgnoreFilter | None = None):
        self.config = config
        self.ignore_filter = ignore_filter or IgnoreFilter(config.ignore_dirs)

    def find_in(self, root_dir: str, filename: str) -> str | None:
        """Return the first match under one root, abandoning the walk there."""
        root = resolve_root(root_dir)
        if root is None:
            return None
        wanted = filename.lower()
        for path in iter_markdown_files(root, self.ignore_filter):
            if os.path.basename(path).lower() == wanted:
                return path
        return None

    def resolve(self, filename: str) -> str:
        """Return the absolute path of the first matching file.

        Directories are searched in configuration order and the search
        stops at the first directory with a match. Raises InvalidInputError
        for unsafe names and NotFoundError when nothing matches.
        """
        check_filename(filename)
        target = normalize_filename(filename)

        for directory in self.config.directories:
            found = self.find_in(directory, target)
            if found:
                logger.debug("Resolved %s to %s", filename, found)
                return found

        raise NotFoundError(f"file not found: {filename}")
