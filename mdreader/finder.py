"""Discovers markdown files under the configured directories.

Walks each root depth-first, pruning directories whose name matches one
of the ignore patterns, and pages the results for find_markdown_files.
"""

import logging
import os
import re
from typing import Iterator

from mdreader.config_reader import DEFAULT_PAGE_SIZE, Config

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"


def is_markdown(name: str) -> bool:
    return name.lower().endswith(MARKDOWN_EXTENSION)


class IgnoreFilter:
    """Decides whether a directory subtree is skipped during a walk.

    Each pattern is searched (re.search) in the directory's base name, so
    r"\\.git$" matches ".git" but not ".gitignore". Patterns that fail to
    compile are logged and skipped.
    """

    def __init__(self, patterns: list[str]):
        self.patterns: list[re.Pattern] = []
        for pattern in patterns:
            try:
                self.patterns.append(re.compile(pattern))
            except re.error as e:
                logger.warning("Invalid ignore pattern %r skipped: %s", pattern, e)

    def should_ignore(self, dir_name: str) -> bool:
        for regex in self.patterns:
            if regex.search(dir_name):
                return True
        return False


def iter_markdown_files(root: str, ignore_filter: IgnoreFilter) -> Iterator[str]:
    """Yield absolute paths of markdown files under root, depth-first.

    Ignored directories are pruned before os.walk descends into them.
    An error listing the root itself ends the walk with a warning; errors
    on nested entries only drop that entry.
    """

    def _on_error(err: OSError) -> None:
        if err.filename == root:
            logger.warning("Error walking directory %s: %s", root, err)
        else:
            logger.debug("Skipping unreadable entry %s: %s", err.filename, err)

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_error):
        kept = []
        for name in dirnames:
            if ignore_filter.should_ignore(name):
                logger.debug("Ignoring directory: %s", os.path.join(dirpath, name))
            else:
                kept.append(name)
        dirnames[:] = kept

        for name in filenames:
            if is_markdown(name):
                yield os.path.join(dirpath, name)


def resolve_root(directory: str) -> str | None:
    """Return the absolute form of a configured directory, or None if missing."""
    root = os.path.abspath(directory)
    if not os.path.exists(root):
        logger.warning("Directory does not exist: %s", root)
        return None
    return root


class MarkdownFinder:
    """Collects, filters and pages markdown files across configured roots."""

    def __init__(self, config: Config, ignore_filter: IgnoreFilter | None = None):
        self.config = config
        self.ignore_filter = ignore_filter or IgnoreFilter(config.ignore_dirs)

    def collect(self, root_dir: str) -> list[str]:
        """Return every markdown file under one root, in walk order."""
        root = resolve_root(root_dir)
        if root is None:
            return []
        return list(iter_markdown_files(root, self.ignore_filter))

    def collect_all(self) -> list[str]:
        """Concatenate collect() over the roots in configuration order."""
        files: list[str] = []
        for directory in self.config.directories:
            files.extend(self.collect(directory))
        return files

    def effective_page_size(self, page_size: int) -> int:
        """Out-of-range requests fall back to the default, not the maximum."""
        if page_size <= 0 or page_size > self.config.max_page_size:
            return DEFAULT_PAGE_SIZE
        return page_size

    def find(self, query: str = "", page_size: int = DEFAULT_PAGE_SIZE) -> list[str]:
        """Return up to one page of markdown paths whose name contains query.

        Matching is a case-insensitive substring test on the base name; an
        empty query matches everything. Results keep walk order and every
        call starts again from the first root.
        """
        files = self.collect_all()

        if query:
            needle = query.casefold()
            files = [f for f in files if needle in os.path.basename(f).casefold()]

        return files[: self.effective_page_size(page_size)]
