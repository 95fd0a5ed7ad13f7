"""MCP tools for discovering markdown files."""

import json
import logging
import os
import time

from mdreader.config_reader import DEFAULT_PAGE_SIZE
from mdreader.finder import MarkdownFinder

logger = logging.getLogger(__name__)


async def find_markdown_files(
    finder: MarkdownFinder, query: str = "", page_size: int = DEFAULT_PAGE_SIZE
) -> str:
    """List markdown files whose name contains query, one page at a time.

    Args:
        finder: Finder bound to the server's configuration.
        query: Case-insensitive substring of the filename. Empty lists all.
        page_size: Maximum number of results. Values outside
                   1..max_page_size fall back to 50.

    Returns a JSON object with "files" (each carrying only "name") and
    "count". Full paths are never included.
    """
    start = time.perf_counter()
    logger.debug("find_markdown_files called with query=%r, page_size=%d", query, page_size)

    files = finder.find(query, page_size)
    result = {
        "files": [{"name": os.path.basename(f)} for f in files],
        "count": len(files),
    }

    logger.debug(
        "find_markdown_files completed in %.1fms, found %d files",
        (time.perf_counter() - start) * 1000,
        len(files),
    )
    return json.dumps(result, indent=2)
