"""MCP tools for reading a markdown file by name."""

import logging
import os
import time

from mdreader.errors import InvalidInputError, MarkdownReaderError
from mdreader.finder import is_markdown
from mdreader.resolver import NameResolver, check_filename

logger = logging.getLogger(__name__)


async def read_markdown_file(resolver: NameResolver, filename: str) -> str:
    """Return the full content of a markdown file.

    Args:
        resolver: Resolver bound to the server's configuration.
        filename: Bare filename, e.g. "README.md" or "README". Names with
                  ".." or a path separator are rejected.

    Raises InvalidInputError, NotFoundError, or MarkdownReaderError when
    the resolved file cannot be read.
    """
    start = time.perf_counter()
    logger.debug("read_markdown_file called with filename=%r", filename)

    try:
        check_filename(filename)
    except InvalidInputError:
        logger.debug(
            "read_markdown_file rejected filename=%r after %.1fms",
            filename,
            (time.perf_counter() - start) * 1000,
        )
        raise

    path = resolver.resolve(filename)
    name = os.path.basename(path)

    # resolve() always normalizes to .md; re-checked before reading
    if not is_markdown(name):
        raise InvalidInputError(f"file is not a markdown file: {name}")

    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            content = f.read()
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        raise MarkdownReaderError(f"failed to read file {name}: {e.strerror or type(e).__name__}") from e

    logger.debug(
        "read_markdown_file completed in %.1fms, read %d chars from %s",
        (time.perf_counter() - start) * 1000,
        len(content),
        path,
    )
    return content
