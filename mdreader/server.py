"""Markdown Reader MCP Server: read-only access to local markdown docs.

Exposes the markdown files under a set of configured directories via MCP,
so an assistant can find documentation by name and read it without direct
filesystem access.
"""

import argparse
import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv
from mcp.server.fastmcp import FastMCP

from mdreader.config_reader import DEFAULT_PAGE_SIZE, Config, build_config
from mdreader.errors import ConfigurationError
from mdreader.finder import IgnoreFilter, MarkdownFinder
from mdreader.logging_setup import configure_logging
from mdreader.resolver import NameResolver
from mdreader.tools import find_tools, read_tools

logger = logging.getLogger("mdreader")

SERVER_NAME = "Markdown Reader"
TRANSPORTS = ("stdio", "streamable-http")


def create_server(config: Config) -> FastMCP:
    """Create and configure the Markdown Reader MCP server."""
    host = os.environ.get("MARKDOWN_READER_HOST", "127.0.0.1")
    port = int(os.environ.get("MARKDOWN_READER_PORT", "5100"))

    ignore_filter = IgnoreFilter(config.ignore_dirs)
    finder = MarkdownFinder(config, ignore_filter)
    resolver = NameResolver(config, ignore_filter)

    mcp = FastMCP(
        SERVER_NAME,
        host=host,
        port=port,
        instructions=(
            "Markdown Reader gives read-only access to the markdown "
            "documentation in a fixed set of local directories. Use "
            "find_markdown_files to discover files by name, then "
            "read_markdown_file with a bare filename (no path) to read one."
        ),
    )

    @mcp.tool()
    async def find_markdown_files(query: str = "", page_size: int = DEFAULT_PAGE_SIZE) -> str:
        """Find markdown files in the configured directories.

        Args:
            query: Case-insensitive substring of the filename, e.g. "api"
                   or "readme". Leave empty to list everything.
            page_size: Maximum number of files to return (default 50).
        """
        return await find_tools.find_markdown_files(finder, query, page_size)

    @mcp.tool()
    async def read_markdown_file(filename: str) -> str:
        """Read a markdown file by name.

        Args:
            filename: Just the name of the file, e.g. "README.md" or
                      "README". Paths and ".." are rejected.
        """
        return await read_tools.read_markdown_file(resolver, filename)

    @mcp.resource("file://{filename}", mime_type="text/markdown")
    async def markdown_file(filename: str) -> str:
        """Content of a markdown file, addressed by bare filename."""
        return await read_tools.read_markdown_file(resolver, filename)

    return mcp


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="markdown-reader-mcp",
        description="Serve markdown files from local directories over MCP.",
    )
    parser.add_argument(
        "directories",
        nargs="*",
        help="Directories to scan. When given, the config file is not read.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--debug", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Disable debug logging")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None):
    """Run the Markdown Reader MCP server."""
    # .env in the working directory may set MARKDOWN_READER_* variables
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    configure_logging(debug=args.debug)

    try:
        config = build_config(args.directories, debug=args.debug, quiet=args.quiet)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    configure_logging(debug=config.debug_logging, log_file=config.log_file)
    logger.info("Scanning directories: %s", ", ".join(config.directories))
    if config.debug_logging:
        logger.debug(
            "Ignore patterns: %s, max page size: %d",
            config.ignore_dirs,
            config.max_page_size,
        )

    mcp = create_server(config)
    logger.info("Starting %s MCP server (%s)", SERVER_NAME, args.transport)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
