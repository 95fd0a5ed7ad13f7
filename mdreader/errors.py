"""Error kinds raised by the markdown reader."""


class MarkdownReaderError(Exception):
    """Base class for errors surfaced to the MCP client."""


class InvalidInputError(MarkdownReaderError):
    """Filename rejected before touching the filesystem, or not markdown."""


class NotFoundError(MarkdownReaderError):
    """No configured directory contains the requested file."""


class ConfigurationError(MarkdownReaderError):
    """Startup configuration is missing, unreadable or malformed."""
