"""Loads the server configuration from CLI arguments or the JSON config file."""

import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from mdreader.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
DEFAULT_MAX_PAGE_SIZE = 500
DEFAULT_IGNORE_DIRS = [r"\.git$", r"node_modules$"]

CONFIG_ENV_VAR = "MARKDOWN_READER_CONFIG"


@dataclass(frozen=True)
class Config:
    """Process-wide settings, built once at startup."""

    directories: list[str]
    ignore_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_DIRS))
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    debug_logging: bool = False
    log_file: str = ""


def expand_tilde(path: str) -> str:
    """Expand a leading "~" or "~/" to the home directory.

    Anything else, including "~user" and a "~" in the middle of the
    path, is returned unchanged.
    """
    if path == "~":
        return str(Path.home())
    if path.startswith("~/"):
        return str(Path.home() / path[2:])
    return path


def get_config_path() -> Path:
    """Return the config file location.

    MARKDOWN_READER_CONFIG overrides the default
    ~/.config/markdown-reader-mcp/markdown-reader-mcp.json.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(expand_tilde(env_path))
    return Path.home() / ".config" / "markdown-reader-mcp" / "markdown-reader-mcp.json"


def load_config_file(path: Path | None = None) -> Config:
    """Read and validate the JSON config file.

    Raises ConfigurationError when the file is missing, unreadable, not
    valid JSON, or does not list any directories.
    """
    path = path or get_config_path()
    try:
        raw = path.read_text()
    except FileNotFoundError:
        raise ConfigurationError(
            f"no directories given and config file not found: {path}"
        ) from None
    except OSError as e:
        raise ConfigurationError(f"cannot read config file {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a JSON object")

    directories = data.get("directories")
    if not isinstance(directories, list) or not directories:
        raise ConfigurationError(f"config file {path} does not list any directories")
    if not all(isinstance(d, str) for d in directories):
        raise ConfigurationError(f"config file {path}: directories must be strings")

    ignore_dirs = data.get("ignore_dirs")
    if ignore_dirs is None:
        ignore_dirs = list(DEFAULT_IGNORE_DIRS)
    elif not isinstance(ignore_dirs, list) or not all(isinstance(p, str) for p in ignore_dirs):
        raise ConfigurationError(f"config file {path}: ignore_dirs must be a list of strings")

    max_page_size = data.get("max_page_size")
    if not isinstance(max_page_size, int) or isinstance(max_page_size, bool) or max_page_size <= 0:
        max_page_size = DEFAULT_MAX_PAGE_SIZE

    log_file = data.get("log_file") or ""
    if not isinstance(log_file, str):
        raise ConfigurationError(f"config file {path}: log_file must be a string")

    logger.debug("Loaded config from %s", path)
    return Config(
        directories=[expand_tilde(d) for d in directories],
        ignore_dirs=ignore_dirs,
        max_page_size=max_page_size,
        debug_logging=bool(data.get("debug_logging", False)),
        log_file=expand_tilde(log_file) if log_file else "",
    )


def build_config(
    cli_directories: list[str],
    debug: bool = False,
    quiet: bool = False,
    config_path: Path | None = None,
) -> Config:
    """Build the startup config.

    Directories on the command line fully replace the config file, which
    is then not read at all. --debug and --quiet override debug_logging
    from either source.
    """
    if cli_directories:
        config = Config(directories=[expand_tilde(d) for d in cli_directories])
    else:
        config = load_config_file(config_path)

    if debug:
        config = replace(config, debug_logging=True)
    elif quiet:
        config = replace(config, debug_logging=False)
    return config
