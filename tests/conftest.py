"""Shared fixtures: small markdown trees built fresh for each test."""

import logging
from pathlib import Path

import pytest

from mdreader.config_reader import Config


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def dir1(tmp_path) -> Path:
    """foo.md, bar.md, baz.md and README.md, plus a non-markdown file."""
    root = tmp_path / "dir1"
    write(root / "foo.md", "# Foo\n\nFoo content.\n")
    write(root / "bar.md", "# Bar\n\nBar content.\n")
    write(root / "baz.md", "# Baz\n\nBaz content.\n")
    write(root / "README.md", "# Readme\n")
    write(root / "notes.txt", "not markdown\n")
    return root


@pytest.fixture
def dir2(tmp_path) -> Path:
    root = tmp_path / "dir2"
    write(root / "cat.md", "# Cat\n")
    return root


@pytest.fixture
def make_config():
    def _make(*directories, **kwargs) -> Config:
        return Config(directories=[str(d) for d in directories], **kwargs)

    return _make


@pytest.fixture(autouse=True)
def reset_mdreader_logger():
    """configure_logging() detaches the package logger from the root; undo it."""
    yield
    logger = logging.getLogger("mdreader")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
