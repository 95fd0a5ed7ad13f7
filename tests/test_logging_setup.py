"""Tests for log formatting and handler setup."""

import logging
import sys

from mdreader.logging_setup import ColoredFormatter, configure_logging


def make_record(level=logging.INFO, msg="hello %s", args=("world",)):
    return logging.LogRecord("mdreader.test", level, __file__, 1, msg, args, None)


class TestColoredFormatter:
    def test_plain_output(self):
        line = ColoredFormatter(use_colors=False).format(make_record(logging.WARNING))

        timestamp, level, message = line.split(maxsplit=2)
        assert len(timestamp) == len("15:04:05.000")
        assert level == "WARN"
        assert message == "hello world"
        assert "\033[" not in line

    def test_colored_output(self):
        line = ColoredFormatter(use_colors=True).format(make_record(logging.ERROR))

        assert ColoredFormatter.COLORS["ERROR"] in line
        assert line.endswith("hello world")

    def test_info_level_is_padded(self):
        line = ColoredFormatter(use_colors=False).format(make_record(logging.INFO))

        assert " INFO  hello world" in line


class TestConfigureLogging:
    def test_defaults_to_stderr_at_info(self):
        logger = configure_logging()

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_debug_level(self):
        assert configure_logging(debug=True).level == logging.DEBUG

    def test_reconfiguring_replaces_handler(self):
        configure_logging()
        logger = configure_logging(debug=True)

        assert len(logger.handlers) == 1

    def test_log_file_created_with_parent_dirs(self, tmp_path):
        log_path = tmp_path / "logs" / "nested" / "reader.log"

        logger = configure_logging(debug=True, log_file=str(log_path))
        logging.getLogger("mdreader.finder").debug("Ignoring directory: %s", "/x/.git")
        handler = logger.handlers[0]
        handler.flush()
        handler.stream.close()

        text = log_path.read_text()
        assert "DEBUG Ignoring directory: /x/.git" in text
        assert "\033[" not in text

    def test_unwritable_log_file_falls_back_to_stderr(self, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("")

        logger = configure_logging(log_file=str(blocker / "reader.log"))

        assert logger.handlers[0].stream is sys.stderr
        assert "Could not open log file" in capsys.readouterr().err
