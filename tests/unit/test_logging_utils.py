"""Unit tests for CLI logging setup."""

import logging

import pytest

from versiondiff.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (logging.DEBUG, logging.DEBUG),
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("nonsense", logging.INFO),
        ],
    )
    def test_levels(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    def test_replaces_existing_handlers(self):
        configure_logging("INFO")
        root_logger = configure_logging("INFO")
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.INFO

    def test_file_handler(self, tmp_path):
        log_path = tmp_path / "run.log"
        root_logger = configure_logging(logging.INFO, log_file=str(log_path))
        logging.getLogger("versiondiff.test").info("hello from test")
        for handler in root_logger.handlers:
            handler.flush()

        content = log_path.read_text(encoding="utf-8")
        assert "Logging to file" in content
        assert "INFO: hello from test" in content

    def test_unwritable_log_file_is_a_warning(self, tmp_path, capsys):
        root_logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))
        assert len(root_logger.handlers) == 1
        assert "Could not open log file" in capsys.readouterr().err

    def test_trace_format_includes_logger_name(self, capsys):
        configure_logging(logging.DEBUG, trace_mode=True)
        logging.getLogger("versiondiff.diff.text_diff").debug("traced")
        err = capsys.readouterr().err
        assert "[versiondiff.diff.text_diff]" in err
        assert "traced" in err

    def test_chardet_quieted_outside_trace_mode(self):
        configure_logging(logging.DEBUG)
        assert logging.getLogger("chardet").level == logging.WARNING

        configure_logging(logging.DEBUG, trace_mode=True)
        assert logging.getLogger("chardet").level == logging.NOTSET
