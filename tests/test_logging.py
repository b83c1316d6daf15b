"""Tests for natsize logging module."""

import logging

from bs4 import BeautifulSoup

from natsize import logging as natsize_logging
from natsize.transform import scale_to_natural_size


def make_record(level: int, msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("natsize", level, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


class TestDiagnosticFormatter:
    """Tests for DiagnosticFormatter."""

    def test_info_is_plain(self):
        formatter = natsize_logging.DiagnosticFormatter()
        assert formatter.format(make_record(logging.INFO, "Built 3 pages")) == "Built 3 pages"

    def test_warning_prefixed_with_level(self):
        formatter = natsize_logging.DiagnosticFormatter()
        assert formatter.format(make_record(logging.WARNING, "bad")) == "Warning: bad"

    def test_document_prefix(self):
        formatter = natsize_logging.DiagnosticFormatter()
        record = make_record(logging.ERROR, "bad", document="docs/a.md")
        assert formatter.format(record) == "Error: docs/a.md: bad"


class TestDocumentLogger:
    """Tests for document_logger()."""

    def test_tags_records_with_document(self, sink, caplog):
        logger = natsize_logging.document_logger(sink, "docs/a.md")
        with caplog.at_level(logging.WARNING, logger="natsize_test"):
            logger.warning("Invalid viewBox")

        (record,) = caplog.records
        assert record.document == "docs/a.md"
        assert record.getMessage() == "Invalid viewBox"

    def test_defaults_to_natsize_logger(self):
        logger = natsize_logging.document_logger(None, "a.md")
        assert logger.logger is natsize_logging.get_logger()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_verbose_sets_debug_level(self):
        assert natsize_logging.setup_logging(verbose=True).level == logging.DEBUG

    def test_repeated_setup_keeps_two_handlers(self):
        natsize_logging.setup_logging()
        logger = natsize_logging.setup_logging()
        assert len(logger.handlers) == 2
        assert logger.propagate is False

    def test_get_logger_initializes_once(self):
        assert natsize_logging._logger is None
        logger = natsize_logging.get_logger()
        assert natsize_logging.get_logger() is logger


class TestLoggingOutput:
    """Tests for output routing."""

    def test_info_goes_to_stdout(self, capsys):
        natsize_logging.setup_logging(verbose=False)
        natsize_logging.info("plain message")
        captured = capsys.readouterr()
        assert captured.out.strip() == "plain message"
        assert captured.err == ""

    def test_warning_goes_to_stderr_with_prefix(self, capsys):
        natsize_logging.setup_logging(verbose=False)
        natsize_logging.warning("something")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "Warning: something"

    def test_debug_hidden_without_verbose(self, capsys):
        natsize_logging.setup_logging(verbose=False)
        natsize_logging.debug("debug message")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_transform_warnings_name_the_document(self, tmp_path, capsys):
        """Transform diagnostics land on stderr, tagged with the source file."""
        doc = tmp_path / "doc.md"
        soup = BeautifulSoup('<img src="a.png" data-scale-to-natural-size="abc">', "html.parser")
        scale_to_natural_size(soup, doc)

        err = capsys.readouterr().err
        assert f"Warning: {doc}: DataScaleToNaturalSizeParseError" in err
