"""Diagnostics for natsize.

The transform never raises for a bad image or directive; it reports through
a logger instead. Any ``logging.Logger`` can be injected as that sink. The
``natsize`` logger configured here is the default one the CLI uses: plain
progress lines on stdout, ``Warning:``/``Error:`` lines on stderr.

Per-document diagnostics go through a ``DocumentLogger`` so every record
carries the file it was raised for (``record.document``).
"""

import logging
import os
import sys

LOGGER_NAME = "natsize"

_logger: logging.Logger | None = None

Sink = logging.Logger | logging.LoggerAdapter


class DocumentLogger(logging.LoggerAdapter):
    """Adapter tagging records with the document being transformed."""

    def __init__(self, logger: Sink, document: str | os.PathLike):
        super().__init__(logger, {"document": str(document)})


def document_logger(logger: Sink | None, document: str | os.PathLike) -> DocumentLogger:
    """Wrap ``logger`` (default: the natsize logger) for one document."""
    return DocumentLogger(logger if logger is not None else get_logger(), document)


class DiagnosticFormatter(logging.Formatter):
    """``[Level: ][document: ]message``; the level only for warnings and up."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        document = getattr(record, "document", None)
        if document:
            message = f"{document}: {message}"
        if record.levelno >= logging.WARNING:
            return f"{record.levelname.capitalize()}: {message}"
        return message


def setup_logging(verbose: bool = False) -> logging.Logger:
    """(Re)configure the natsize logger; ``verbose`` shows the per-image debug lines."""
    global _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    formatter = DiagnosticFormatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(lambda r: r.levelno < logging.WARNING)
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """The natsize logger, set up with defaults on first use."""
    if _logger is None:
        return setup_logging(verbose=False)
    return _logger


def debug(msg: str) -> None:
    get_logger().debug(msg)


def info(msg: str) -> None:
    get_logger().info(msg)


def warning(msg: str) -> None:
    get_logger().warning(msg)


def error(msg: str) -> None:
    get_logger().error(msg)
