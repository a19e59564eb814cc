"""Logging utilities for deadexports commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "deadexports"


class StageFormatter(logging.Formatter):
    """Prefix console records with the pipeline stage that emitted them.

    ``deadexports.scanner`` renders as ``[deadexports:scanner]``; the package
    logger itself renders as ``[deadexports]``.
    """

    def __init__(self) -> None:
        super().__init__("[%(stage)s] %(levelname)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        stage = record.name
        prefix = f"{_LOGGER_NAME}."
        if stage.startswith(prefix):
            stage = f"{_LOGGER_NAME}:{stage[len(prefix):]}"
        record.stage = stage
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the deadexports hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the deadexports logger with stderr output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(StageFormatter())
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["StageFormatter", "configure_logging", "get_logger"]
