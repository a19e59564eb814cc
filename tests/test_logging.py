"""Tests for deadexports.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from deadexports.cli import main
from deadexports.logging import StageFormatter, configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "deadexports"
    assert get_logger("scanner").name == "deadexports.scanner"


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_configure_logging_writes_file_sink(tmp_path: Path) -> None:
    log_file = tmp_path / "scan.log"
    logger = configure_logging(log_file=log_file)

    get_logger("scanner").info("hello from the scanner")
    for handler in logger.handlers:
        handler.flush()
        if isinstance(handler, logging.FileHandler):
            handler.close()

    assert "hello from the scanner" in log_file.read_text(encoding="utf-8")


def test_stage_formatter_names_the_emitting_stage() -> None:
    formatter = StageFormatter()
    scanner_record = logging.LogRecord(
        "deadexports.scanner", logging.INFO, __file__, 1, "Scanning %s", ("src",), None
    )
    root_record = logging.LogRecord(
        "deadexports", logging.WARNING, __file__, 1, "careful", (), None
    )

    assert formatter.format(scanner_record) == "[deadexports:scanner] INFO Scanning src"
    assert formatter.format(root_record) == "[deadexports] WARNING careful"


def test_cli_logs_carry_stage_prefix(tmp_path: Path, capsys) -> None:
    main([f"--path={tmp_path}"])

    assert "[deadexports:scanner] INFO Scanning" in capsys.readouterr().err
