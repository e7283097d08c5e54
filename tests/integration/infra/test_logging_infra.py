from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies idempotent configuration, the stderr handler and the rotating
log file.
"""

import logging
import sys
from pathlib import Path

import pytest

from componentgraph.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    installed_handlers,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _attached():
    root = logging.getLogger()
    return [h for h in installed_handlers() if h in root.handlers]


def test_logging_idempotency():
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    configure_logging(cfg)

    assert len(_attached()) == 1


def test_logging_force_reconfigures_level():
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_attached()) == 1


def test_console_follows_current_stderr(capsys):
    configure_logging(LoggingConfig(level="INFO"))

    get_logger("componentgraph.test").warning("Duplicate selector 'app-dup'")

    assert "WARNING | Duplicate selector 'app-dup'" in capsys.readouterr().err
    assert installed_handlers()[0].stream is sys.stderr


def test_logging_writes_file(tmp_path: Path):
    """TC-02: Records reach the rotating file."""
    log_file = tmp_path / "logs" / "graph.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    get_logger("componentgraph.test").info("4 components found.")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "4 components found." in content
    assert "componentgraph.test" in content


def test_unusable_log_file_is_skipped(tmp_path: Path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    configure_logging(LoggingConfig(console=False, log_file=str(blocker / "graph.log")))

    assert installed_handlers() == []
    assert "Cannot open log file" in capsys.readouterr().err


def test_shutdown_logging_resets_state():
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()

    assert installed_handlers() == []
    assert _attached() == []


def test_unknown_level_defaults_to_info():
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.INFO
