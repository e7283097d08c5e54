from __future__ import annotations

"""
Logging setup for the command line tool.

One run, one thread: records go straight to stderr and, when requested,
to a size-capped log file. The handlers installed here are remembered so a
second call can replace them without touching handlers owned by anyone else
(pytest's capture handlers, for instance).
"""

import logging
import os
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import List, Optional

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Handlers attached to the root logger by configure_logging()
_installed: List[logging.Handler] = []


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one CLI run.

    Attributes:
        level: Name of the minimum level ("DEBUG", "INFO", ...).
        console: Write records to stderr.
        log_file: Optional path of a rotating diagnostic log.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2
    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the tool's handlers to the root logger.

    Calling it again is a no-op unless ``force`` is set, in which case the
    previous handlers are closed and replaced.
    """
    root = logging.getLogger()
    if _installed and not force:
        return root

    shutdown_logging()
    level = _LEVELS.get(str(cfg.level or "").strip().upper(), logging.INFO)
    root.setLevel(level)

    if cfg.console:
        console = _StderrHandler()
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        _installed.append(console)

    if cfg.log_file:
        file_handler = _open_log_file(cfg)
        if file_handler is not None:
            _installed.append(file_handler)

    for handler in _installed:
        handler.setLevel(level)
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Detach and close every handler installed by configure_logging()."""
    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()


def installed_handlers() -> List[logging.Handler]:
    return list(_installed)


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """An unusable log path is reported on stderr and the run goes on without it."""
    try:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None
    handler.setFormatter(logging.Formatter(cfg.file_fmt))
    return handler
