"""
Project-wide logging setup for upsguard.

Provides a console logger with optional JSON output and an optional log file.
Controlled via environment variables:
- UPSGUARD_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
- UPSGUARD_LOG_FORMAT: text|json (default: text)
- UPSGUARD_LOG_FILE: path of a log file to append to (default: unset)
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_level(level: Optional[str] = None) -> int:
    level = (level or os.getenv("UPSGUARD_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level, logging.INFO)


def _build_formatter() -> logging.Formatter:
    fmt = os.getenv("UPSGUARD_LOG_FORMAT", "text").lower()
    if fmt == "json":
        return JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    force: bool = False,
    *,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Configure root logging for console and optional file output.

    If a handler is already present and force is False, this is a no-op.
    An explicit level or log_file overrides the environment.
    """
    target_logger = logger or logging.getLogger()
    if target_logger.handlers and not force:
        return

    if force:
        for h in list(target_logger.handlers):
            target_logger.removeHandler(h)
            h.close()

    target_logger.setLevel(_get_level(level))
    formatter = _build_formatter()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = log_file or os.getenv("UPSGUARD_LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(os.path.expanduser(log_file), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        target_logger.addHandler(handler)
