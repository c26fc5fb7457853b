"""
Centralized logging configuration for meshmerge.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Optional master log file (default: ``logs/meshmerge.log``).
* Console logging on stderr, so merged output on stdout stays clean.
* Optional log rotation controlled by ``config/meshmerge.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from meshmerge.config import get_config
from meshmerge.utils.pathing import PROJECT_ROOT

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "meshmerge"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.WARNING


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _resolve_log_file() -> Optional[Path]:
    """Return the master log file path, or None when file logging is off."""
    cfg = get_config()

    filename = cfg.logging.get("file")
    if not filename:
        return None

    log_dir = Path(cfg.logging.get("dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / filename


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "WARNING")).upper()
    base_level = getattr(logging, level_name, logging.WARNING)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    try:
        log_file = _resolve_log_file()
    except OSError:
        # Read-only install location; console logging still works
        log_file = None

    if log_file is not None:
        rotate = bool(cfg.logging.get("rotate", False))
        base_logger.addHandler(_build_file_handler(log_file, _effective_level, rotate))

    console = StreamHandler()
    console.setLevel(_effective_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    Module loggers are children of the ``meshmerge`` base logger and inherit
    its console and master file handlers. The debug flag in
    ``config/meshmerge.yml`` forces DEBUG level output.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME

    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger is not base_logger and logger_name not in _logger_cache:
        logger.setLevel(_effective_level)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_console_level(level: int) -> None:
    """Adjust console verbosity at runtime (used by ``--verbose``)."""
    global _effective_level

    base_logger = _configure_base_logger()
    for handler in base_logger.handlers:
        if isinstance(handler, StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)
    if level < base_logger.level:
        _effective_level = level
        base_logger.setLevel(level)
        for logger in _logger_cache.values():
            logger.setLevel(level)
