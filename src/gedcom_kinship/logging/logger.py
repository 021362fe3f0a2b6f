"""
Centralized logging configuration for gedcom_kinship.

Every module calls ``get_logger(__name__)``. The first call configures the
shared ``gedcom_kinship`` logger from the ``logging`` section of
``config/gedcom_kinship.yml``:

    logging:
      level: INFO              # ignored when ``debug: true``
      dir: logs                # falls back to paths.logs_dir
      file: gedcom_kinship.log # master log file
      rotate: false            # RotatingFileHandler, 5 x 5 MB
      to_file: true            # false: console only

Module loggers propagate to the shared logger and, when file output is on,
also write their own ``<dir>/<module_name>.log``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from gedcom_kinship.config import GPConfig, get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_kinship"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    level: int
    console_level: int
    log_dir: Path
    master_file: str
    rotate: bool
    to_file: bool

    @classmethod
    def from_config(cls, cfg: GPConfig) -> "LogSettings":
        section = cfg.logging
        debug = bool(cfg.debug)

        level_name = str(section.get("level", "INFO")).upper()
        level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)

        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=level,
            console_level=logging.DEBUG if debug else logging.INFO,
            log_dir=log_dir,
            master_file=section.get("file", "gedcom_kinship.log"),
            rotate=bool(section.get("rotate", False)),
            to_file=bool(section.get("to_file", True)),
        )


_settings: Optional[LogSettings] = None
_logger_cache: Dict[str, Logger] = {}


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _configure() -> LogSettings:
    """Attach console and master-file handlers to the base logger, once."""
    global _settings
    if _settings is not None:
        return _settings

    settings = LogSettings.from_config(get_config())

    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False

    if settings.to_file:
        base.addHandler(_file_handler(settings, settings.master_file))

    console = StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _settings = settings
    return settings


def get_logger(name: str | None = None) -> Logger:
    """Return a project logger; ``None`` gives the shared base logger."""
    settings = _configure()
    logger_name = name or BASE_LOGGER_NAME

    cached = _logger_cache.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    logger.setLevel(settings.level)

    if logger_name != BASE_LOGGER_NAME:
        logger.propagate = True
        if settings.to_file:
            logger.addHandler(_file_handler(settings, f"{logger_name.replace('.', '_')}.log"))

    _logger_cache[logger_name] = logger
    return logger

