"""
Logging setup shared by every noble_lineage module.

Layout
------
``noble_lineage``                 package logger: console + ``logs/noble_lineage.log``
``noble_lineage.<module>``        module logger: propagates to the package logger
                                  and also writes ``logs/noble_lineage_<module>.log``

Level, master file name, rotation and the log directory come from the
``logging`` / ``paths`` sections of ``config/noble_lineage.yml``; ``debug: true``
forces DEBUG everywhere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from noble_lineage.config import get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "noble_lineage"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass
class _LoggingState:
    configured: bool = False
    level: int = logging.INFO
    rotate: bool = False
    log_dir: Optional[Path] = None
    console: Optional[logging.StreamHandler] = None
    loggers: Dict[str, Logger] = field(default_factory=dict)


_state = _LoggingState()


def _log_dir_from_config(cfg) -> Path:
    configured = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(configured)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _file_handler(path: Path) -> logging.Handler:
    if _state.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(_state.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def configure_logging() -> Logger:
    """
    Attach the console and master-file handlers to the package logger.
    Runs once; later calls return the already configured logger.
    """
    package_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _state.configured:
        return package_logger

    cfg = get_config()
    debug = bool(cfg.debug)
    level_name = str(cfg.logging.get("level", "INFO")).upper()

    _state.level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)
    _state.rotate = bool(cfg.logging.get("rotate", False))
    _state.log_dir = _log_dir_from_config(cfg)

    package_logger.setLevel(_state.level)
    package_logger.propagate = False
    package_logger.addHandler(
        _file_handler(_state.log_dir / cfg.logging.get("file", "noble_lineage.log"))
    )

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if debug else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(console)
    _state.console = console

    _state.configured = True
    _state.loggers[BASE_LOGGER_NAME] = package_logger
    return package_logger


def qualified_name(name: Optional[str]) -> str:
    """``"tree_builder"`` -> ``"noble_lineage.tree_builder"``; already-qualified names pass through."""
    if not name or name == BASE_LOGGER_NAME:
        return BASE_LOGGER_NAME
    if name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def log_file_for(name: str) -> Path:
    """Per-module log file of ``get_logger(name)``."""
    configure_logging()
    return _state.log_dir / f"{qualified_name(name).replace('.', '_')}.log"


def get_logger(name: str | None = None) -> Logger:
    """
    Logger for one module of the package.

    ``get_logger("migrator")`` and ``get_logger("noble_lineage.migrator")``
    are the same logger. The module file handler is added only once.
    """
    package_logger = configure_logging()
    logger_name = qualified_name(name)
    if logger_name == BASE_LOGGER_NAME:
        return package_logger

    logger = logging.getLogger(logger_name)
    logger.setLevel(_state.level)
    if not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        handler = _file_handler(log_file_for(logger_name))
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.propagate = True

    _state.loggers[logger_name] = logger
    return logger


def set_console_level(level: int | str) -> None:
    """Change console verbosity at runtime (the CLI ``--verbose`` flag)."""
    configure_logging()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    if _state.console is not None:
        _state.console.setLevel(level)
    if level < _state.level:
        for logger in _state.loggers.values():
            logger.setLevel(level)


def list_active_loggers() -> List[str]:
    return sorted(_state.loggers)
