"""Logging for the array operations, stdlib logging routed through structlog.

Handlers are attached to the ``arrays_util`` package logger rather than the
root logger, so an application embedding the library keeps its own logging
setup.  Records still propagate to the root logger unless ``propagate`` is
switched off.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

PACKAGE_LOGGER = "arrays_util"

SEARCH_LOGGER = "arrays_util.searching"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class LoggingConfig(BaseModel):
    """Logging section of :class:`~arrays_util.config.ArraysConfig`.

    ``logger_levels`` overrides the level of single loggers below the
    package, e.g. ``{"arrays_util.searching": "WARNING"}`` silences the
    per-match diagnostics of ``search``.
    """

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    json_output: bool = False
    stream: bool = True
    log_dir: Optional[str] = None
    file_name: str = "arrays_util.log"
    propagate: bool = True
    logger_levels: Dict[str, str] = {}

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return value

    @field_validator("logger_levels")
    @classmethod
    def _known_levels(cls, value: Dict[str, str]) -> Dict[str, str]:
        resolved = {}
        for name, level in value.items():
            level = level.upper()
            if level not in _LEVELS:
                raise ValueError(f"unknown log level for {name}: {level}")
            if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
                raise ValueError(f"{name} is not an arrays_util logger")
            resolved[name] = level
        return resolved


_installed_handlers: list = []
_is_configured = False
_overridden_loggers: list = []


def setup_logging(config: LoggingConfig | dict | None = None) -> LoggingConfig:
    """Configure the package logger + structlog and return the resolved config.

    Calling it again replaces the handlers installed by the previous call.
    """
    global _is_configured
    if config is None:
        resolved = LoggingConfig()
    elif isinstance(config, dict):
        resolved = LoggingConfig(**config)
    else:
        resolved = config

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    reset_logging()

    package_logger.setLevel(resolved.level)
    package_logger.propagate = resolved.propagate

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if resolved.stream:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        _installed_handlers.append(stream_handler)

    if resolved.log_dir:
        log_dir = Path(resolved.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / resolved.file_name,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        package_logger.addHandler(handler)

    for name, level in resolved.logger_levels.items():
        logging.getLogger(name).setLevel(level)
        _overridden_loggers.append(name)

    renderer = (
        structlog.processors.JSONRenderer()
        if resolved.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _is_configured = True
    return resolved


def reset_logging() -> None:
    """Remove the handlers and level overrides installed by :func:`setup_logging`."""
    global _is_configured
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()
    for name in _overridden_loggers:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _overridden_loggers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    _is_configured = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``."""
    return structlog.get_logger(name)


def is_configured() -> bool:
    return _is_configured
