"""Logger manager with colored console output, file rotation and context.

The manager configures the ``tutorkit`` logger hierarchy once; library modules
log through ``logging.getLogger(__name__)`` and inherit its handlers.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import datetime
import json
import logging
from logging import Handler, Logger, LogRecord, getLevelName
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Any, ClassVar

import colorlog

from tutorkit.constants import ROOT_LOGGER_NAME

PLAIN_FORMAT = "%(asctime)s - [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LoggerConfig:
    """Configuration for LoggerManager."""

    log_level: str = "WARNING"
    log_dir: Path | None = None
    log_file_name: str = "tutorkit.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    structured_logging: bool = False
    log_colors: dict[str, str] | None = None

    DEFAULT_LOG_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    }

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_dir is not None:
            self.log_dir = Path(self.log_dir).resolve()
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_colors = self.log_colors or self.DEFAULT_LOG_COLORS


class StructuredFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: LogRecord) -> str:
        log_data = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "context": getattr(record, "context", {}),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


class LoggerSettings:
    """Builds the console and file handlers for a LoggerConfig."""

    def __init__(self, config: LoggerConfig) -> None:
        self.config = config

    def get_handlers(self) -> tuple[Handler, Handler | None]:
        """Return console and (optional) file handlers."""
        return self._get_console_handler(), self._get_file_handler()

    def _get_console_handler(self) -> Handler:
        handler = colorlog.StreamHandler(sys.stderr)
        if self.config.structured_logging:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(
                colorlog.ColoredFormatter(
                    "%(log_color)s" + PLAIN_FORMAT,
                    datefmt=DATE_FORMAT,
                    log_colors=self.config.log_colors,
                )
            )
        return handler

    def _get_file_handler(self) -> RotatingFileHandler | None:
        if self.config.log_dir is None:
            return None
        file_path = Path(self.config.log_dir) / self.config.log_file_name
        try:
            handler = RotatingFileHandler(
                file_path,
                maxBytes=self.config.max_file_size_mb * 1024 * 1024,
                backupCount=self.config.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            print(f"Failed to create RotatingFileHandler: {e}", file=sys.stderr)
            return None
        handler.setFormatter(
            StructuredFormatter()
            if self.config.structured_logging
            else logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)
        )
        return handler


class _ContextFilter(logging.Filter):
    def __init__(self, context: dict[str, Any]) -> None:
        super().__init__()
        self.context = context

    def filter(self, record: LogRecord) -> bool:
        merged = dict(getattr(record, "context", {}) or {})
        merged.update(self.context)
        record.context = merged
        return True


class LoggerManager:
    """Configures the tutorkit logger tree and hands out loggers."""

    def __init__(
        self,
        config: LoggerConfig | None = None,
        name: str = ROOT_LOGGER_NAME,
    ) -> None:
        self.name = name
        self.config = config or LoggerConfig()
        self.settings = LoggerSettings(self.config)
        self._logger = self._configure_logger()

    def _configure_logger(self) -> Logger:
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            if getattr(handler, "_tutorkit_managed", False):
                logger.removeHandler(handler)
                handler.close()

        logger.setLevel(getLevelName(self.config.log_level))
        console_handler, file_handler = self.settings.get_handlers()
        for handler in (console_handler, file_handler):
            if handler is None:
                continue
            handler._tutorkit_managed = True  # type: ignore[attr-defined]
            logger.addHandler(handler)
        logger.propagate = False
        return logger

    def get_logger(self, suffix: str | None = None) -> Logger:
        """Return the managed logger, or a named child of it."""
        if suffix:
            return self._logger.getChild(suffix)
        return self._logger

    @contextmanager
    def context(self, **context_kwargs: Any) -> Iterator[Logger]:
        """Attach ``context_kwargs`` to every record emitted inside the block."""
        context_filter = _ContextFilter(context_kwargs)
        handlers = list(self._logger.handlers)
        for handler in handlers:
            handler.addFilter(context_filter)
        try:
            yield self._logger
        finally:
            for handler in handlers:
                handler.removeFilter(context_filter)

    def flush(self) -> None:
        """Flush all handlers to ensure logs are written."""
        for handler in self._logger.handlers:
            handler.flush()

    def close(self) -> None:
        """Detach and close the handlers this manager installed."""
        for handler in list(self._logger.handlers):
            if getattr(handler, "_tutorkit_managed", False):
                self._logger.removeHandler(handler)
                handler.close()
        self._logger.propagate = True


__all__ = ["LoggerConfig", "LoggerManager", "LoggerSettings", "StructuredFormatter"]
