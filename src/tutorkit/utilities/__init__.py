"""Utilities package for tutorkit.

Logging setup and runtime version resolution shared by the CLI and the HTTP
adapter.
"""

from __future__ import annotations

from .logger_manager import LoggerConfig, LoggerManager, LoggerSettings

__all__ = [
    "LoggerConfig",
    "LoggerManager",
    "LoggerSettings",
]
