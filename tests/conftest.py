from __future__ import annotations

from collections.abc import Callable, Generator
import logging
import os
from pathlib import Path
import sys
from textwrap import dedent

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.dont_write_bytecode = True
os.environ.setdefault("PYTHONDONTWRITEBYTECODE", "1")

from tutorkit.constants import ROOT_LOGGER_NAME  # noqa: E402
from tutorkit.utilities.logger_manager import (  # noqa: E402
    LoggerConfig,
    LoggerManager,
)

DocsWriter = Callable[[dict[str, str]], Path]


@pytest.fixture(autouse=True)
def restore_tutorkit_logger() -> Generator[None, None, None]:
    """Undo handler/propagation changes a LoggerManager makes to the tree."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = True


@pytest.fixture
def write_docs(tmp_path: Path) -> DocsWriter:
    """Write ``{relative_path: markdown}`` under a fresh docs root."""
    root = tmp_path / "corpus"
    root.mkdir()

    def _write(files: dict[str, str]) -> Path:
        for relative, text in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(dedent(text).lstrip("\n"), encoding="utf-8")
        return root

    return _write


@pytest.fixture
def logger_manager(tmp_path: Path) -> Generator[LoggerManager, None, None]:
    manager = LoggerManager(LoggerConfig(log_dir=tmp_path / "logs", log_level="DEBUG"))
    yield manager
    manager.close()
