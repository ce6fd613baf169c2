from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

from tutorkit.constants import ROOT_LOGGER_NAME
from tutorkit.utilities.logger_manager import LoggerConfig, LoggerManager, StructuredFormatter


def _read_log(manager: LoggerManager) -> str:
    manager.flush()
    log_dir = manager.config.log_dir
    assert log_dir is not None
    return (Path(log_dir) / manager.config.log_file_name).read_text(encoding="utf-8")


def test_module_loggers_write_through_managed_tree(logger_manager: LoggerManager) -> None:
    logging.getLogger("tutorkit.docs.links").info("checked links")
    assert "checked links" in _read_log(logger_manager)
    assert logging.getLogger(ROOT_LOGGER_NAME).propagate is False


def test_context_is_attached_inside_block_only(tmp_path: Path) -> None:
    manager = LoggerManager(
        LoggerConfig(log_dir=tmp_path / "logs", log_level="INFO", structured_logging=True)
    )
    try:
        logger = manager.get_logger("cli")
        with manager.context(command="check"):
            logger.info("inside")
        logger.info("outside")
        records = [json.loads(line) for line in _read_log(manager).splitlines()]
    finally:
        manager.close()
    assert records[0]["message"] == "inside"
    assert records[0]["context"] == {"command": "check"}
    assert records[0]["name"] == "tutorkit.cli"
    assert records[1]["context"] == {}


def test_reconfiguring_replaces_managed_handlers(tmp_path: Path) -> None:
    first = LoggerManager(LoggerConfig(log_dir=tmp_path / "a"))
    second = LoggerManager(LoggerConfig(log_level="error"))
    managed = [
        handler
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers
        if getattr(handler, "_tutorkit_managed", False)
    ]
    assert len(managed) == 1
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR
    second.close()
    first.close()
    assert logging.getLogger(ROOT_LOGGER_NAME).propagate is True


def test_structured_formatter_includes_exception() -> None:
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.getLogger("tutorkit.test").makeRecord(
            "tutorkit.test", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
        )

    payload = json.loads(StructuredFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert "ValueError: bad" in payload["exception"]
