from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from mbquery.platform.logging import LOGGER_NAME, setup_logger


@pytest.fixture(autouse=True)
def restore_default_handlers() -> Iterator[None]:
    yield
    _ = setup_logger()


def test_console_only_by_default() -> None:
    logger = setup_logger()

    assert logger.name == LOGGER_NAME
    assert [type(handler) for handler in logger.handlers] == [RichHandler]
    assert logger.handlers[0].level == logging.WARNING


def test_log_file_adds_rotating_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "mbquery.log"

    logger = setup_logger(log_file=log_file)
    logger.debug("WEB SERVICE REQUEST: %s", "https://musicbrainz.org/ws/2/artist")
    for handler in logger.handlers:
        handler.flush()

    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
    assert "WEB SERVICE REQUEST" in log_file.read_text(encoding="utf-8")


def test_setup_replaces_previous_handlers(tmp_path: Path) -> None:
    _ = setup_logger(log_file=tmp_path / "first.log")

    logger = setup_logger()

    assert len(logger.handlers) == 1
