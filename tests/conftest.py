"""Pytest configuration and fixtures for ansistrip tests."""

import logging

import pytest
from click.testing import CliRunner

from ansistrip.core.logging.utils import LOGGER_NAME


def _drop_logger() -> None:
    """Forget the ansistrip logger so the next test configures a fresh one."""
    logger = logging.Logger.manager.loggerDict.pop(LOGGER_NAME, None)
    if isinstance(logger, logging.Logger):
        logger.handlers.clear()


@pytest.fixture(autouse=True)
def reset_logger():
    """Reset logging state around each test."""
    _drop_logger()
    yield
    _drop_logger()


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    """Point the config file at a temporary path and clear shell settings.

    The file does not exist until a test writes it.
    """
    path = tmp_path / "ansistrip.cfg"
    monkeypatch.setenv("ANSISTRIP_CONFIG", str(path))
    monkeypatch.delenv("ANSISTRIP_STRINGS", raising=False)
    monkeypatch.delenv("ANSISTRIP_LOG_LEVEL", raising=False)
    return path


@pytest.fixture
def cli_runner():
    """Provide a Click CLI test runner."""
    return CliRunner()
