"""Pytest configuration and fixtures."""

import logging

import pytest

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up fileassert loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("fileassert")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def hello_file(tmp_path):
    """A six byte file holding ``hello\\n``."""
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello\n")
    return path
