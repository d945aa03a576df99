"""Global test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # configure_logging replaces root handlers; put them back after each test
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
