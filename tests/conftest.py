"""Shared pytest fixtures and configuration for the teambook test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no I/O.
* CLI tests call :func:`teambook.cli.app.main` with an explicit argv.
* Logging configured by a test must be undone by that test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    """Snapshot the ``teambook`` logger and restore it afterwards."""
    package_logger = logging.getLogger("teambook")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
