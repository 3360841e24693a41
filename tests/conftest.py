from __future__ import annotations

import logging

import pytest

from common.logging_config import remove_cli_handlers


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by the CLI under test."""
    root = logging.getLogger()
    level = root.level
    yield
    remove_cli_handlers(root)
    root.setLevel(level)
