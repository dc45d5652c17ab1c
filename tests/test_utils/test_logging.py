"""Tests for logging setup."""

import logging

from floki.utils.logging import setup_logging


def test_setup_logging_level():
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG

        setup_logging("nonsense")
        assert root.level == logging.INFO
    finally:
        root.handlers = original_handlers
        root.setLevel(original_level)
