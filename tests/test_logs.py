import logging

from core.logs import configure_logging


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_configure_logging_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
