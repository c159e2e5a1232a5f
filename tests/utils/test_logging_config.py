"""Tests for the logging configuration module."""

import io
import logging

from ransel.utils.logging_config import RanselStreamHandler, cleanup_logging, setup_logging


def _ransel_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, RanselStreamHandler)]


class TestSetupLogging:
    """Test logging setup and cleanup."""

    def test_messages_go_to_stream(self):
        stream = io.StringIO()
        setup_logging(stream=stream)

        logging.getLogger("ransel.test").info("Index 1")

        assert stream.getvalue() == "Index 1\n"

    def test_debug_is_filtered_at_info(self):
        stream = io.StringIO()
        setup_logging(stream=stream)

        logging.getLogger("ransel.test").debug("hidden")

        assert stream.getvalue() == ""

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(_ransel_handlers()) == 1

    def test_cleanup_leaves_foreign_handlers(self):
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            setup_logging(stream=io.StringIO())
            cleanup_logging()

            assert _ransel_handlers() == []
            assert foreign in root.handlers
        finally:
            root.removeHandler(foreign)
