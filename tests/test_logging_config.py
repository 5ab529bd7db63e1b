"""Tests for the gallery logger and the log_function decorator."""

import logging

import pytest

from propgallery.utils.logging_config import log_function, logger, set_log_level


@pytest.fixture
def restore_level():
    level = logger.level
    yield
    set_log_level(level)


class TestLogging:

    def test_library_logger_not_root(self):
        assert logger.name == "propgallery"
        assert logger is not logging.getLogger()

    def test_set_log_level(self, restore_level):
        set_log_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

    def test_decorator_preserves_result_and_name(self):
        @log_function
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_decorator_reraises(self, caplog):
        @log_function
        def explode():
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR, logger="propgallery"):
            with pytest.raises(RuntimeError):
                explode()
        assert "boom" in caplog.text
