"""Tests for aicc.log."""

import logging

from aicc.log import enable_verbose, get_logger, set_log_level


class TestLogging:
    def test_single_handler(self):
        first = get_logger("aicc.test_single")
        second = get_logger("aicc.test_single")

        assert first is second
        assert len(first.handlers) == 1

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("AICC_LOG_LEVEL", "warning")

        assert get_logger("aicc.test_env").level == logging.WARNING

    def test_enable_verbose(self, monkeypatch):
        monkeypatch.setenv("AICC_LOG_LEVEL", "INFO")
        logger = get_logger("aicc.test_verbose")

        enable_verbose()

        assert logger.level == logging.DEBUG

    def test_unknown_level_resets(self, monkeypatch):
        monkeypatch.setenv("AICC_LOG_LEVEL", "INFO")
        logger = get_logger("aicc.test_reset")

        set_log_level("LOUD")

        assert logger.level == logging.NOTSET
