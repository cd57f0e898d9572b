"""Tests for logger construction."""

import logging

from fieldlist.logging import get_logger


class TestGetLogger:
    def test_library_logger_defaults_to_warning(self, monkeypatch):
        monkeypatch.delenv('FIELDLIST_LOG_LEVEL', raising=False)
        logger = get_logger('fieldlist.tests.library_default')

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_cli_logger_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv('FIELDLIST_LOG_LEVEL', raising=False)
        logger = get_logger('fieldlist.tests.cli')

        assert logger.level == logging.INFO

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv('FIELDLIST_LOG_LEVEL', 'debug')
        logger = get_logger('fieldlist.tests.env_override')

        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv('FIELDLIST_LOG_LEVEL', 'chatty')
        logger = get_logger('fieldlist.tests.unknown_level')

        assert logger.level == logging.WARNING

    def test_handlers_not_duplicated(self):
        first = get_logger('fieldlist.tests.repeat')
        second = get_logger('fieldlist.tests.repeat')

        assert first is second
        assert len(second.handlers) == 1
