"""Tests for the logging setup used by the command line."""

import logging

from utilities.logconfig import setup_logging


class TestSetupLogging:
    def test_named_logger_with_file(self, tmp_path):
        log_file = tmp_path / "render.log"
        logger = setup_logging("pathtracer.test", level="info", log_file=str(log_file))
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2
        logger.info("row done")
        for handler in logger.handlers:
            handler.flush()
        assert "row done" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("pathtracer.repeat", level=logging.DEBUG)
        logger = setup_logging("pathtracer.repeat", level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
