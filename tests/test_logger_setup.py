"""
Logging setup tests: dedicated logger, run directory and handlers.
"""

import sys
import os
import json
import logging
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logger_setup


@pytest.fixture
def config_path(tmp_path):
    config = {
        "run_id": "test-run",
        "master_seed": 0,
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "directory": str(tmp_path / "runs"),
        },
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    yield str(path)

    logger = logging.getLogger(logger_setup.LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:

    def test_creates_run_log_file(self, config_path, tmp_path):
        logger_setup.setup_logging(config_path)
        log_file = tmp_path / "runs" / "test-run" / "simulation.log"
        assert log_file.exists()
        assert "Logging ready for run 'test-run'" in log_file.read_text()

    def test_dedicated_logger_does_not_propagate(self, config_path):
        logger = logger_setup.setup_logging(config_path)
        assert logger.name == "bouncing_balls"
        assert logger.propagate is False
        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self, config_path):
        logger_setup.setup_logging(config_path)
        logger = logger_setup.setup_logging(config_path)
        assert len(logger.handlers) == 2

    def test_repeated_setup_closes_previous_file_handler(self, config_path):
        first = logger_setup.setup_logging(config_path).handlers[0]
        logger_setup.setup_logging(config_path)
        assert isinstance(first, logging.FileHandler)
        assert first.stream is None
