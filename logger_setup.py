# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "bouncing_balls"
LOG_FILENAME = "simulation.log"


def _replace_handlers(logger: logging.Logger, handlers):
    """Closes and drops the logger's current handlers, then installs the new ones."""
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(config_path='config.json'):
    """
    Points the "bouncing_balls" logger at the console and at a per-run log file.

    Only the application's own logger is configured, and it does not propagate,
    so the root logger and pygame's output are left alone. Safe to call more
    than once: earlier handlers are closed and replaced.

    Data Contract:
    - Inputs: config_path (str) - JSON file holding 'run_id' and a 'logging'
      section with 'level', 'format' and an optional 'directory' (default "runs").
    - Outputs: logging.Logger - The configured logger.
    - Side Effects: Creates <directory>/<run_id>/ if missing.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config['logging']

    run_dir = os.path.join(log_config.get('directory', 'runs'), run_id)
    os.makedirs(run_dir, exist_ok=True)
    log_file = os.path.join(run_dir, LOG_FILENAME)

    formatter = logging.Formatter(log_config['format'])
    handlers = [logging.FileHandler(log_file), logging.StreamHandler()]
    for handler in handlers:
        handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])
    logger.propagate = False
    _replace_handlers(logger, handlers)

    logger.info(f"Logging ready for run '{run_id}', writing to {log_file}")
    return logger
