# main.py

import json
import logging
import sys

import numpy as np
import pygame

import constants
import logger_setup
from renderer import InitializationError, PygameHost, acquire_surface
from simulation import BallSimulation

# Get the application's dedicated logger
logger = logging.getLogger("bouncing_balls")


def main(config_path='config.json'):
    """
    Main function to initialize and run the bouncing balls demo.
    Click anywhere in the window to spawn a ball.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)

    with open(config_path, 'r') as f:
        config = json.load(f)
    display_config = config.get('display', {})
    sim_config = config.get('simulation', {})

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    try:
        surface = acquire_surface(
            display_config.get('width', constants.WIDTH),
            display_config.get('height', constants.HEIGHT),
            constants.TITLE
        )
    except InitializationError:
        logger.exception("Rendering surface unavailable. Shutting down.")
        pygame.quit()
        return 1

    host = PygameHost(display_config.get('fps', constants.FPS))
    simulation = BallSimulation(
        surface,
        host,
        rng,
        max_balls=sim_config.get('max_balls'),
        log_interval=sim_config.get('log_interval', constants.DEFAULT_LOG_INTERVAL)
    )
    host.on_click(simulation.handle_click)

    # --- Run ---
    simulation.start()
    host.run()

    logger.info(f"Application shutting down after {simulation.frame} frames with {len(simulation.balls)} balls.")
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
