# simulation.py

import logging

import numpy as np

import constants
from ball import advance, kinetic_energy, make_ball

logger = logging.getLogger("bouncing_balls")


class BallSimulation:
    """
    Owns every ball on screen and drives one redraw per frame.

    Data Contract:
    - Inputs:
        - surface: The rendering surface. Must expose width, height, clear(),
          fill_rect(color) and fill_circle(center, radius, color).
        - scheduler: Must expose request_frame(callback).
        - rng (np.random.Generator): The master seeded random number generator.
        - max_balls (int | None): Oldest balls are evicted beyond this count.
          Must be at least 1; anything lower raises ValueError.
          None keeps every ball for the lifetime of the process.
        - log_interval (int): Frames between diagnostics log lines.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Draws to the surface and schedules itself every frame.
    - Invariants: Balls are drawn in spawn order. The bounds are read from the
      surface once and never re-read.
    """
    def __init__(self, surface, scheduler, rng: np.random.Generator, max_balls=None,
                 log_interval: int = constants.DEFAULT_LOG_INTERVAL):
        if max_balls is not None and max_balls < 1:
            raise ValueError(f"max_balls must be at least 1 or None, got {max_balls}")

        self.surface = surface
        self.scheduler = scheduler
        self.rng = rng
        self.bounds = (surface.width, surface.height)
        self.palette = constants.PALETTE
        self.max_balls = max_balls
        self.log_interval = log_interval
        self.balls = []
        self.frame = 0

        logger.info(f"BallSimulation created with bounds {self.bounds[0]}x{self.bounds[1]}.")
        if max_balls is not None:
            logger.info(f"Ball count capped at {max_balls}.")

    def spawn(self, x: float, y: float):
        """Adds a ball at (x, y) with a random color and velocity. Always succeeds."""
        ball = make_ball(x, y, self.rng, palette=self.palette)
        self.balls.append(ball)

        if self.max_balls is not None and len(self.balls) > self.max_balls:
            evicted = len(self.balls) - self.max_balls
            del self.balls[:evicted]
            logger.info(f"{evicted} oldest ball(s) evicted. Count: {len(self.balls)}.")

        return ball

    def handle_click(self, pos):
        """Input handler: spawns a ball at the clicked point."""
        x, y = pos
        self.spawn(x, y)

    def tick(self):
        """
        Redraws one frame: background first, then every ball advanced by one
        step in spawn order. Schedules the next tick before returning.
        """
        self.surface.clear()
        self.surface.fill_rect(constants.BACKGROUND_COLOR)

        commands = []
        # Index over the live list; a ball appended mid-frame may or may not be drawn.
        i = 0
        while i < len(self.balls):
            command = advance(self.balls[i], self.bounds)
            self.surface.fill_circle(command.center, command.radius, command.color)
            commands.append(command)
            i += 1

        self.frame += 1
        if self.frame % self.log_interval == 0:
            logger.debug(
                f"Frame={self.frame}, "
                f"Balls={len(self.balls)}, "
                f"Kinetic={self.get_total_kinetic_energy():.2f}"
            )

        self.scheduler.request_frame(self.tick)
        return commands

    def start(self):
        """Draws the first frame; every later frame is scheduled by tick()."""
        logger.info("Simulation loop running.")
        self.tick()

    def get_total_kinetic_energy(self) -> float:
        """Sum of 0.5 * v^2 over every ball (unit mass)."""
        return sum(kinetic_energy(ball) for ball in self.balls)
