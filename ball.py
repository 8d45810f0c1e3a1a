# ball.py

import logging
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from constants import BALL_RADIUS, DAMPING, GRAVITY, MAX_SPAWN_SPEED, PALETTE, TRACTION

logger = logging.getLogger("bouncing_balls")


class DrawCommand(NamedTuple):
    """A filled circle to rasterize: center, radius and color."""
    center: Tuple[float, float]
    radius: float
    color: str


@dataclass(eq=False)
class Ball:
    """
    Kinematic state of a single ball.

    Data Contract:
    - position (np.ndarray): Center (x, y) in viewport space, shape (2,).
    - velocity (np.ndarray): Per-frame displacement (vx, vy), shape (2,).
    - radius (float): Effective radius, used for collision and drawing alike.
    - color (str): Hex color taken from the palette at spawn time.
    - Invariants: Only advance() mutates position and velocity.
    """
    position: np.ndarray
    velocity: np.ndarray
    radius: float = BALL_RADIUS
    color: str = PALETTE[0]

    def __post_init__(self):
        self.position = np.array(self.position, dtype=float)
        self.velocity = np.array(self.velocity, dtype=float)


def advance(ball: Ball, bounds: tuple) -> DrawCommand:
    """
    Moves the ball forward by one frame and returns what to draw.

    Order matters: walls and floor/ceiling are resolved first, then gravity is
    added, and the position is integrated with the post-collision velocity.
    Along each axis the far bound takes priority over the near one.

    - Inputs:
        - ball (Ball): The ball to update in place.
        - bounds (tuple): The (width, height) of the viewport.
    - Outputs: DrawCommand for the ball's new center.
    """
    width, height = bounds
    radius = ball.radius
    pos = ball.position
    vel = ball.velocity

    # Left/right walls
    if pos[0] + radius >= width:
        vel[0] = -vel[0] * DAMPING
        pos[0] = width - radius
    elif pos[0] - radius <= 0:
        vel[0] = -vel[0] * DAMPING
        pos[0] = radius

    # Floor/ceiling. Rolling along the floor also bleeds off horizontal speed.
    if pos[1] + radius >= height:
        vel[1] = -vel[1] * DAMPING
        pos[1] = height - radius
        vel[0] *= TRACTION
    elif pos[1] - radius <= 0:
        vel[1] = -vel[1] * DAMPING
        pos[1] = radius

    vel[1] += GRAVITY

    pos += vel

    return DrawCommand(center=(float(pos[0]), float(pos[1])), radius=radius, color=ball.color)


def make_ball(x: float, y: float, rng: np.random.Generator, palette=PALETTE, radius: float = BALL_RADIUS) -> Ball:
    """
    Creates a ball at (x, y) with a random palette color and a random
    integer-valued velocity in [-MAX_SPAWN_SPEED, MAX_SPAWN_SPEED] per axis.
    """
    color = palette[rng.integers(len(palette))]
    velocity = rng.integers(-MAX_SPAWN_SPEED, MAX_SPAWN_SPEED, size=2, endpoint=True)
    ball = Ball(position=(x, y), velocity=velocity, radius=radius, color=color)
    logger.debug(f"Ball created: pos={ball.position}, vel={ball.velocity}, color={ball.color}")
    return ball


def kinetic_energy(ball: Ball) -> float:
    """KE = 0.5 * v^2, taking every ball to have unit mass."""
    return 0.5 * float(np.sum(ball.velocity**2))
