# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework
and the bounce model. These are not expected to change between simulation runs.

Data Contract:
- All values are immutable constants.
- Units are pixels and frames (one frame is one time step).
"""

# Default window dimensions (overridden by the "display" section of config.json)
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Window Title
TITLE = "Bouncing Balls"

# Dark background theme for the canvas
BACKGROUND_COLOR = "#333333"

# Colors each spawned ball can take (hex RGB).
PALETTE = (
    "#ff6138",
    "#ffff9d",
    "#beeb9f",
    "#79bd8f",
    "#00a388",
    "#ff9ddb",
)

# Bounce model
GRAVITY = 0.2   # Added to the vertical velocity every frame.
DAMPING = 0.9   # Velocity retained on any wall, floor or ceiling bounce.
TRACTION = 0.8  # Extra horizontal velocity retained on floor contact only.

# Effective radius used for both collision and drawing.
BALL_RADIUS = 10  # Pixels

# Spawn velocity components are integers drawn from [-MAX_SPAWN_SPEED, MAX_SPAWN_SPEED].
MAX_SPAWN_SPEED = 10  # Pixels per frame

# Throttle for the per-frame diagnostics log line.
DEFAULT_LOG_INTERVAL = 100  # Frames
