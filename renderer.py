# renderer.py

import logging

import pygame

logger = logging.getLogger("bouncing_balls")


class InitializationError(RuntimeError):
    """Raised when the rendering surface cannot be acquired at startup."""


class PygameSurface:
    """
    Thin drawing adapter over a pygame.Surface.

    Data Contract:
    - Inputs: surface (pygame.Surface) - The target to draw on.
    - Outputs: None. All methods draw in place.
    - Invariants: width and height are read once and never change.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.width, self.height = surface.get_size()

    def clear(self, rect=None):
        """Wipes rect (x, y, w, h) to transparent black, or the whole surface when rect is None."""
        self.surface.fill((0, 0, 0, 0), rect)

    def fill_rect(self, color, rect=None):
        """Fills rect (x, y, w, h) with color, or the whole surface when rect is None."""
        if rect is None:
            rect = (0, 0, self.width, self.height)
        self.surface.fill(pygame.Color(color), rect)

    def fill_circle(self, center, radius, color):
        pygame.draw.circle(
            self.surface,
            pygame.Color(color),
            (round(center[0]), round(center[1])),
            round(radius)
        )


def acquire_surface(width: int, height: int, title: str) -> PygameSurface:
    """
    Opens the display window and wraps it for drawing.

    Raises InitializationError if pygame cannot provide a usable surface.
    This is fatal and is not retried.
    """
    try:
        screen = pygame.display.set_mode((width, height))
    except pygame.error as e:
        raise InitializationError(f"Could not open a {width}x{height} display: {e}") from e

    if screen is None or screen.get_width() <= 0 or screen.get_height() <= 0:
        raise InitializationError(f"Display surface has no drawable area: {screen}")

    pygame.display.set_caption(title)
    logger.info(f"Display surface acquired: {screen.get_width()}x{screen.get_height()}")
    return PygameSurface(screen)


class PygameHost:
    """
    Drives the application from pygame's event loop.

    Provides the two platform primitives the simulation needs: a
    "run this callback on the next frame" scheduler and click-event
    registration. Callbacks run one at a time and never preempt each other.
    """
    def __init__(self, fps: int):
        self.fps = fps
        self.clock = pygame.time.Clock()
        self.running = False
        self._pending_frame = None
        self._click_handlers = []

    def request_frame(self, callback):
        """Schedules callback to run once on the next display refresh."""
        self._pending_frame = callback

    def on_click(self, handler):
        """Registers handler to be called with (x, y) on every left click."""
        self._click_handlers.append(handler)

    def dispatch(self, event):
        if event.type == pygame.QUIT:
            logger.info("Quit requested.")
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for handler in self._click_handlers:
                handler(event.pos)

    def run_frame(self):
        """Runs the pending frame callback, if any. It may schedule the next one."""
        callback, self._pending_frame = self._pending_frame, None
        if callback is not None:
            callback()

    def run(self):
        self.running = True
        while self.running:
            for event in pygame.event.get():
                self.dispatch(event)

            if not self.running:
                break

            self.run_frame()
            pygame.display.flip()
            self.clock.tick(self.fps)
