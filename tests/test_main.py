"""
Bootstrap tests: main() wiring with the display and event loop stubbed out.
"""

import sys
import os
import json
import logging

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import main as app
from renderer import InitializationError, PygameHost, PygameSurface


@pytest.fixture
def config_path(tmp_path):
    config = {
        "run_id": "main-test",
        "master_seed": 5,
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s - %(message)s",
            "directory": str(tmp_path / "runs"),
        },
        "display": {"width": 200, "height": 150, "fps": 60},
        "simulation": {"max_balls": 2, "log_interval": 10},
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    yield str(path)

    logger = logging.getLogger("bouncing_balls")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_missing_display_exits_non_zero(config_path, monkeypatch):
    def fail(width, height, title):
        raise InitializationError("no display")

    monkeypatch.setattr(app, "acquire_surface", fail)
    assert app.main(config_path) == 1


def test_runs_frames_and_spawns_on_click(config_path, monkeypatch):
    surfaces = []
    simulations = []

    def fake_acquire(width, height, title):
        surface = PygameSurface(pygame.Surface((width, height)))
        surfaces.append(surface)
        return surface

    class RecordingSimulation(app.BallSimulation):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            simulations.append(self)

    def fake_run(host):
        for pos in [(20, 20), (100, 75), (180, 130)]:
            host.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))
            host.run_frame()

    monkeypatch.setattr(app, "acquire_surface", fake_acquire)
    monkeypatch.setattr(PygameHost, "run", fake_run)
    monkeypatch.setattr(app, "BallSimulation", RecordingSimulation)

    assert app.main(config_path) == 0
    assert (surfaces[0].width, surfaces[0].height) == (200, 150)

    sim = simulations[0]
    assert sim.bounds == (200, 150)
    # Three clicks against a cap of two: the first ball was evicted.
    assert len(sim.balls) == 2
    # start() drew one frame, then one frame per loop pass.
    assert sim.frame == 4
