import logging
import random

import pytest

from flappy_loop.config import GameConfig
from flappy_loop.controller import GameController
from flappy_loop.physics_core import PhysicsCore
from flappy_loop.pipe_spawner import PipeSpawner
from flappy_loop.scheduler import ManualTimer


class TimerRecorder:
    """Timer factory that hands out ManualTimers and remembers them by name."""

    def __init__(self):
        self.timers = {}

    def __call__(self, interval, callback, name):
        timer = ManualTimer(interval, callback, name)
        self.timers[name] = timer
        return timer

    @property
    def tick(self) -> ManualTimer:
        return self.timers["flappy-tick"]

    @property
    def spawn(self) -> ManualTimer:
        return self.timers["flappy-spawn"]


@pytest.fixture()
def config():
    return GameConfig(viewport_width=800.0, viewport_height=600.0, gap_height=150.0)


@pytest.fixture()
def core(config):
    return PhysicsCore(config)


@pytest.fixture()
def spawner(config):
    return PipeSpawner(config, rng=random.Random(1234))


@pytest.fixture()
def timers():
    return TimerRecorder()


@pytest.fixture()
def controller(config, timers):
    ctrl = GameController(config, timer_factory=timers, rng=random.Random(1234))
    yield ctrl
    ctrl.close()


@pytest.fixture(autouse=True)
def detach_log_handlers():
    yield
    root = logging.getLogger("flappy_loop")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
