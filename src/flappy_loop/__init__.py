"""
flappy_loop: a single-screen Flappy Bird simulation loop.
"""

from .config import GameConfig, load_config
from .controller import GameController
from .data_models import BirdState, GameState, GameStatus, Pipe
from .errors import ConfigError, FlappyError
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner
from .scheduler import ManualTimer, PeriodicTimer

__all__ = [
    "BirdState",
    "ConfigError",
    "FlappyError",
    "GameConfig",
    "GameController",
    "GameState",
    "GameStatus",
    "ManualTimer",
    "PeriodicTimer",
    "PhysicsCore",
    "Pipe",
    "PipeSpawner",
    "load_config",
]
