"""
data_models.py: Data structures for the game state.

Coordinates are offsets from the viewport centre:
x grows to the right, y (the bird's offset) grows downwards.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List


class GameStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class BirdState:
    """Vertical motion of the bird. Its x position is fixed by the config."""
    offset: float = 0.0
    velocity: float = 0.0


@dataclass
class Pipe:
    """A pipe pair; `gap_top` is the height of the upper half from the top edge."""
    x: float
    gap_top: float
    scored: bool = False


@dataclass
class GameState:
    """Everything the simulation step, the spawner and the renderer share."""
    bird: BirdState = field(default_factory=BirdState)
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    game_over: bool = False
    playing: bool = False
    ticks: int = 0

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.GAME_OVER
        if self.playing:
            return GameStatus.PLAYING
        return GameStatus.IDLE

    def copy(self) -> "GameState":
        """Independent copy: no BirdState or Pipe is shared with the original."""
        return replace(
            self,
            bird=replace(self.bird),
            pipes=[replace(p) for p in self.pipes],
        )

    def to_dict(self):
        """Prepares a minimal state dictionary for logging and rendering."""
        return {
            "status": self.status.value,
            "bird": {"y": round(self.bird.offset, 2), "v": round(self.bird.velocity, 2)},
            "pipes": [{"x": round(p.x, 2), "gap_top": round(p.gap_top, 2)} for p in self.pipes],
            "score": self.score,
            "ticks": self.ticks,
        }
