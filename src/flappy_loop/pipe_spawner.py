"""
pipe_spawner.py: Appends new pipes at the right edge of the viewport.
"""

import random
from typing import Optional

from .config import GameConfig
from .constants import PIPE_GAP_MARGIN
from .data_models import GameState, Pipe
from .logger import get_logger

logger = get_logger(__name__)


class PipeSpawner:
    """Generates pipes with a random gap position. Called once per spawn interval."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self._warned_degenerate = False

    def gap_range(self):
        """Bounds of the uniform draw for `gap_top`."""
        low = PIPE_GAP_MARGIN
        high = self.config.viewport_height - self.config.gap_height - PIPE_GAP_MARGIN
        return low, high

    def next_gap_top(self) -> float:
        low, high = self.gap_range()
        if high < low:
            # Viewport too short for the margins: centre the gap instead.
            if not self._warned_degenerate:
                logger.warning(
                    "Viewport height %.1f leaves no room for a %.1f gap with %.0f margins; "
                    "pipes will be centred",
                    self.config.viewport_height, self.config.gap_height, PIPE_GAP_MARGIN,
                )
                self._warned_degenerate = True
            return max(0.0, (self.config.viewport_height - self.config.gap_height) / 2)
        return self.rng.uniform(low, high)

    def spawn(self, state: GameState) -> GameState:
        """Returns a copy of `state` with one more pipe, unless the game is over."""
        state = state.copy()
        if state.game_over:
            return state
        pipe = Pipe(x=float(self.config.viewport_width), gap_top=self.next_gap_top())
        state.pipes.append(pipe)
        logger.debug("Spawned pipe gap_top=%.2f (%d on screen)", pipe.gap_top, len(state.pipes))
        return state
