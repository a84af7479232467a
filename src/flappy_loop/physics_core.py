"""
physics_core.py: The deterministic simulation step and collision logic.
"""

from typing import Optional, Tuple

from .config import GameConfig
from .data_models import GameState, Pipe
from .logger import get_logger

logger = get_logger(__name__)


class PhysicsCore:
    """
    Advances a GameState by one fixed tick.

    The step never mutates the state it is given; it works on a copy and
    returns it. Pure given (state, config).
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """Calculates new position and velocity after one tick."""
        velocity += self.config.gravity
        if self.config.max_fall_velocity is not None:
            velocity = min(velocity, self.config.max_fall_velocity)
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity right after a jump."""
        return -self.config.jump_impulse

    def out_of_bounds(self, y: float) -> bool:
        half = self.config.half_height
        return y > half or y < -half

    def in_collision_window(self, pipe: Pipe) -> bool:
        bird_x = self.config.bird_x
        return bird_x - self.config.pipe_width < pipe.x < bird_x

    def gap_band(self, pipe: Pipe) -> Tuple[float, float]:
        """Range of bird offsets that fit through the pipe's gap."""
        cfg = self.config
        top = pipe.gap_top - cfg.half_height + cfg.bird_radius
        bottom = pipe.gap_top + cfg.gap_height - cfg.half_height - cfg.bird_radius
        return top, bottom

    def hits_pipe(self, y: float, pipe: Pipe) -> bool:
        top, bottom = self.gap_band(pipe)
        return y < top or y > bottom

    def step(self, state: GameState) -> GameState:
        """The main simulation step: gravity, pipes, collisions, score, pruning."""
        state = state.copy()
        if not state.playing or state.game_over:
            return state

        cfg = self.config
        bird = state.bird

        # 1. Bird
        bird.offset, bird.velocity = self.apply_gravity_and_movement(bird.offset, bird.velocity)

        # 2. Pipes
        for pipe in state.pipes:
            pipe.x -= cfg.pipe_speed

        # 3. Viewport edges
        if self.out_of_bounds(bird.offset):
            logger.debug("Bird left the viewport at y=%.2f", bird.offset)
            state.game_over = True

        # 4. Pipe collisions and score
        for pipe in state.pipes:
            if not self.in_collision_window(pipe):
                continue
            if self.hits_pipe(bird.offset, pipe):
                logger.debug("Bird hit pipe at x=%.2f (y=%.2f)", pipe.x, bird.offset)
                state.game_over = True
            elif not (cfg.score_once_per_pipe and pipe.scored):
                state.score += 1
                pipe.scored = True

        # 5. Off-screen pipes
        while state.pipes and state.pipes[0].x < -cfg.viewport_width:
            state.pipes.pop(0)

        state.ticks += 1
        return state
