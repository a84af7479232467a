"""
controller.py: The game state machine driving the simulation on two timers.
"""

import logging
import random
import threading
from typing import Callable, List, Optional

from .config import GameConfig
from .data_models import GameState, GameStatus
from .logger import get_logger, log_state
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner
from .scheduler import Timer, TimerFactory, thread_timer_factory

logger = get_logger(__name__)

StateListener = Callable[[GameState], None]


class GameController:
    """
    Owns the single live GameState.

    IDLE -> PLAYING on the first jump (or start), PLAYING -> GAME_OVER when the
    step reports a collision, any state -> IDLE on reset. Commands that do not
    apply to the current state are no-ops.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        timer_factory: TimerFactory = thread_timer_factory,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.core = PhysicsCore(self.config)
        self.spawner = PipeSpawner(self.config, rng=rng)
        self._timer_factory = timer_factory

        self._lock = threading.Lock()
        # Serializes reset/start/close so drivers and state always change together.
        self._command_lock = threading.RLock()
        self._state = GameState()
        self._tick_timer: Optional[Timer] = None
        self._spawn_timer: Optional[Timer] = None
        self._listeners: List[StateListener] = []

    # ---- Observation ----

    @property
    def status(self) -> GameStatus:
        with self._lock:
            return self._state.status

    def snapshot(self) -> GameState:
        """Safely retrieve a copy of the live state."""
        with self._lock:
            return self._state.copy()

    def add_listener(self, listener: StateListener):
        """`listener` receives a snapshot after every mutation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener):
        self._listeners.remove(listener)

    def _notify(self, state: GameState):
        for listener in list(self._listeners):
            listener(state)

    # ---- Commands ----

    def reset(self):
        """Any state -> IDLE. Stops both drivers and clears the board."""
        with self._command_lock:
            self._stop_timers()
            with self._lock:
                self._state = GameState()
                state = self._state.copy()
        log_state(logger, "Game reset", state)
        self._notify(state)

    def start(self):
        """IDLE -> PLAYING and start both drivers; no-op otherwise."""
        with self._command_lock:
            with self._lock:
                if self._state.status is not GameStatus.IDLE:
                    return
                self._state.playing = True
                state = self._state.copy()
            self._start_timers()
        log_state(logger, "Game started", state)
        self._notify(state)

    def jump(self):
        """Apply the jump impulse, starting the run first if idle. No-op after game over."""
        if self.status is GameStatus.IDLE:
            self.start()
        with self._lock:
            if self._state.status is not GameStatus.PLAYING:
                return
            self._state.bird.velocity = self.core.flap()
            state = self._state.copy()
        log_state(logger, "Jump", state, logging.DEBUG)
        self._notify(state)

    def start_and_jump(self):
        """What the jump button does: start if idle, then jump."""
        self.start()
        self.jump()

    def restart(self):
        """What the game-over overlay's restart button does."""
        self.reset()
        self.start()

    def advance(self, ticks: int = 1) -> GameState:
        """Run `ticks` simulation steps synchronously, as the tick driver would."""
        for _ in range(ticks):
            self._on_tick()
        return self.snapshot()

    def spawn_now(self) -> GameState:
        """Spawn one pipe synchronously, as the spawn driver would."""
        self._on_spawn()
        return self.snapshot()

    def close(self):
        with self._command_lock:
            self._stop_timers()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # ---- Drivers ----

    def _on_tick(self) -> bool:
        with self._lock:
            if self._state.game_over:
                return False
            self._state = self.core.step(self._state)
            state = self._state.copy()
        if state.game_over:
            log_state(logger, "Game over", state)
        else:
            log_state(logger, "Tick", state, logging.DEBUG)
        self._notify(state)
        return not state.game_over

    def _on_spawn(self) -> bool:
        with self._lock:
            if self._state.game_over:
                return False
            if not self._state.playing:
                return True
            self._state = self.spawner.spawn(self._state)
            state = self._state.copy()
        self._notify(state)
        return True

    def _start_timers(self):
        self._stop_timers()
        self._tick_timer = self._timer_factory(
            self.config.tick_interval_seconds, self._on_tick, "flappy-tick")
        self._spawn_timer = self._timer_factory(
            self.config.spawn_interval_seconds, self._on_spawn, "flappy-spawn")
        self._tick_timer.start()
        self._spawn_timer.start()

    def _stop_timers(self):
        for timer in (self._tick_timer, self._spawn_timer):
            if timer is not None:
                timer.stop()
        self._tick_timer = None
        self._spawn_timer = None
