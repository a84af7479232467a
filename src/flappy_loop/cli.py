"""Command-line entry point: `flappy-loop`."""

import argparse
import random
import sys

from .config import load_config
from .controller import GameController
from .errors import ConfigError
from .logger import get_logger, log_state, setup_logging
from .scheduler import ManualTimer

logger = get_logger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="flappy-loop", description="Single-screen Flappy Bird.")
    p.add_argument("--width", dest="viewport_width", type=float, default=None,
                   help="Viewport width in pixels.")
    p.add_argument("--height", dest="viewport_height", type=float, default=None,
                   help="Viewport height in pixels.")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for pipe gaps. Omit for a random run.")
    p.add_argument("--score-once", dest="score_once_per_pipe", action="store_true", default=None,
                   help="Score one point per pipe instead of one per tick inside it.")
    p.add_argument("--max-fall", dest="max_fall_velocity", type=float, default=None,
                   help="Clamp the bird's falling speed (pixels per tick).")
    p.add_argument("--log-level", default="info")
    p.add_argument("--log-file", default=None, help="Also write NDJSON logs to this file.")
    p.add_argument("--headless", type=int, metavar="TICKS", default=None,
                   help="Run TICKS ticks without a window, driven by a simple bot.")
    return p.parse_args(argv)


def run_headless(controller: GameController, ticks: int):
    """
    Steps the controller synchronously with a bot that jumps whenever the bird
    sinks below the centre of the next gap. Pipes spawn on the same
    tick/spawn ratio the timers would produce.
    """
    cfg = controller.config
    spawn_every = max(1, round(cfg.spawn_interval_seconds / cfg.tick_interval_seconds))
    controller.reset()
    controller.start()

    state = controller.snapshot()
    for tick in range(1, ticks + 1):
        if tick % spawn_every == 0:
            state = controller.spawn_now()

        target = 0.0
        ahead = [p for p in state.pipes if p.x > cfg.bird_x - cfg.pipe_width]
        if ahead:
            top, bottom = controller.core.gap_band(ahead[0])
            target = (top + bottom) / 2
        if state.bird.offset > target and state.bird.velocity >= 0:
            controller.jump()

        state = controller.advance()
        if state.game_over:
            break

    log_state(logger, "Headless run finished", state)
    return state


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = load_config(
            viewport_width=args.viewport_width,
            viewport_height=args.viewport_height,
            seed=args.seed,
            score_once_per_pipe=args.score_once_per_pipe,
            max_fall_velocity=args.max_fall_velocity,
        )
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    rng = random.Random(config.seed)
    if args.headless is not None:
        with GameController(config, timer_factory=ManualTimer, rng=rng) as controller:
            state = run_headless(controller, args.headless)
        print(f"score={state.score} ticks={state.ticks} status={state.status.value}")
        return 0

    from .client import FlappyClient

    FlappyClient(GameController(config, rng=rng)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
