import logging
import random

from flappy_loop.config import GameConfig
from flappy_loop.data_models import GameState, Pipe
from flappy_loop.pipe_spawner import PipeSpawner


def test_spawn_appends_pipe_at_right_edge(spawner):
    state = spawner.spawn(GameState(playing=True))
    assert len(state.pipes) == 1
    assert state.pipes[0].x == 800.0
    assert 100.0 <= state.pipes[0].gap_top <= 350.0


def test_spawn_appends_after_existing_pipes(spawner):
    state = GameState(pipes=[Pipe(x=-20.0, gap_top=120.0)])
    new = spawner.spawn(state)
    assert [p.x for p in new.pipes] == [-20.0, 800.0]
    assert len(state.pipes) == 1


def test_gap_draws_stay_in_range(spawner):
    assert spawner.gap_range() == (100.0, 350.0)
    for _ in range(500):
        assert 100.0 <= spawner.next_gap_top() <= 350.0


def test_spawn_is_noop_after_game_over(spawner):
    state = GameState(game_over=True, playing=True)
    assert spawner.spawn(state).pipes == []


def test_same_seed_same_pipes():
    config = GameConfig(seed=42)
    a = PipeSpawner(config)
    b = PipeSpawner(config)
    assert [a.next_gap_top() for _ in range(10)] == [b.next_gap_top() for _ in range(10)]


def test_injected_rng_is_used():
    config = GameConfig(viewport_height=600.0, gap_height=150.0)
    spawner = PipeSpawner(config, rng=random.Random(7))
    expected = random.Random(7).uniform(100.0, 350.0)
    assert spawner.next_gap_top() == expected


def test_degenerate_viewport_centres_gap(caplog):
    spawner = PipeSpawner(GameConfig(viewport_height=300.0, gap_height=150.0))
    with caplog.at_level(logging.WARNING, logger="flappy_loop"):
        first = spawner.spawn(GameState())
        second = spawner.spawn(first)
    assert [p.gap_top for p in second.pipes] == [75.0, 75.0]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_degenerate_viewport_never_negative():
    spawner = PipeSpawner(GameConfig(viewport_height=100.0, gap_height=150.0))
    assert spawner.next_gap_top() == 0.0
