import json
import logging

from flappy_loop.data_models import BirdState, GameState, Pipe
from flappy_loop.logger import (
    ConsoleFormatter, StateFileFormatter, get_logger, log_state, setup_logging,
)


def make_record(state=None, level=logging.INFO, name="flappy_loop.controller"):
    record = logging.LogRecord(name, level, __file__, 1, "Game over", None, None)
    if state is not None:
        record.state = state.to_dict()
    return record


def sample_state():
    return GameState(bird=BirdState(12.5, -3.0), pipes=[Pipe(x=10.0, gap_top=200.0)],
                     score=4, game_over=True, playing=True, ticks=90)


def test_console_line_summarises_state():
    line = ConsoleFormatter(color=False).format(make_record(sample_state()))
    assert "[I] controller: Game over" in line
    assert "game_over score=4 tick=90 y=12.5 v=-3.0 pipes=1" in line
    assert "\033[" not in line


def test_console_colours_only_warnings_and_up():
    fmt = ConsoleFormatter(color=True)
    assert "\033[" not in fmt.format(make_record())
    assert fmt.format(make_record(level=logging.WARNING)).startswith("\033[33m")


def test_file_line_carries_full_state():
    entry = json.loads(StateFileFormatter().format(make_record(sample_state())))
    assert entry["msg"] == "Game over"
    assert entry["level"] == "info"
    assert entry["state"]["score"] == 4
    assert entry["state"]["pipes"] == [{"x": 10.0, "gap_top": 200.0}]


def test_file_line_without_state():
    entry = json.loads(StateFileFormatter().format(make_record()))
    assert "state" not in entry


def test_log_state_skips_disabled_levels(caplog):
    logger = get_logger("tests")
    with caplog.at_level(logging.INFO, logger="flappy_loop"):
        log_state(logger, "Tick", sample_state(), logging.DEBUG)
        log_state(logger, "Game over", sample_state())
    assert [r.getMessage() for r in caplog.records] == ["Game over"]
    assert caplog.records[0].state["status"] == "game_over"


def test_get_logger_namespacing():
    assert get_logger("flappy_loop.controller").name == "flappy_loop.controller"
    assert get_logger("bot").name == "flappy_loop.bot"


def test_setup_logging_writes_ndjson_file(tmp_path):
    log_file = tmp_path / "run.ndjson"
    setup_logging("debug", str(log_file))
    try:
        log_state(get_logger("tests"), "Game reset", GameState())
    finally:
        root = logging.getLogger("flappy_loop")
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
    lines = log_file.read_text(encoding="utf-8").splitlines()
    entry = json.loads(lines[-1])
    assert entry["msg"] == "Game reset"
    assert entry["state"]["status"] == "idle"
