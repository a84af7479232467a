"""Logging for flappy_loop: game-state records on the console and in NDJSON files."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

ROOT_LOGGER = "flappy_loop"


def log_state(logger: logging.Logger, msg: str, state, level: int = logging.INFO) -> None:
    """Log `msg` with the state's `to_dict()` attached as the record's `state`."""
    if logger.isEnabledFor(level):
        logger.log(level, msg, extra={"state": state.to_dict()})


def _state_summary(state: dict) -> str:
    bird = state.get("bird", {})
    return (f"{state.get('status')} score={state.get('score')} tick={state.get('ticks')} "
            f"y={bird.get('y')} v={bird.get('v')} pipes={len(state.get('pipes', []))}")


class StateFileFormatter(logging.Formatter):
    """One JSON object per line, with the full state snapshot when one is attached."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        state = getattr(record, "state", None)
        if state is not None:
            entry["state"] = state
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class ConsoleFormatter(logging.Formatter):
    """`12:00:01 [I] controller: Game over  game_over score=3 tick=120 ...`"""

    LEVEL_COLORS = {
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, color: bool = True):
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        name = record.name[len(ROOT_LOGGER) + 1:] if record.name.startswith(f"{ROOT_LOGGER}.") else record.name
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        state = getattr(record, "state", None)
        if state is not None:
            line += f"  {_state_summary(state)}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        color = self.LEVEL_COLORS.get(record.levelno) if self.color else None
        return f"{color}{line}{self.RESET}" if color else line


def setup_logging(level: str = "info", log_file: str | None = None) -> None:
    """Configure the flappy_loop root logger: console always, NDJSON file optionally."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(StateFileFormatter())
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the flappy_loop namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
