"""
scheduler.py: Best-effort periodic drivers for the tick and spawn loops.
"""

import threading
import time
from typing import Callable, Optional, Protocol

from .logger import get_logger

logger = get_logger(__name__)

# A driver callback returns False to cancel its own timer.
TimerCallback = Callable[[], bool]


class Timer(Protocol):
    def start(self) -> None: ...
    def stop(self) -> None: ...
    @property
    def running(self) -> bool: ...


TimerFactory = Callable[[float, TimerCallback, str], Timer]


class PeriodicTimer:
    """
    Calls `callback` every `interval` seconds on a daemon thread.

    There is no catch-up: a late fire runs the callback once, then waits the
    rest of the interval. The timer stops when `stop()` is called, when the
    callback returns False or when it raises.
    """

    def __init__(self, interval: float, callback: TimerCallback, name: str = "timer"):
        self.interval = interval
        self.callback = callback
        self.name = name
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stopped.is_set()

    def start(self):
        if self._thread is not None:
            raise RuntimeError(f"Timer {self.name!r} already started")
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()

    def stop(self):
        self._stopped.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _loop(self):
        logger.debug("Timer %s started (interval %.3fs)", self.name, self.interval)
        # First fire happens one interval after start.
        delay = self.interval
        while not self._stopped.wait(delay):
            start_time = time.monotonic()
            try:
                keep_going = self.callback()
            except Exception:
                logger.exception("Timer %s callback failed; stopping", self.name)
                break
            if keep_going is False:
                break

            # Time remaining until the next fire
            elapsed = time.monotonic() - start_time
            delay = max(self.interval - elapsed, 0.0)
            if delay == 0.0:
                logger.debug("Timer %s overran its interval by %.3fs", self.name, elapsed - self.interval)
        self._stopped.set()
        logger.debug("Timer %s stopped", self.name)


def thread_timer_factory(interval: float, callback: TimerCallback, name: str) -> Timer:
    return PeriodicTimer(interval, callback, name)


class ManualTimer:
    """
    Timer that only fires when told to. Used for headless runs and tests,
    where the caller decides when a tick or spawn happens.
    """

    def __init__(self, interval: float, callback: TimerCallback, name: str = "timer"):
        self.interval = interval
        self.callback = callback
        self.name = name
        self.fired = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        self._running = True

    def stop(self):
        self._running = False

    def fire(self) -> bool:
        """Run the callback once if running. Returns whether the timer is still running."""
        if not self._running:
            return False
        self.fired += 1
        if self.callback() is False:
            self._running = False
        return self._running
