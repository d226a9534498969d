"""Latest-request-wins debouncing for interactive drivers.

A search box fires a query on every keystroke. ``Debouncer`` keeps a single
pending call: each ``submit`` cancels the one before it and restarts the
delay, so only the last query typed within the window is searched.
"""

import logging
import threading
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.5


class Debouncer:
    """Single-slot scheduler that runs only the most recent submission."""

    def __init__(self, func: Callable[..., Any], delay: float = DEFAULT_DELAY):
        """
        Args:
            func: Function to call with the submitted arguments
            delay: Seconds to wait after the last submission
        """
        self.func = func
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._args: Optional[Tuple[tuple, dict]] = None
        # Bumped on every submit; a timer only fires for its own submission
        self._generation = 0
        # Timer thread currently running ``func``, if any
        self._running: Optional[threading.Thread] = None

    def submit(self, *args, **kwargs) -> None:
        """Schedule ``func(*args, **kwargs)``, replacing any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Superseded pending call %r", self._args)
            self._generation += 1
            self._args = (args, kwargs)
            self._timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _take(self, generation: Optional[int] = None) -> Optional[Tuple[tuple, dict]]:
        with self._lock:
            if generation is not None and generation != self._generation:
                return None
            args = self._args
            self._args = None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if generation is not None and args is not None:
                self._running = threading.current_thread()
            return args

    def _fire(self, generation: int) -> None:
        pending = self._take(generation)
        if pending is None:
            return
        args, kwargs = pending
        try:
            self.func(*args, **kwargs)
        finally:
            with self._lock:
                if self._running is threading.current_thread():
                    self._running = None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until a call already started by the timer has returned.

        Returns False if the call is still running after ``timeout`` seconds.
        """
        with self._lock:
            running = self._running
        if running is None or running is threading.current_thread():
            return True
        running.join(timeout)
        return not running.is_alive()

    def flush(self) -> bool:
        """
        Run the pending call now.

        A call the timer already started is waited for first. Returns False
        if nothing was pending.
        """
        pending = self._take()
        self.wait()
        if pending is None:
            return False
        args, kwargs = pending
        self.func(*args, **kwargs)
        return True

    def cancel(self) -> bool:
        """Drop the pending call. Returns False if nothing was pending."""
        return self._take() is not None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._args is not None
