"""
Timing utility for throttling execution in game loops
"""

import time
from typing import Callable, Optional


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Use this to limit how often expensive operations run in the game loop,
    even though the loop itself runs every frame (e.g., 20ms).

    Example:
        # In __init__:
        self.usage_monitor = OnceInMs(60000)  # Once per minute

        # In update loop (runs every 20ms):
        if self.usage_monitor.should_execute():
            self.log_usage()  # Only executes once per minute
    """

    def __init__(self, interval_ms: int, clock: Optional[Callable[[], float]] = None):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Millisecond clock (defaults to wall clock)
        """
        self.interval_ms = interval_ms
        self._clock = clock or (lambda: time.time() * 1000)
        self.last_execution: Optional[float] = None

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and update timer if so.

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = self._clock()
        if self.last_execution is None or current - self.last_execution >= self.interval_ms:
            self.last_execution = current
            return True
        return False
