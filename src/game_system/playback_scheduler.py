"""
Cancellable deferred callbacks for replaying the round sequence
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .config import TimingConfig


class PlaybackToken:
    """Validity flag shared by every task scheduled in one playback run"""

    def __init__(self):
        self.valid: bool = True

    def invalidate(self) -> None:
        self.valid = False


@dataclass(order=True)
class ScheduledTask:
    """A callback due at an absolute time (ms), fired only while its token is valid"""
    due_ms: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    token: PlaybackToken = field(compare=False)


class PlaybackScheduler:
    """
    Deferred-callback list driven by the game loop.

    Nothing runs on its own thread: the owner calls update() every frame and
    due callbacks fire there, in due-time order, each to completion. All tasks
    belong to the current token; cancel() invalidates it so pending tasks from
    an abandoned playback can never fire.

    Example:
        scheduler = PlaybackScheduler(TimingConfig(), logger)
        scheduler.play_sequence([2, 0, 1], on_activate, on_deactivate, on_complete)

        # In update loop:
        scheduler.update()
    """

    def __init__(self,
                 timing: TimingConfig,
                 logger,
                 clock: Optional[Callable[[], float]] = None):
        """
        Args:
            timing: Cue spacing and durations
            logger: ClassLogger instance
            clock: Millisecond clock (defaults to wall clock)
        """
        self.timing = timing
        self.logger = logger
        self._clock = clock or (lambda: time.time() * 1000)
        self._token = PlaybackToken()
        self._tasks: List[ScheduledTask] = []
        self._seq = 0

    @property
    def pending_count(self) -> int:
        """Number of tasks still waiting to fire"""
        return len(self._tasks)

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledTask:
        """
        Schedule a callback delay_ms from now under the current token.

        Args:
            delay_ms: Delay in milliseconds (0 fires on the next update)
            callback: Zero-argument callable

        Returns:
            The scheduled task
        """
        task = ScheduledTask(self._clock() + delay_ms, self._seq, callback, self._token)
        self._seq += 1
        self._tasks.append(task)
        self._tasks.sort()
        return task

    def play_sequence(self,
                      sequence: Sequence[int],
                      on_activate: Callable[[int], None],
                      on_deactivate: Callable[[int], None],
                      on_complete: Callable[[], None]) -> None:
        """
        Schedule a full replay of the sequence, cancelling any playback in flight.

        Cue i lights at pre_roll + i * step_interval and goes dark tone_on later.
        on_complete fires once, ready_delay after the last cue goes dark.

        Args:
            sequence: Symbol ids to replay (must not be empty)
            on_activate: Called with the symbol id when its cue starts
            on_deactivate: Called with the symbol id when its cue ends
            on_complete: Called once when input may open

        Raises:
            ValueError: If the sequence is empty
        """
        if not sequence:
            raise ValueError("Cannot play back an empty sequence")

        self.cancel()
        timing = self.timing

        for index, symbol_id in enumerate(sequence):
            start = timing.pre_roll_ms + index * timing.step_interval_ms
            self.schedule(start, lambda s=symbol_id: on_activate(s))
            self.schedule(start + timing.tone_on_ms, lambda s=symbol_id: on_deactivate(s))

        self.schedule(timing.playback_duration_ms(len(sequence)), on_complete)

        self.logger.debug(
            f"Playback scheduled: {len(sequence)} cues over "
            f"{timing.playback_duration_ms(len(sequence))}ms"
        )

    def cancel(self) -> None:
        """Invalidate the current token and drop every pending task"""
        if self._tasks:
            self.logger.debug(f"Playback cancelled with {len(self._tasks)} pending tasks")
        self._token.invalidate()
        self._token = PlaybackToken()
        self._tasks.clear()

    def update(self) -> int:
        """
        Fire every task that is due.

        Returns:
            Number of callbacks fired
        """
        now = self._clock()
        fired = 0

        while self._tasks and self._tasks[0].due_ms <= now:
            task = self._tasks.pop(0)
            if not task.token.valid:
                continue
            task.callback()
            fired += 1

        return fired
