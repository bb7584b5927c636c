"""Frame, fixed-step and labelled wall-clock timing."""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

Clock = Callable[[], float]

MAX_DELTA_TIME = 0.2
FIXED_DELTA_TIME = 1.0 / 60.0


class Timer:
    """Tracks frame deltas, fixed-step updates and named interval timers.

    ``clock`` returns the current time in seconds; it defaults to
    :func:`time.perf_counter`.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock if clock is not None else time.perf_counter
        self._times: Dict[str, float] = {}
        self._history: Dict[str, float] = {}
        self._frames: Dict[str, int] = {}
        self._accumulated: Dict[str, float] = {}

        self._frame_count = 0
        self._physics_frame_count = 0
        self._elapsed_time = 0.0
        self._delta_time = 0.0
        self._fixed_delta_time = FIXED_DELTA_TIME

        now = self.current_time()
        self._last_update_time = now
        self._fixed_update_timer = now

    def current_time(self) -> float:
        return float(self._clock())

    def start_timer(self, label: str) -> None:
        self._times[label] = self.current_time()

    def end_timer(self, label: str, frame: Optional[int] = None) -> float:
        """Return the seconds since ``start_timer(label)``.

        Calls made during the same frame accumulate. An unknown label
        gives -1.
        """
        if label not in self._times:
            return -1.0
        elapsed = self.current_time() - self._times[label]
        if frame is None or frame == -1:
            frame = self._frame_count
        if frame > self._frames.get(label, 0):
            self._history[label] = elapsed
        else:
            self._history[label] = self._history.get(label, 0.0) + elapsed
        self._frames[label] = frame
        return self._history[label]

    def get_timer(self, label: str) -> float:
        """Return the last recorded time of ``label`` in seconds, or 0."""
        return self._history.get(label, 0.0)

    def update_delta_time(self) -> None:
        current = self.current_time()
        self._delta_time = min(current - self._last_update_time, MAX_DELTA_TIME)
        self._last_update_time = current

    def next_frame(self) -> None:
        self._frame_count += 1
        self._elapsed_time += self._delta_time

    def next_fixed_frame(self) -> bool:
        """Advance the fixed-step accumulator; True when a fixed update is due."""
        self._fixed_update_timer += self._delta_time
        if self._fixed_update_timer > self._fixed_delta_time:
            self._fixed_update_timer = 0.0
            self._physics_frame_count += 1
            return True
        return False

    def periodic_update(self, label: str, interval: float, allow_repetition: bool = True) -> bool:
        """True once every ``interval`` seconds of elapsed time for ``label``."""
        due = self._accumulated.setdefault(label, 0.0)
        if due < self._elapsed_time:
            if allow_repetition:
                self._accumulated[label] = due + interval
            else:
                self._accumulated[label] = self._elapsed_time + interval
            return True
        return False

    def frame_count(self) -> int:
        return self._frame_count

    def physics_frame_count(self) -> int:
        return self._physics_frame_count

    def elapsed_time(self) -> float:
        return self._elapsed_time

    def delta_time(self) -> float:
        return self._delta_time

    def fixed_delta_time(self) -> float:
        return self._fixed_delta_time