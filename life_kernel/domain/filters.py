from __future__ import annotations

from collections import deque
from enum import Enum

AliveSnapshot = frozenset[tuple[int, int]]


class TerminationReason(str, Enum):
    """Termination reason labels persisted in run metadata."""

    EXTINCT = "extinct"
    HALT = "halt"
    SHORT_PERIOD = "short_period"


class ExtinctionDetector:
    """Detect a board with no live cells."""

    def observe(self, population: int) -> bool:
        return population == 0


class HaltDetector:
    """Detect N consecutive unchanged snapshots."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last_snapshot: AliveSnapshot | None = None
        self._unchanged_count = 0

    def observe(self, snapshot: AliveSnapshot) -> bool:
        """Return True once snapshot has remained unchanged for `window` checks."""
        if self._last_snapshot is None:
            self._last_snapshot = snapshot
            return False

        if snapshot == self._last_snapshot:
            self._unchanged_count += 1
        else:
            self._unchanged_count = 0
            self._last_snapshot = snapshot

        return self._unchanged_count >= self.window


class ShortPeriodDetector:
    """Detect oscillation with a period between 2 and `max_period`.

    Period 1 (a still life) is left to ``HaltDetector``.
    """

    def __init__(self, max_period: int, history_size: int) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < max_period * 2:
            raise ValueError("history_size must be >= 2 * max_period")
        self.max_period = max_period
        self._history: deque[AliveSnapshot] = deque(maxlen=history_size)

    def observe(self, snapshot: AliveSnapshot) -> bool:
        """Return True once the last 2 * p snapshots repeat with some period p."""
        self._history.append(snapshot)
        history = self._history
        for period in range(2, self.max_period + 1):
            if len(history) < period * 2:
                break
            if history[-1] == history[-2]:
                break
            if all(history[-i] == history[-i - period] for i in range(1, period + 1)):
                return True
        return False
