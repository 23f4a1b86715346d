"""Synchronized-update state with a timeout."""

from __future__ import annotations

import time


class SyncState:
    """Tracks whether drawing is held back for a synchronized update."""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._started = 0.0
        self.active = False
        self.write_aborted = False

    def begin(self):
        """Start a synchronized update."""
        self._started = self._clock()
        self.active = True

    def end(self):
        """Finish the synchronized update."""
        self.active = False

    def in_sync(self, timeout_ms):
        """Whether the update is still held, ending it once ``timeout_ms`` has passed."""
        if self.active and (self._clock() - self._started) * 1000 >= timeout_ms:
            self.active = False
        return self.active