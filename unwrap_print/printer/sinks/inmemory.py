#!/usr/bin/env python3
from __future__ import annotations

import threading


class InMemorySink:
    """Capturing sink for test assertions."""

    def __init__(self):
        self._lock = threading.Lock()
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        """Store the line for later assertion."""
        with self._lock:
            self.lines.append(text)

    def clear(self) -> None:
        """Drop captured lines; useful in test setup."""
        with self._lock:
            self.lines.clear()

    def get_lines(self) -> list[str]:
        """Return a copy of the captured lines."""
        with self._lock:
            return self.lines.copy()
