#!/usr/bin/env python3
from __future__ import annotations

import sys
from typing import TextIO


class ConsoleSink:
    """Writes each diagnostic line to a text stream, stdout by default."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def __call__(self, text: str) -> None:
        # None means "whatever sys.stdout is right now"
        stream = self.stream if self.stream is not None else sys.stdout
        print(text, file=stream, flush=True)
