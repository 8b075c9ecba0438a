#!/usr/bin/env python3
"""Call-site capture for diagnostics."""

from __future__ import annotations

import inspect
from dataclasses import dataclass

UNKNOWN_FILE = "<unknown>"


@dataclass(frozen=True)
class CallSite:
    """Source position of a call: file, 1-based line and 1-based column."""
    file: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


def caller_location(stacklevel: int = 1) -> CallSite:
    """Return where the function calling this one was called from.

    ``stacklevel=1`` is the immediate caller of the function that invokes
    ``caller_location``; each extra level skips one more wrapper frame.
    Columns come from the interpreter's recorded instruction positions and
    fall back to 1 where those are unavailable. The column is the start of
    the whole call expression, so for ``Err("boom").unwrap_print()`` it points
    at ``Err`` rather than at the method name.
    """
    if stacklevel < 1:
        raise ValueError("stacklevel must be >= 1")

    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return CallSite(UNKNOWN_FILE, 0)

        info = inspect.getframeinfo(frame, context=0)
        positions = getattr(info, "positions", None)
        column = 1
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1
        return CallSite(info.filename, info.lineno, column)
    finally:
        del frame
