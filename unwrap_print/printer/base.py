#!/usr/bin/env python3
from __future__ import annotations

from typing import Protocol


class Printer(Protocol):
    """Sink contract: receives one fully formatted diagnostic line.

    A printer is never called while the registry lock is held, so it may call
    back into ``dispatch`` or ``unwrap_print``.
    """

    def __call__(self, text: str) -> None: ...
