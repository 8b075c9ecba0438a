#!/usr/bin/env python3
from __future__ import annotations

import logging


class LoggerSink:
    """Forwards diagnostics to a stdlib logger."""

    def __init__(self, name: str = "unwrap_print.diagnostics", level: int = logging.ERROR):
        self.level = level
        self.logger = logging.getLogger(name)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(level)
        if not self.logger.handlers and not logging.getLogger().handlers:
            # Make sure something is emitted before the host configures logging
            handler = logging.StreamHandler()
            handler.setLevel(level)
            self.logger.addHandler(handler)

    def __call__(self, text: str) -> None:
        self.logger.log(self.level, text)
