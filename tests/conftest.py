#!/usr/bin/env python3
"""Shared test fixtures for unwrap_print tests."""

from __future__ import annotations

import pytest

from unwrap_print.config import settings
from unwrap_print.printer import force_install, reset
from unwrap_print.printer.sinks import InMemorySink


@pytest.fixture(autouse=True)
def empty_printer_slot(monkeypatch):
    """Every test starts and ends with no global printer and capture off."""
    monkeypatch.setattr(settings, "TRACK_CALLER", False)
    reset()
    yield
    reset()


@pytest.fixture
def capture_sink() -> InMemorySink:
    """Install a capturing printer over whatever is in the slot."""
    sink = InMemorySink()
    force_install(sink)
    return sink


@pytest.fixture
def track_caller(monkeypatch):
    """Turn call-site capture on for the duration of a test."""
    monkeypatch.setattr(settings, "TRACK_CALLER", True)
