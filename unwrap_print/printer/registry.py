#!/usr/bin/env python3
"""
Global printer registry.

Holds the single process-wide printer slot. The slot is created lazily on
first use, starts empty and is never torn down. All access goes through the
functions in this module; ``PrinterRegistry`` is exposed for tests and for
embedding applications that want an isolated instance.
"""

from __future__ import annotations

import logging
import sys
import threading

from .base import Printer

logger = logging.getLogger(__name__)


def default_printer(text: str) -> None:
    """Write ``text`` and a newline to the current ``sys.stdout``."""
    # Resolve sys.stdout at call time so redirections are honoured
    stream = sys.stdout
    if stream is None:
        # pythonw and detached daemons run without a stdout
        return
    stream.write(f"{text}\n")
    stream.flush()


def _printer_name(printer: Printer) -> str:
    return getattr(printer, "__qualname__", None) or printer.__class__.__name__


class PrinterRegistry:
    """Zero-or-one printer slot guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._printer: Printer | None = None

    def try_install(self, printer: Printer) -> bool:
        """Install ``printer`` only if no printer is installed yet.

        Returns:
            True when this call installed the printer, False when another
            printer was already present (the slot is left untouched).
        """
        _check_callable(printer)
        with self._lock:
            if self._printer is not None:
                return False
            self._printer = printer
        logger.debug("Installed printer %s", _printer_name(printer))
        return True

    def force_install(self, printer: Printer) -> None:
        """Replace the installed printer unconditionally.

        Meant for test harnesses and controlled re-initialization; production
        code should install once at startup with ``try_install``.
        """
        _check_callable(printer)
        with self._lock:
            previous = self._printer
            self._printer = printer
        if previous is not None:
            logger.debug(
                "Replaced printer %s with %s", _printer_name(previous), _printer_name(printer)
            )
        else:
            logger.debug("Installed printer %s", _printer_name(printer))

    def installed(self) -> Printer | None:
        """Return the installed printer, or None."""
        with self._lock:
            return self._printer

    def reset(self) -> None:
        """Empty the slot. Testing hook only."""
        with self._lock:
            self._printer = None

    def dispatch(self, text: str) -> None:
        """Route ``text`` to the installed printer or to stdout.

        The lock is released before the printer runs so a printer can
        re-enter the registry. A printer that raises, the stdout default
        included, is logged and ignored.
        """
        with self._lock:
            printer = self._printer

        if printer is None:
            printer = default_printer

        try:
            printer(text)
        except Exception as e:
            logger.warning(f"Printer {_printer_name(printer)} failed: {e}")


def _check_callable(printer: object) -> None:
    if not callable(printer):
        raise TypeError(f"printer must be callable, got {type(printer).__name__}")


_registry: PrinterRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> PrinterRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _registry
    if _registry is not None:
        return _registry

    with _registry_lock:
        if _registry is None:
            _registry = PrinterRegistry()
        return _registry


def try_install(printer: Printer) -> bool:
    """Install the global printer once; later calls return False."""
    return get_registry().try_install(printer)


def force_install(printer: Printer) -> None:
    """Overwrite the global printer. Intended for tests."""
    get_registry().force_install(printer)


def installed() -> Printer | None:
    return get_registry().installed()


def reset() -> None:
    get_registry().reset()


def dispatch(text: str) -> None:
    """Send a formatted diagnostic line through the global printer."""
    get_registry().dispatch(text)


def emit(template: str, *args: object, **kwargs: object) -> None:
    """Format ``template`` with ``str.format`` and dispatch the result.

    Without arguments the template is sent verbatim, braces included.
    """
    text = template.format(*args, **kwargs) if args or kwargs else template
    dispatch(text)
