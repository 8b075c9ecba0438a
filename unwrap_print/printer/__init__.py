from .base import Printer
from .registry import (
    PrinterRegistry,
    default_printer,
    dispatch,
    emit,
    force_install,
    get_registry,
    installed,
    reset,
    try_install,
)

__all__ = [
    "Printer",
    "PrinterRegistry",
    "default_printer",
    "dispatch",
    "emit",
    "force_install",
    "get_registry",
    "installed",
    "reset",
    "try_install",
]
