"""
Unwrap fallible values and report failures through one global printer.

Install a printer once at startup with ``try_install``; call
``unwrap_print`` (or ``Ok``/``Err``'s ``.unwrap_print()``) wherever a failure
should be reported but still handed back to the caller. With no printer
installed, diagnostics go to stdout.
"""

from .adapter import (
    ABSENT_MARKER,
    format_diagnostic,
    render_debug,
    unwrap_print,
    unwrap_print_option,
    unwrap_print_result,
)
from .location import CallSite, caller_location
from .printer import Printer, dispatch, emit, force_install, try_install
from .result import Err, Ok, Result

__all__ = [
    "ABSENT_MARKER",
    "CallSite",
    "Err",
    "Ok",
    "Printer",
    "Result",
    "caller_location",
    "dispatch",
    "emit",
    "force_install",
    "format_diagnostic",
    "render_debug",
    "try_install",
    "unwrap_print",
    "unwrap_print_option",
    "unwrap_print_result",
]
