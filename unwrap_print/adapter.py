#!/usr/bin/env python3
"""
Unwrap-and-report adapter.

Turns a fallible (``Ok``/``Err``) or optional (value or ``None``) container
into a ``Result``. Success passes through untouched; failure sends one
diagnostic line through the global printer and is handed back to the caller,
who decides what happens next.
"""

from __future__ import annotations

import json
import sys
from pprint import pformat
from typing import Optional, TypeVar

from .config import settings
from .location import CallSite, caller_location
from .printer.registry import dispatch
from .result import Err, Ok, Result, is_result

T = TypeVar("T")
E = TypeVar("E")

ABSENT_MARKER = "Option::None"


def render_debug(value: object) -> str:
    """Render a failure payload for a diagnostic line.

    Strings are double-quoted with JSON escaping; anything else goes through
    ``pprint.pformat`` on a single line. A payload whose repr raises falls
    back to the default ``object.__repr__``.
    """
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    try:
        return pformat(value, width=sys.maxsize)
    except Exception:
        return object.__repr__(value)


def format_diagnostic(rendered: str, location: CallSite | None = None) -> str:
    """Build the one-line diagnostic, with or without a call site."""
    if location is None:
        return f"Error: {rendered}"
    return f"Error at {location}: {rendered}"


def _resolve_location(location: CallSite | None, stacklevel: int) -> CallSite | None:
    if location is not None:
        return location
    if not settings.TRACK_CALLER:
        return None
    # +1 skips the public adapter function that called this helper
    return caller_location(stacklevel + 1)


def unwrap_print_result(
    result: Result[T, E],
    *,
    location: CallSite | None = None,
    stacklevel: int = 1,
) -> Result[T, E]:
    """Return ``result`` unchanged, reporting it first if it is an ``Err``.

    Args:
        result: ``Ok`` or ``Err``.
        location: Explicit call site; forces the ``Error at ...`` form.
        stacklevel: Which caller to attribute the diagnostic to when call-site
            capture is on. 1 is the direct caller of this function.
    """
    if isinstance(result, Ok):
        return result
    if not isinstance(result, Err):
        raise TypeError(f"expected Ok or Err, got {type(result).__name__}")

    site = _resolve_location(location, stacklevel)
    dispatch(format_diagnostic(render_debug(result.error), site))
    return result


def unwrap_print_option(
    value: Optional[T],
    *,
    location: CallSite | None = None,
    stacklevel: int = 1,
) -> Result[T, None]:
    """Wrap a present value in ``Ok``; report ``None`` and return ``Err(None)``."""
    if value is not None:
        return Ok(value)

    site = _resolve_location(location, stacklevel)
    dispatch(format_diagnostic(ABSENT_MARKER, site))
    return Err(None)


def unwrap_print(
    container: object,
    *,
    location: CallSite | None = None,
    stacklevel: int = 1,
) -> Result:
    """Generic entry point: ``Ok``/``Err`` take the result path, anything else
    is treated as an optional value where ``None`` means absent."""
    if is_result(container):
        return unwrap_print_result(container, location=location, stacklevel=stacklevel + 1)
    return unwrap_print_option(container, location=location, stacklevel=stacklevel + 1)
