#!/usr/bin/env python3
"""
Fallible container: ``Ok(value)`` or ``Err(error)``.

Only what the unwrap-and-report flow needs: variant checks, the payload
accessors and the ``unwrap_print`` method.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success variant carrying ``value``."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap_print(self) -> Ok[T]:
        """Return ``self``; success never reports anything."""
        return self


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failure variant carrying ``error``."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap_print(self) -> Err[E]:
        """Report this failure through the global printer and return ``self``."""
        from .adapter import unwrap_print_result

        return unwrap_print_result(self, stacklevel=2)


Result = Union[Ok[T], Err[E]]


def is_result(value: object) -> bool:
    """True for ``Ok`` and ``Err`` instances."""
    return isinstance(value, (Ok, Err))
