"""Null checks for arbitrary values."""

from __future__ import annotations

from typing import Any

__all__ = ["is_null", "not_null"]


def is_null(a: Any) -> bool:
    """Return True when *a* holds no value at all."""
    return a is None


def not_null(a: Any) -> bool:
    """Return True when *a* holds a value."""
    return not is_null(a)