"""Exceptions raised by the view layer."""

from __future__ import annotations

from typing import Optional


class IndexOutOfRange(IndexError):
    """Raised when a logical index or position falls outside a view."""

    def __init__(
        self, message: str, *, index: Optional[int] = None, size: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.index = index
        self.size = size


class PredicateBindingError(TypeError):
    """Raised when a position-bound predicate is asked about a bare character."""
