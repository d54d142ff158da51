"""Precondition checks shared by view operations."""

from __future__ import annotations

from typing import Optional

from .errors import IndexOutOfRange


def ensure_index(index: int, size: int) -> int:
    if index < 0 or index >= size:
        raise IndexOutOfRange(
            f"FilteredStringView.at({index}): invalid index for view of size {size}",
            index=index,
            size=size,
        )
    return index


def ensure_position(pos: int, size: int) -> int:
    if pos < 0 or pos > size:
        raise IndexOutOfRange(
            f"substr({pos}): position out of range for view of size {size}",
            index=pos,
            size=size,
        )
    return pos


def ensure_count(count: Optional[int]) -> Optional[int]:
    if count is not None and count < 0:
        raise ValueError(f"substr count must be non-negative, got {count}")
    return count
