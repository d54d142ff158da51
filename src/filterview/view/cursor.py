"""Bidirectional cursors over a filtered view."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .errors import IndexOutOfRange

if TYPE_CHECKING:  # pragma: no cover - import cycle
    from .core import FilteredStringView


class ViewCursor:
    """A raw offset into one view, always parked on a match or at the end.

    Construction snaps forward to the first match at or after ``raw_pos``.
    The end position (the raw buffer length) needs no snapping.
    ``decrement`` mirrors ``increment`` but stops at raw offset 0 even when
    that character does not match; stepping back from offset 0 leaves the
    cursor before the beginning (offset ``-1``). Reading ``value`` from
    either of those positions, or from the end, raises
    :class:`IndexOutOfRange`.
    """

    __slots__ = ("_view", "_offset")

    def __init__(self, view: "FilteredStringView", raw_pos: int = 0) -> None:
        self._view = view
        limit = len(view.raw_data())
        while 0 <= raw_pos < limit and not view.matches(raw_pos):
            raw_pos += 1
        self._offset = raw_pos

    @property
    def view(self) -> "FilteredStringView":
        return self._view

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._view.raw_data())

    @property
    def value(self) -> str:
        source = self._view.raw_data()
        offset = self._offset
        if not 0 <= offset < len(source) or not self._view.matches(offset):
            raise IndexOutOfRange(
                f"cursor at raw offset {offset} does not reference a character",
                index=offset,
                size=len(source),
            )
        return source[offset]

    def increment(self) -> "ViewCursor":
        limit = len(self._view.raw_data())
        if self._offset >= limit:
            raise IndexOutOfRange(
                "cannot advance a cursor past the end", index=self._offset, size=limit
            )
        self._offset += 1
        while self._offset < limit and not self._view.matches(self._offset):
            self._offset += 1
        return self

    def decrement(self) -> "ViewCursor":
        if self._offset <= 0:
            self._offset = -1
            return self
        self._offset -= 1
        while self._offset > 0 and not self._view.matches(self._offset):
            self._offset -= 1
        return self

    def copy(self) -> "ViewCursor":
        clone = object.__new__(ViewCursor)
        clone._view = self._view
        clone._offset = self._offset
        return clone

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.at_end:
            raise StopIteration
        ch = self.value
        self.increment()
        return ch

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ViewCursor):
            return NotImplemented
        return self._view is other._view and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((id(self._view), self._offset))

    def __repr__(self) -> str:
        return f"<ViewCursor offset={self._offset}>"


class ReverseCursor:
    """Walks a view backwards by driving a :class:`ViewCursor` in reverse.

    Like a C++ reverse iterator, it reads the element just before its base:
    ``view.rbegin()`` wraps ``view.end()`` and yields the last match first.
    """

    __slots__ = ("_base", "_first")

    def __init__(self, base: ViewCursor) -> None:
        self._base = base
        self._first = base.view.begin()

    @property
    def base(self) -> ViewCursor:
        return self._base

    @property
    def exhausted(self) -> bool:
        return self._base == self._first

    @property
    def value(self) -> str:
        return self._base.copy().decrement().value

    def increment(self) -> "ReverseCursor":
        self._base.decrement()
        return self

    def decrement(self) -> "ReverseCursor":
        self._base.increment()
        return self

    def copy(self) -> "ReverseCursor":
        clone = object.__new__(ReverseCursor)
        clone._base = self._base.copy()
        clone._first = self._first
        return clone

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.exhausted:
            raise StopIteration
        self._base.decrement()
        return self._base.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseCursor):
            return NotImplemented
        return self._base == other._base

    def __hash__(self) -> int:
        return hash(("reverse", self._base))

    def __repr__(self) -> str:
        return f"<ReverseCursor base={self._base.offset}>"


__all__ = ["ReverseCursor", "ViewCursor"]
