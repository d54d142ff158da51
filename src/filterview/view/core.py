"""The filtered, non-owning string view."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Iterator, Optional, TextIO, Union, overload

from .cursor import ReverseCursor, ViewCursor
from .errors import IndexOutOfRange
from .predicates import ACCEPT_ALL, EMPTY, Buffer, Predicate, PredicateLike, as_predicate
from .validation import ensure_index


class FilteredStringView(Sequence):
    """Read-only view over ``source`` exposing only characters ``predicate`` accepts.

    ``source`` is held by reference and never copied; any ``Sequence`` of
    one-character strings works, ``str`` being the usual case. The logical
    size is counted once here and cached, so mutating a mutable ``source``
    afterwards leaves the view stale.

    Logical indices address the filtered sequence; raw offsets address
    ``source``. Lookups by logical index scan the buffer from the start.
    """

    __slots__ = ("_source", "_predicate", "_size")

    def __init__(
        self, source: Buffer = "", predicate: Optional[PredicateLike] = None
    ) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            raise TypeError("FilteredStringView needs text; decode bytes first")
        if not isinstance(source, Sequence):
            raise TypeError(
                f"source must be a sequence of characters, got {type(source).__name__}"
            )
        self._source = source
        self._predicate = ACCEPT_ALL if predicate is None else as_predicate(predicate)
        self._size = self._count_matches()

    def _count_matches(self) -> int:
        return sum(1 for offset in range(len(self._source)) if self.matches(offset))

    # -- capacity -------------------------------------------------------

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __bool__(self) -> bool:
        return self._size != 0

    # -- access ---------------------------------------------------------

    def raw_data(self) -> Buffer:
        """The borrowed buffer itself, unfiltered."""

        return self._source

    def predicate(self) -> Predicate:
        return self._predicate

    def matches(self, offset: int) -> bool:
        """Whether the character at raw ``offset`` belongs to the view."""

        return self._predicate.accepts(self._source, offset)

    def raw_offset(self, index: int) -> int:
        """Map logical ``index`` to the raw offset of the ``index``-th match."""

        seen = 0
        for offset in range(len(self._source)):
            if self.matches(offset):
                if seen == index:
                    return offset
                seen += 1
        raise IndexOutOfRange(
            f"FilteredStringView: index {index} out of range", index=index, size=seen
        )

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> "FilteredStringView": ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[str, "FilteredStringView"]:
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise TypeError("FilteredStringView does not support step when slicing")
            start, stop, _ = index.indices(self._size)
            from .ops import substr

            return substr(self, start, max(stop - start, 0))
        return self._source[self.raw_offset(index)]

    def at(self, index: int) -> str:
        """Bounds-checked access; raises :class:`IndexOutOfRange`."""

        ensure_index(index, self._size)
        return self[index]

    def to_owned_string(self) -> str:
        source = self._source
        return "".join(
            source[offset] for offset in range(len(source)) if self.matches(offset)
        )

    def __str__(self) -> str:
        return self.to_owned_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_owned_string()!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self.to_owned_string(), format_spec)

    def render(self, sink: Optional[TextIO] = None) -> int:
        """Write the filtered characters to ``sink`` (stdout by default)."""

        text = self.to_owned_string()
        (sys.stdout if sink is None else sink).write(text)
        return len(text)

    # -- iteration ------------------------------------------------------

    def begin(self) -> ViewCursor:
        return ViewCursor(self, 0)

    def end(self) -> ViewCursor:
        return ViewCursor(self, len(self._source))

    def rbegin(self) -> ReverseCursor:
        return ReverseCursor(self.end())

    def rend(self) -> ReverseCursor:
        return ReverseCursor(self.begin())

    def __iter__(self) -> Iterator[str]:
        cursor, last = self.begin(), self.end()
        while cursor != last:
            yield self._source[cursor.offset]
            cursor.increment()

    def __reversed__(self) -> Iterator[str]:
        first, cursor = self.begin(), self.end()
        while cursor != first:
            cursor.decrement()
            yield self._source[cursor.offset]

    # -- copy / move ----------------------------------------------------

    def copy(self) -> "FilteredStringView":
        clone = object.__new__(type(self))
        clone._source = self._source
        clone._predicate = self._predicate
        clone._size = self._size
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "FilteredStringView":
        # The buffer is borrowed, so even a deep copy shares it.
        return self.copy()

    def take(self) -> "FilteredStringView":
        """Move this view's state into a new view, leaving this one empty.

        The emptied view has an empty buffer, size zero, and the ``EMPTY``
        predicate (which rejects everything and is not ``ACCEPT_ALL``).
        """

        moved = self.copy()
        self._source = ""
        self._predicate = EMPTY
        self._size = 0
        return moved

    # -- comparison -----------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> Optional[str]:
        if isinstance(other, FilteredStringView):
            return other.to_owned_string()
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self.to_owned_string() == text

    def __ne__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self.to_owned_string() != text

    def __lt__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self.to_owned_string() < text

    def __le__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self.to_owned_string() <= text

    def __gt__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self.to_owned_string() > text

    def __ge__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self.to_owned_string() >= text

    def __hash__(self) -> int:
        return hash(self.to_owned_string())


__all__ = ["FilteredStringView"]
