"""Immutable predicate objects deciding which characters a view exposes.

Every predicate answers two questions:

``predicate(ch)``
    the plain character test callers write and compose.
``predicate.accepts(buffer, offset)``
    the test a view actually runs. Character predicates defer to
    ``predicate(buffer[offset])``; position-bound predicates such as
    :class:`OrdinalRange` need the offset and refuse bare characters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Sequence, Union

from .errors import PredicateBindingError

Buffer = Sequence[str]


class Predicate:
    """Base class for view predicates; instances are immutable."""

    __slots__ = ()

    def __call__(self, ch: str) -> bool:  # pragma: no cover - abstract override
        raise NotImplementedError

    def accepts(self, buffer: Buffer, offset: int) -> bool:
        return self(buffer[offset])

    def __and__(self, other: "PredicateLike") -> "Conjunction":
        return Conjunction((self, as_predicate(other)))

    def __invert__(self) -> "Negation":
        return Negation(self)


PredicateLike = Union[Predicate, Callable[[str], bool]]


@dataclass(frozen=True, slots=True, eq=False)
class CharPredicate(Predicate):
    """Wraps a plain ``str -> bool`` callable."""

    test: Callable[[str], bool]
    name: str = ""

    def __call__(self, ch: str) -> bool:
        return bool(self.test(ch))

    def __repr__(self) -> str:
        return f"<CharPredicate {self.name or self.test!r}>"


@dataclass(frozen=True, slots=True, eq=False)
class Negation(Predicate):
    inner: Predicate

    def __call__(self, ch: str) -> bool:
        return not self.inner(ch)

    def accepts(self, buffer: Buffer, offset: int) -> bool:
        return not self.inner.accepts(buffer, offset)


@dataclass(frozen=True, slots=True, eq=False)
class Conjunction(Predicate):
    """Logical AND of ``parts``, evaluated in order, stopping at the first miss.

    An empty conjunction accepts everything.
    """

    parts: tuple[Predicate, ...]

    def __call__(self, ch: str) -> bool:
        return all(part(ch) for part in self.parts)

    def accepts(self, buffer: Buffer, offset: int) -> bool:
        return all(part.accepts(buffer, offset) for part in self.parts)

    def __and__(self, other: PredicateLike) -> "Conjunction":
        return Conjunction(self.parts + (as_predicate(other),))


@dataclass(frozen=True, slots=True, eq=False)
class OrdinalRange(Predicate):
    """Accepts ``base`` matches whose rank among all ``base`` matches in
    ``source`` lies in ``[start, stop)``.

    The predicate is bound to ``source``: asked about any other buffer it
    accepts nothing. With ``offsets`` captured, a test is a set lookup;
    without, the rank is recounted from the start of the buffer on every
    test.
    """

    base: Predicate
    source: Buffer
    start: int
    stop: int
    offsets: frozenset[int] | None = None

    @classmethod
    def capture(
        cls, base: Predicate, source: Buffer, start: int, stop: int
    ) -> "OrdinalRange":
        selected: list[int] = []
        rank = 0
        for offset in range(len(source)):
            if rank >= stop:
                break
            if base.accepts(source, offset):
                if rank >= start:
                    selected.append(offset)
                rank += 1
        return cls(base, source, start, stop, frozenset(selected))

    @classmethod
    def rescan(
        cls, base: Predicate, source: Buffer, start: int, stop: int
    ) -> "OrdinalRange":
        return cls(base, source, start, stop)

    def __call__(self, ch: str) -> bool:
        raise PredicateBindingError(
            "OrdinalRange is bound to buffer positions; "
            "use accepts(buffer, offset) instead of a bare character"
        )

    def accepts(self, buffer: Buffer, offset: int) -> bool:
        if buffer is not self.source:
            return False
        if self.offsets is not None:
            return offset in self.offsets
        if not self.base.accepts(buffer, offset):
            return False
        rank = sum(1 for before in range(offset) if self.base.accepts(buffer, before))
        return self.start <= rank < self.stop

    def __repr__(self) -> str:
        mode = "rescan" if self.offsets is None else "captured"
        return f"<OrdinalRange [{self.start}, {self.stop}) {mode}>"


def as_predicate(value: PredicateLike) -> Predicate:
    """Return ``value`` as a :class:`Predicate`, wrapping plain callables."""

    if isinstance(value, Predicate):
        return value
    if not callable(value):
        raise TypeError(f"predicate must be callable, got {type(value).__name__}")
    return CharPredicate(value, name=getattr(value, "__name__", ""))


ACCEPT_ALL = CharPredicate(lambda ch: True, name="accept_all")
REJECT_ALL = CharPredicate(lambda ch: False, name="reject_all")
# Left behind by FilteredStringView.take(); never the same object as ACCEPT_ALL.
EMPTY = CharPredicate(lambda ch: False, name="empty")


CHARACTER_CLASSES: Dict[str, Callable[[str], bool]] = {
    "alpha": str.isalpha,
    "digit": str.isdigit,
    "alnum": str.isalnum,
    "space": str.isspace,
    "upper": str.isupper,
    "lower": str.islower,
    "printable": str.isprintable,
    "punct": lambda ch: not ch.isalnum() and not ch.isspace() and ch.isprintable(),
}


def named(name: str) -> Predicate:
    """Look up a character class by name; a ``not-`` prefix negates it."""

    key = name.strip().lower()
    if key.startswith("not-"):
        return ~named(key[4:])
    try:
        return CharPredicate(CHARACTER_CLASSES[key], name=key)
    except KeyError:
        choices = ", ".join(sorted(CHARACTER_CLASSES))
        raise ValueError(
            f"Unknown character class '{name}' (expected {choices})"
        ) from None


def one_of(chars: str) -> Predicate:
    allowed = frozenset(chars)
    return CharPredicate(allowed.__contains__, name=f"one_of({chars!r})")


__all__ = [
    "ACCEPT_ALL",
    "CHARACTER_CLASSES",
    "Buffer",
    "CharPredicate",
    "Conjunction",
    "EMPTY",
    "Negation",
    "OrdinalRange",
    "Predicate",
    "PredicateLike",
    "REJECT_ALL",
    "as_predicate",
    "named",
    "one_of",
]
