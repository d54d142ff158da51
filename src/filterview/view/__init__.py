"""Filtered string views, their cursors, and derived-view operations."""

from .core import FilteredStringView
from .cursor import ReverseCursor, ViewCursor
from .errors import IndexOutOfRange, PredicateBindingError
from .ops import compose, split, substr
from .predicates import (
    ACCEPT_ALL,
    EMPTY,
    REJECT_ALL,
    CharPredicate,
    Conjunction,
    Negation,
    OrdinalRange,
    Predicate,
    as_predicate,
    named,
    one_of,
)

__all__ = [
    "ACCEPT_ALL",
    "EMPTY",
    "REJECT_ALL",
    "CharPredicate",
    "Conjunction",
    "FilteredStringView",
    "IndexOutOfRange",
    "Negation",
    "OrdinalRange",
    "Predicate",
    "PredicateBindingError",
    "ReverseCursor",
    "ViewCursor",
    "as_predicate",
    "compose",
    "named",
    "one_of",
    "split",
    "substr",
]
