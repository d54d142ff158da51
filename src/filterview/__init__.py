"""Non-owning, predicate-filtered views over character buffers."""

from .config import ComposeMode, SubstrStrategy, ViewSettings
from .view import (
    ACCEPT_ALL,
    EMPTY,
    REJECT_ALL,
    Conjunction,
    FilteredStringView,
    IndexOutOfRange,
    OrdinalRange,
    Predicate,
    PredicateBindingError,
    ReverseCursor,
    ViewCursor,
    as_predicate,
    compose,
    split,
    substr,
)

__all__ = [
    "ACCEPT_ALL",
    "EMPTY",
    "REJECT_ALL",
    "ComposeMode",
    "Conjunction",
    "FilteredStringView",
    "IndexOutOfRange",
    "OrdinalRange",
    "Predicate",
    "PredicateBindingError",
    "ReverseCursor",
    "SubstrStrategy",
    "ViewCursor",
    "ViewSettings",
    "as_predicate",
    "compose",
    "split",
    "substr",
]

__version__ = "0.1.0"
