"""Operations deriving new views from existing ones.

Every result shares the source view's buffer object; only the predicate
changes. Materialization happens only where a search needs real text
(``split``).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from filterview.config import ComposeMode, SubstrStrategy, get_settings
from filterview.runtime.telemetry import span

from .core import FilteredStringView
from .predicates import REJECT_ALL, Conjunction, OrdinalRange, PredicateLike, as_predicate
from .validation import ensure_count, ensure_position


def compose(
    view: FilteredStringView,
    predicates: Iterable[PredicateLike],
    *,
    mode: ComposeMode | str | None = None,
) -> FilteredStringView:
    """View ``view``'s buffer through the conjunction of ``predicates``.

    With ``ComposeMode.SUPPLIED_ONLY`` (the default) ``view``'s own predicate
    is not part of the result; ``ComposeMode.WITH_BASE`` checks it first.
    """

    settings = get_settings().with_overrides(compose_mode=mode)
    parts = tuple(as_predicate(predicate) for predicate in predicates)
    with span(
        "view::compose",
        component="view",
        metadata={"predicates": len(parts), "mode": settings.compose_mode.value},
    ) as handle:
        if settings.compose_mode is ComposeMode.WITH_BASE:
            parts = (view.predicate(),) + parts
        result = FilteredStringView(view.raw_data(), Conjunction(parts))
        handle.add_metadata("size", result.size())
        return result


def substr(
    view: FilteredStringView,
    pos: int = 0,
    count: Optional[int] = None,
    *,
    strategy: SubstrStrategy | str | None = None,
) -> FilteredStringView:
    """Sub-view over logical positions ``[pos, pos + count)``.

    ``count=None`` runs to the end; counts past the end are clamped.
    ``pos`` may equal ``view.size()`` (giving an empty view) but not exceed it.
    """

    size = view.size()
    settings = get_settings().with_overrides(substr_strategy=strategy)
    with span(
        "view::substr",
        component="view",
        metadata={
            "pos": pos,
            "count": count,
            "size": size,
            "strategy": settings.substr_strategy.value,
        },
    ) as handle:
        ensure_position(pos, size)
        ensure_count(count)
        if pos == size or count == 0:
            handle.add_metadata("stop", pos)
            return FilteredStringView(view.raw_data(), REJECT_ALL)

        stop = size if count is None else min(pos + count, size)
        handle.add_metadata("stop", stop)
        if settings.substr_strategy is SubstrStrategy.CAPTURE:
            build = OrdinalRange.capture
        else:
            build = OrdinalRange.rescan
        predicate = build(view.predicate(), view.raw_data(), pos, stop)
        return FilteredStringView(view.raw_data(), predicate)


def split(
    view: FilteredStringView, delimiter: Union[FilteredStringView, str]
) -> List[FilteredStringView]:
    """Split ``view`` around non-overlapping occurrences of ``delimiter``.

    Matching runs on the materialized text of both sides; each gap becomes a
    ``substr`` of ``view``. Empty gaps are kept. If either side is empty the
    result is ``[view]``.
    """

    if isinstance(delimiter, str):
        delimiter = FilteredStringView(delimiter)
    text = view.to_owned_string()
    token = delimiter.to_owned_string()
    if not text or not token:
        return [view]

    with span(
        "view::split",
        component="view",
        metadata={"size": len(text), "delimiter": token},
    ) as handle:
        fragments: List[FilteredStringView] = []
        start = 0
        found = text.find(token)
        while found != -1:
            fragments.append(substr(view, start, found - start))
            start = found + len(token)
            found = text.find(token, start)
        fragments.append(substr(view, start))
        handle.add_metadata("fragments", len(fragments))
        return fragments


__all__ = ["compose", "split", "substr"]
