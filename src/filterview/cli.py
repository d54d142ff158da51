"""Command-line front end: filter, slice and split text through a view."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from filterview.config import ComposeMode, get_settings
from filterview.runtime.telemetry import record_event
from filterview.view import (
    FilteredStringView,
    IndexOutOfRange,
    Predicate,
    compose,
    named,
    one_of,
    split,
    substr,
)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="filterview",
        description="Print the characters of TEXT that pass every filter.",
    )
    parser.add_argument("text", help="text to view")
    parser.add_argument(
        "--keep",
        action="append",
        default=[],
        metavar="CLASS",
        help="keep a character class (alpha, digit, alnum, space, upper, lower, "
        "punct, printable); prefix with 'not-' to drop it instead. Repeatable.",
    )
    parser.add_argument(
        "--chars", metavar="SET", help="keep only characters that appear in SET"
    )
    parser.add_argument(
        "--substr",
        nargs="+",
        type=int,
        metavar=("POS", "COUNT"),
        help="restrict to COUNT filtered characters starting at POS",
    )
    parser.add_argument("--split", metavar="DELIM", help="split on DELIM, one part per line")
    parser.add_argument(
        "--reverse", action="store_true", help="print characters in reverse order"
    )
    parser.add_argument(
        "--compose-mode",
        choices=[mode.value for mode in ComposeMode],
        default=get_settings().compose_mode.value,
        help="how --chars combines with --keep: supplied_only (default) replaces "
        "the --keep filters with --chars, with_base keeps both",
    )
    args = parser.parse_args(argv)
    if args.substr is not None and len(args.substr) > 2:
        parser.error("--substr takes POS and an optional COUNT")
    return args


def build_view(args: argparse.Namespace) -> FilteredStringView:
    predicates: List[Predicate] = [named(name) for name in args.keep]
    view = FilteredStringView(args.text)
    if predicates:
        view = compose(view, predicates)
    if args.chars is not None:
        view = compose(view, [one_of(args.chars)], mode=args.compose_mode)
    if args.substr:
        pos, *rest = args.substr
        view = substr(view, pos, rest[0] if rest else None)
    return view


def _emit(view: FilteredStringView, out: TextIO, reverse: bool) -> None:
    if reverse:
        out.write("".join(reversed(view)))
    else:
        view.render(out)
    out.write("\n")


def main(argv: Optional[Sequence[str]] = None, *, out: Optional[TextIO] = None) -> int:
    args = _parse_args(argv)
    out = out or sys.stdout
    try:
        view = build_view(args)
    except (IndexOutOfRange, ValueError) as exc:
        print(f"filterview: {exc}", file=sys.stderr)
        return 2

    parts = split(view, args.split) if args.split else [view]
    record_event(
        "cli.render",
        level="debug",
        data={"size": view.size(), "parts": len(parts)},
    )
    for part in parts:
        _emit(part, out, args.reverse)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
