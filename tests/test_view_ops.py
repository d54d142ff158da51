import pytest

from filterview import (
    ComposeMode,
    FilteredStringView,
    IndexOutOfRange,
    OrdinalRange,
    SubstrStrategy,
    compose,
    split,
    substr,
)

STRATEGIES = [SubstrStrategy.CAPTURE, SubstrStrategy.RESCAN]


def make_view(text: str = "hello world", predicate=None) -> FilteredStringView:
    return FilteredStringView(text, predicate)


def texts(views) -> list[str]:
    return [str(view) for view in views]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_substr_middle_of_view(strategy: SubstrStrategy) -> None:
    view = make_view()

    part = substr(view, 6, 5, strategy=strategy)

    assert str(part) == "world"
    assert part.size() == 5
    assert part.raw_data() is view.raw_data()


def test_substr_at_size_is_empty() -> None:
    view = make_view()

    part = substr(view, 11)

    assert str(part) == ""
    assert part.size() == 0
    assert part.raw_data() is view.raw_data()


def test_substr_zero_count_is_empty() -> None:
    view = make_view()

    assert str(substr(view, 3, 0)) == ""
    assert str(substr(view, view.size(), 7)) == ""


def test_substr_whole_view_matches_materialized() -> None:
    view = make_view("a1b2c3d4", str.isdigit)

    assert str(substr(view, 0, view.size())) == str(view)
    assert str(substr(view)) == "1234"


def test_substr_past_size_reports_position_and_size() -> None:
    view = make_view("abc")

    with pytest.raises(IndexOutOfRange) as excinfo:
        substr(view, 4)

    assert excinfo.value.index == 4
    assert excinfo.value.size == 3
    assert "4" in str(excinfo.value) and "3" in str(excinfo.value)


def test_substr_rejects_negative_arguments() -> None:
    view = make_view("abc")

    with pytest.raises(IndexOutOfRange):
        substr(view, -1)
    with pytest.raises(ValueError):
        substr(view, 0, -2)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_substr_counts_in_filtered_positions(strategy: SubstrStrategy) -> None:
    view = make_view("a1b2c3d4", str.isalpha)

    part = substr(view, 1, 2, strategy=strategy)

    assert str(part) == "bc"
    assert list(reversed(part)) == ["c", "b"]
    assert part[0] == "b"
    assert part.at(1) == "c"


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_substr_count_is_clamped(strategy: SubstrStrategy) -> None:
    view = make_view("abcdef")

    assert str(substr(view, 4, 100, strategy=strategy)) == "ef"


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_substr_of_substr_keeps_composing(strategy: SubstrStrategy) -> None:
    view = make_view("xx-abcdefg-xx", str.isalpha)

    outer = substr(view, 2, 7, strategy=strategy)
    inner = substr(outer, 1, 3, strategy=strategy)

    assert str(outer) == "abcdefg"
    assert str(inner) == "bcd"
    assert inner.raw_data() is view.raw_data()


def test_substr_with_repeated_characters() -> None:
    view = make_view("aaaa")

    part = substr(view, 1, 2)

    assert str(part) == "aa"
    assert [view.raw_offset(i) for i in range(4)] == [0, 1, 2, 3]
    assert [part.raw_offset(i) for i in range(2)] == [1, 2]


def test_substr_predicate_is_position_bound() -> None:
    view = make_view("abc")

    predicate = substr(view, 1).predicate()

    assert isinstance(predicate, OrdinalRange)
    with pytest.raises(TypeError):
        predicate("b")
    assert predicate.accepts(view.raw_data(), 1)
    assert not predicate.accepts("".join(["a", "bc"]), 1)


def test_split_on_comma() -> None:
    view = make_view("c,a,t")

    assert texts(split(view, make_view(","))) == ["c", "a", "t"]


def test_split_accepts_plain_string_delimiter() -> None:
    view = make_view("one, two, three")

    assert texts(split(view, ", ")) == ["one", "two", "three"]


def test_split_keeps_empty_fragments() -> None:
    view = make_view(",a,,b,")

    assert texts(split(view, ",")) == ["", "a", "", "b", ""]


def test_split_without_delimiter_occurrence() -> None:
    view = make_view("abc")

    assert texts(split(view, "|")) == ["abc"]


def test_split_with_empty_delimiter_returns_view() -> None:
    view = make_view("abc")

    result = split(view, make_view(""))

    assert result == [view]
    assert result[0] is view


def test_split_of_empty_view_returns_view() -> None:
    view = make_view("123", str.isalpha)

    result = split(view, ",")

    assert len(result) == 1
    assert result[0] is view


def test_split_uses_materialized_content() -> None:
    view = make_view("a1-2b-3c", lambda ch: not ch.isdigit())
    delimiter = make_view("x-y", lambda ch: ch == "-")

    fragments = split(view, delimiter)

    assert texts(fragments) == ["a", "b", "c"]
    assert all(fragment.raw_data() is view.raw_data() for fragment in fragments)


def test_split_is_non_overlapping_leftmost_first() -> None:
    view = make_view("aaaaa")

    assert texts(split(view, "aa")) == ["", "", "a"]


def test_split_fragments_are_splittable() -> None:
    view = make_view("a=1;b=2")

    pairs = [split(fragment, "=") for fragment in split(view, ";")]

    assert [texts(pair) for pair in pairs] == [["a", "1"], ["b", "2"]]


def test_compose_supplied_only_drops_base_predicate() -> None:
    view = make_view("aB3cD4", str.isalpha)

    composed = compose(view, [str.isalnum, lambda ch: not ch.isupper()])

    assert str(composed) == "a3c4"
    assert composed.raw_data() is view.raw_data()


def test_compose_with_base_keeps_base_predicate() -> None:
    view = make_view("aB3cD4", str.isalpha)

    composed = compose(view, [lambda ch: not ch.isupper()], mode=ComposeMode.WITH_BASE)

    assert str(composed) == "ac"


def test_compose_mode_accepts_names() -> None:
    view = make_view("aB3", str.isalpha)

    assert str(compose(view, [str.isalnum], mode="with-base")) == "aB"
    with pytest.raises(ValueError):
        compose(view, [str.isalnum], mode="sometimes")


def test_compose_empty_list() -> None:
    view = make_view("a1", str.isalpha)

    assert str(compose(view, [])) == "a1"
    assert str(compose(view, [], mode=ComposeMode.WITH_BASE)) == "a"


def test_compose_short_circuits_in_order() -> None:
    seen: list[str] = []

    def never(ch: str) -> bool:
        seen.append(ch)
        return False

    view = make_view("a1")

    composed = compose(view, [str.isdigit, never])

    assert str(composed) == ""
    assert seen == ["1", "1"]


def test_compose_with_substr_predicate() -> None:
    view = make_view("abcdef")
    window = substr(view, 1, 3)

    composed = compose(view, [window.predicate(), lambda ch: ch != "c"])

    assert str(composed) == "bd"


def test_derived_views_on_moved_from_view() -> None:
    view = make_view("abc")
    view.take()

    assert str(substr(view)) == ""
    assert split(view, ",") == [view]
    assert str(compose(view, [str.isalpha])) == ""
