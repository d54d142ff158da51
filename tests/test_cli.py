import io

import pytest

from filterview.cli import main


def run(*argv: str) -> str:
    out = io.StringIO()
    assert main(list(argv), out=out) == 0
    return out.getvalue()


def test_plain_text_round_trips() -> None:
    assert run("hello") == "hello\n"


def test_keep_character_class() -> None:
    assert run("a1b2c3", "--keep", "alpha") == "abc\n"
    assert run("a1 b2", "--keep", "not-space", "--keep", "not-digit") == "ab\n"


def test_substr_and_reverse() -> None:
    assert run("hello world", "--substr", "6", "5") == "world\n"
    assert run("hello world", "--substr", "6") == "world\n"
    assert run("abc", "--reverse") == "cba\n"


def test_split_prints_one_fragment_per_line() -> None:
    assert run("c,a,,t", "--split", ",") == "c\na\n\nt\n"


def test_chars_respects_compose_mode() -> None:
    assert run("aB1b", "--keep", "lower", "--chars", "aB1") == "aB1\n"
    assert (
        run("aB1b", "--keep", "lower", "--chars", "aB1", "--compose-mode", "with_base")
        == "a\n"
    )


def test_out_of_range_substr_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["abc", "--substr", "9"], out=io.StringIO()) == 2
    assert "out of range" in capsys.readouterr().err


def test_too_many_substr_values() -> None:
    with pytest.raises(SystemExit):
        main(["abc", "--substr", "1", "2", "3"], out=io.StringIO())


def test_unknown_character_class_exits_with_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["abc", "--keep", "vowel"], out=io.StringIO()) == 2
    assert "Unknown character class 'vowel'" in capsys.readouterr().err


def test_negative_substr_count_exits_with_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["abc", "--substr", "0", "-1"], out=io.StringIO()) == 2
    assert "non-negative" in capsys.readouterr().err


def test_help_explains_compose_mode(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--help"])

    help_text = " ".join(capsys.readouterr().out.split())
    assert "supplied_only (default) replaces the --keep filters" in help_text
