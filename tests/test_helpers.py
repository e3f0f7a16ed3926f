import pytest

from dezsh.helpers import split


def test_split_simple_fields():
    assert split("a:b:c", ":") == ["a", "b", "c"]


def test_split_empty_text_gives_no_fields():
    assert split("", ":") == []


def test_split_drops_single_trailing_empty_field():
    assert split("a:b:", ":") == ["a", "b"]


def test_split_keeps_empty_fields_in_the_middle():
    assert split("a::b", ":") == ["a", "", "b"]


def test_split_keeps_leading_empty_field():
    assert split(":a", ":") == ["", "a"]


def test_split_without_delimiter_returns_whole_text():
    assert split("KEY", "=") == ["KEY"]


@pytest.mark.parametrize(
    "text", ["/usr/bin:/bin", "x", "a=b", "one::three", ":lead"]
)
def test_split_round_trip(text):
    delim = ":" if ":" in text or "=" not in text else "="
    assert delim.join(split(text, delim)) == text