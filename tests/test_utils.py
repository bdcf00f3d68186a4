import pytest

from tofkit.utils import split_into_tokens


def test_split_simple():
    assert split_into_tokens("a,b,c", ",") == ["a", "b", "c"]


def test_split_without_delimiter_returns_whole_string():
    assert split_into_tokens("abc", ",") == ["abc"]


def test_split_empty_string_gives_one_empty_token():
    assert split_into_tokens("", ",") == [""]


def test_split_keeps_empty_tokens():
    assert split_into_tokens(",a,,b,", ",") == ["", "a", "", "b", ""]


@pytest.mark.parametrize("text", ["x:y:z", "::", "only", "1:22:333:"])
def test_join_round_trip(text):
    tokens = split_into_tokens(text, ":")
    assert ":".join(tokens) == text
    assert len(tokens) == text.count(":") + 1
    assert all(":" not in t for t in tokens)


@pytest.mark.parametrize("delimiter", ["", "ab"])
def test_invalid_delimiter(delimiter):
    with pytest.raises(ValueError):
        split_into_tokens("a,b", delimiter)