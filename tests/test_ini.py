import pytest

from tofkit.ini import parse_key_value_string, read_key_value_file
from tofkit.status import Status, TofError


def test_parse_basic_pairs():
    result = parse_key_value_string("alpha=1\nbeta=two\n")
    assert result == {"alpha": "1", "beta": "two"}


def test_parse_splits_on_first_equals_only():
    result = parse_key_value_string("expr=a=b")
    assert result == {"expr": "a=b"}


def test_parse_skips_lines_without_equals():
    result = parse_key_value_string("garbage\nkey=value\n\n")
    assert result == {"key": "value"}


def test_parse_skips_empty_values():
    result = parse_key_value_string("empty=\nfull=x")
    assert result == {"full": "x"}


def test_parse_first_value_wins():
    result = parse_key_value_string("k=first\nk=second")
    assert result == {"k": "first"}


def test_parse_empty_text():
    assert parse_key_value_string("") == {}


def test_parse_result_is_sorted_by_key():
    result = parse_key_value_string("zeta=1\nalpha=2\nmid=3")
    assert list(result) == sorted(result)
    assert set(result) == {"zeta", "alpha", "mid"}


def test_parse_keeps_empty_key():
    assert parse_key_value_string("=v") == {"": "v"}


def test_read_file_matches_string_parsing(tmp_path):
    content = "depthComputeIspEnable=1\nabThreshMin=3.0\nbad line\nnothing=\n"
    path = tmp_path / "params.ini"
    path.write_text(content, encoding="utf-8")
    assert read_key_value_file(path) == parse_key_value_string(content)
    assert read_key_value_file(str(path))["abThreshMin"] == "3.0"


def test_read_missing_file_raises_unreachable(tmp_path):
    with pytest.raises(TofError) as info:
        read_key_value_file(tmp_path / "missing.ini")
    assert info.value.status is Status.UNREACHABLE


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.ini"
    path.write_text("", encoding="utf-8")
    assert read_key_value_file(path) == {}