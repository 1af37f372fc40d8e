import pytest

from maajwtcheck.utils import (
    get_array,
    get_value,
    read_lines,
    remove_char,
    remove_spaces,
    split,
)


def test_get_value():
    text = '{"alg": "RS256", "kid": "abc123", "typ": "JWT"}'
    assert get_value(text, "kid") == "abc123"
    assert get_value(text, "alg") == "RS256"


def test_get_value_with_whitespace():
    text = '{"jku" \n : \r "https://host.example.com/certs"}'
    assert get_value(text, "jku") == "https://host.example.com/certs"


def test_get_value_missing_and_empty():
    assert get_value('{"a": "b"}', "kid") == ""
    assert get_value("", "kid") == ""


def test_get_array():
    assert get_array('{"x5c":["first","second"]}', "x5c") == ["first", "second"]


def test_get_array_single_and_missing():
    assert get_array('{"x5c": [ "only" ]}', "x5c") == ["only "]
    assert get_array('{"a": "b"}', "x5c") == [""]
    assert get_array("", "x5c") == []


def test_split_basic():
    assert split("a.b.c", r"\.") == ["a", "b", "c"]


def test_split_edges():
    assert split("a,b,", ",") == ["a", "b"]
    assert split(",a", ",") == ["", "a"]
    assert split("", ",") == [""]
    assert split("abc", ",") == ["abc"]


def test_split_regex_delimiter():
    text = '{"kid":"1"} ,\n{"kid":"2"}'
    parts = split(text, "\\}[ \n\r]*,")
    assert len(parts) == 2
    assert get_value(parts[1], "kid") == "2"


def test_remove_char():
    assert remove_char('"a","b"', '"') == "a,b"


def test_remove_spaces():
    assert remove_spaces(" a\tb\nc\r d\v\f") == "abcd"


def test_read_lines(tmp_path):
    path = tmp_path / "token.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert read_lines(str(path)) == ["first", "second", ""]


def test_read_lines_keeps_carriage_return(tmp_path):
    path = tmp_path / "token.txt"
    path.write_bytes(b"one\r\ntwo")
    assert read_lines(str(path)) == ["one\r", "two"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert read_lines(str(path)) == [""]


def test_read_lines_errors(tmp_path):
    with pytest.raises(ValueError):
        read_lines("")
    with pytest.raises(FileNotFoundError):
        read_lines(str(tmp_path / "missing.txt"))