import string

import pytest

from chaosworkshop import util


def test_trim_removes_surrounding_whitespace():
    assert util.string_trim("  hello world \t\n") == "hello world"


@pytest.mark.parametrize("text", ["", "   ", "\t\n "])
def test_trim_of_blank_is_empty(text):
    assert util.string_trim(text) == ""


def test_trim_keeps_inner_whitespace():
    assert util.string_trim("a  b") == "a  b"


def test_sanitize_removes_braille_blank():
    assert util.string_sanitize("ab\u2800cd\u2800") == "abcd"


def test_sanitize_cuts_at_unassigned_code_point():
    assert util.string_sanitize("ab\u0378cd") == "ab"


def test_sanitize_leaves_plain_text():
    assert util.string_sanitize("Name v1.0") == "Name v1.0"


def test_split_drops_empty_parts():
    assert util.string_split("a\nb\n\nc\n", "\n") == ["a", "b", "c"]


def test_split_message_line():
    assert util.string_split("data_file_len 123", " ") == ["data_file_len", "123"]


def test_split_empty_text():
    assert util.string_split("", "\n") == []


def test_split_only_delimiters():
    assert util.string_split("\n\n\n", "\n") == []


def test_split_empty_delimiter_is_rejected():
    with pytest.raises(ValueError):
        util.string_split("abc", "")


def test_sha256_of_empty_input():
    assert util.sha256("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_str_and_bytes_agree():
    assert util.sha256("payload") == util.sha256(b"payload")


def test_digest_lengths_and_alphabet():
    digest256 = util.sha256(b"abc")
    digest512 = util.sha512(b"abc")
    assert len(digest256) == 64
    assert len(digest512) == 128
    assert set(digest256 + digest512) <= set(string.hexdigits.lower())


def test_random_string_shape():
    value = util.generate_random_string()
    assert len(value) == 16
    assert set(value) <= set(string.digits + string.ascii_lowercase)


def test_random_strings_differ():
    values = {util.generate_random_string() for _ in range(20)}
    assert len(values) > 1