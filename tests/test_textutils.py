import pytest

from text_analysis_engine.textutils import is_word_character, normalize_word


@pytest.mark.parametrize("char", ["a", "Z", "é", "7", "-", "'", "_", "ß"])
def test_word_characters(char):
    assert is_word_character(char)


@pytest.mark.parametrize("char", [" ", ".", "!", "?", ",", "\n", "\t", "«", '"'])
def test_non_word_characters(char):
    assert not is_word_character(char)


def test_normalize_word_lowercases_and_strips():
    assert normalize_word("Hello,") == "hello"
    assert normalize_word("Don't") == "don't"
    assert normalize_word("Well-Known") == "well-known"
    assert normalize_word("CAFÉ!") == "café"
    assert normalize_word("...") == ""


@pytest.mark.parametrize(
    "raw", ["Hello", "ÉTÉ", "snake_CASE", "İstanbul", "?!x-Y'z", "", "123abc"]
)
def test_normalize_word_is_idempotent(raw):
    once = normalize_word(raw)
    assert normalize_word(once) == once
    assert all(is_word_character(char) for char in once)
