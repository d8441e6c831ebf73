import pytest

from dsakit.strings import (
    check_inclusion,
    is_palindrome,
    remove_occurrences,
    reverse_chars,
    reverse_string,
)


def test_is_palindrome_sentence():
    assert is_palindrome("A man, a plan, a canal: Panama") is True


def test_is_palindrome_rejects():
    assert is_palindrome("race a car") is False


@pytest.mark.parametrize("text", ["", " ", ".,!", "a", "Aa"])
def test_is_palindrome_trivial(text):
    assert is_palindrome(text) is True


def test_is_palindrome_symmetric_construction():
    half = "Abc1"
    assert is_palindrome(half + "::" + reverse_string(half)) is True


def test_remove_occurrences_example():
    assert remove_occurrences("daabcbaabcbc", "abc") == "dab"


def test_remove_occurrences_leaves_no_match():
    result = remove_occurrences("axxyyb", "xy")
    assert "xy" not in result
    assert result == "ab"


def test_remove_occurrences_no_match_unchanged():
    assert remove_occurrences("hello", "zz") == "hello"


def test_remove_occurrences_empty_sub():
    with pytest.raises(ValueError):
        remove_occurrences("abc", "")


def test_check_inclusion_examples():
    assert check_inclusion("ab", "eidbaooo") is True
    assert check_inclusion("ab", "eidboaoo") is False


def test_check_inclusion_longer_pattern():
    assert check_inclusion("abcd", "abc") is False


def test_check_inclusion_window_at_end():
    assert check_inclusion("cba", "xxxabc") is True


def test_check_inclusion_empty_pattern():
    assert check_inclusion("", "anything") is True


def test_reverse_chars():
    chars = list("vishal")
    result = reverse_chars(chars)
    assert result == list("lahsiv")
    assert reverse_chars(result) == chars
    assert chars == list("vishal")


def test_reverse_string_round_trip():
    text = "Visanth Design"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text) == "ngiseD htnasiV"


def test_reverse_string_empty():
    assert reverse_string("") == ""