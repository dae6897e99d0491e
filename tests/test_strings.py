from collections import Counter
from itertools import groupby

import pytest

from algopatterns.strings import (
    convert,
    frequency_sort,
    is_palindrome,
    is_subsequence,
    longest_common_prefix,
    reverse_words,
)


@pytest.mark.parametrize(("s", "t"), [("abc", "ahbgdc"), ("", "abc"), ("", ""), ("ace", "ace")])
def test_is_subsequence_true(s, t):
    assert is_subsequence(s, t)


@pytest.mark.parametrize(("s", "t"), [("axc", "ahbgdc"), ("a", ""), ("ba", "ab")])
def test_is_subsequence_false(s, t):
    assert not is_subsequence(s, t)


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_none_shared():
    assert not longest_common_prefix(["dog", "racecar", "car"])


@pytest.mark.parametrize("strs", [["interview", "internet", "interval"], ["same", "same"], ["a"]])
def test_longest_common_prefix_is_prefix_of_all(strs):
    prefix = longest_common_prefix(strs)
    assert all(item.startswith(prefix) for item in strs)
    next_chars = {item[len(prefix) : len(prefix) + 1] for item in strs}
    assert len(next_chars) > 1 or "" in next_chars


def test_longest_common_prefix_single():
    assert longest_common_prefix(["alone"]) == "alone"


def test_longest_common_prefix_empty():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize("text", ["the sky is blue", "  hello world  ", "a good   example", "one"])
def test_reverse_words(text):
    result = reverse_words(text)
    assert result.split(" ") == text.split()[::-1]
    assert result == result.strip()


def test_reverse_words_twice_normalises_spacing():
    text = "  a good   example "
    assert reverse_words(reverse_words(text)) == " ".join(text.split())


@pytest.mark.parametrize("text", ["A man, a plan, a canal: Panama", " ", "", "Aa", "No 'x' in Nixon"])
def test_is_palindrome_true(text):
    assert is_palindrome(text)


@pytest.mark.parametrize("text", ["race a car", "0P", "ab"])
def test_is_palindrome_false(text):
    assert not is_palindrome(text)


def test_convert_example():
    assert convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


def test_convert_single_row_and_wide():
    assert convert("AB", 1) == "AB"
    assert convert("ABC", 5) == "ABC"


@pytest.mark.parametrize("rows", [2, 3, 4, 7])
def test_convert_keeps_characters(rows):
    text = "PAYPALISHIRING"
    result = convert(text, rows)
    assert sorted(result) == sorted(text)
    assert result[0] == text[0]


def test_convert_bad_rows():
    with pytest.raises(ValueError):
        convert("abc", 0)


def test_frequency_sort_example():
    assert frequency_sort("tree") == "eetr"


@pytest.mark.parametrize("text", ["tree", "cccaaa", "Aabb", "mississippi", ""])
def test_frequency_sort_invariants(text):
    result = frequency_sort(text)
    assert Counter(result) == Counter(text)
    runs = [(char, len(list(group))) for char, group in groupby(result)]
    assert len(runs) == len(set(text))
    lengths = [length for _, length in runs]
    assert lengths == sorted(lengths, reverse=True)


def test_frequency_sort_ties_by_falling_character():
    assert frequency_sort("cab") == "".join(sorted("cab", reverse=True))