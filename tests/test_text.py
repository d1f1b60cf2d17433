import pytest

from leetsolve.text import (
    balanced_string_split,
    defang_ip_addr,
    group_anagrams,
    is_anagram,
    is_subsequence,
    length_of_last_word,
    length_of_longest_substring,
    longest_common_prefix,
    reformat_date,
)


@pytest.mark.parametrize(
    "s, expected",
    [("abcabcbb", 3), ("bbbbb", 1), ("pwwkew", 3), ("", 0), ("tmmzuxt", 5)],
)
def test_length_of_longest_substring(s, expected):
    assert length_of_longest_substring(s) == expected


@pytest.mark.parametrize(
    "strs, expected",
    [
        (["flower", "flow", "flight"], "fl"),
        (["dog", "racecar", "car"], ""),
        ([], ""),
        (["abc", ""], ""),
        (["same", "same"], "same"),
    ],
)
def test_longest_common_prefix(strs, expected):
    assert longest_common_prefix(strs) == expected


def test_group_anagrams():
    groups = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    assert groups == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


@pytest.mark.parametrize(
    "s, expected", [("Hello World", 5), ("", 0), ("Hello", 5), ("  fly me   ", 2)]
)
def test_length_of_last_word(s, expected):
    assert length_of_last_word(s) == expected


@pytest.mark.parametrize(
    "s, t, expected",
    [("anagram", "nagaram", True), ("rat", "car", False), ("foobar", "bar", False)],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


@pytest.mark.parametrize(
    "s, t, expected",
    [("abc", "ahbgdc", True), ("axc", "ahbgdc", False), ("", "abc", True), ("aa", "a", False)],
)
def test_is_subsequence(s, t, expected):
    assert is_subsequence(s, t) is expected


@pytest.mark.parametrize(
    "address, expected",
    [("1.1.1.1", "1[.]1[.]1[.]1"), ("255.100.50.0", "255[.]100[.]50[.]0")],
)
def test_defang_ip_addr(address, expected):
    assert defang_ip_addr(address) == expected


@pytest.mark.parametrize(
    "s, expected",
    [("RLRRLLRLRL", 4), ("RLLLLRRRLR", 3), ("LLLLRRRR", 1), ("RLRRRLLRLL", 2)],
)
def test_balanced_string_split(s, expected):
    assert balanced_string_split(s) == expected


@pytest.mark.parametrize(
    "date, expected",
    [
        ("20th Oct 2052", "2052-10-20"),
        ("6th Jun 1933", "1933-06-06"),
        ("26th May 1960", "1960-05-26"),
    ],
)
def test_reformat_date(date, expected):
    assert reformat_date(date) == expected


def test_reformat_date_unknown_month():
    with pytest.raises(ValueError):
        reformat_date("20th Foo 2052")