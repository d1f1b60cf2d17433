"""String problems: substrings, prefixes, anagrams, words and dates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MONTHS = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        longest = max(longest, index - start + 1)
    return longest


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string, or '' if there is none."""
    if not strs:
        return ""
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(c != chars[0] for c in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def length_of_last_word(s: str) -> int:
    """Return the length of the last whitespace-separated word, or 0."""
    words = s.split()
    return len(words[-1]) if words else 0


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of the characters of s."""
    return len(s) == len(t) and sorted(s) == sorted(t)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def defang_ip_addr(address: str) -> str:
    """Replace every '.' with '[.]'."""
    return address.replace(".", "[.]")


def balanced_string_split(s: str) -> int:
    """Count the pieces a string of L and R splits into with equal counts of each."""
    balance = 0
    pieces = 0
    for char in s:
        balance += 1 if char == "L" else -1
        if balance == 0:
            pieces += 1
    return pieces


def reformat_date(date: str) -> str:
    """Turn a date like '20th Oct 2052' into '2052-10-20'."""
    if len(date) == 12:
        date = "0" + date
    month_name = date[5:8]
    try:
        month = _MONTHS[month_name]
    except KeyError:
        raise ValueError(f"unknown month {month_name!r} in {date!r}") from None
    return f"{date[-4:]}-{month}-{date[:2]}"