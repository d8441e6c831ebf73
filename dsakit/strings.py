"""String puzzles: palindromes, substring removal, permutation windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in text if ch.isalnum()]
    return cleaned == cleaned[::-1]


def remove_occurrences(text: str, sub: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``sub`` until none is left."""
    if not sub:
        raise ValueError("substring to remove must not be empty")
    while sub in text:
        text = text.replace(sub, "", 1)
    return text


def check_inclusion(pattern: str, text: str) -> bool:
    """Tell whether some permutation of ``pattern`` is a substring of ``text``."""
    size = len(pattern)
    if size > len(text):
        return False
    needed = Counter(pattern)
    window = Counter(text[:size])
    if window == needed:
        return True
    for leaving, entering in zip(text, text[size:]):
        window[leaving] -= 1
        window[entering] += 1
        if window == needed:
            return True
    return False


def reverse_chars(chars: Iterable[str]) -> list[str]:
    """Return the characters in reverse order."""
    return list(reversed(list(chars)))


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]