"""String utilities: reversal, comparison, duplicates, anagrams, permutations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

__all__ = [
    "string_length",
    "reverse_string",
    "compare_strings",
    "is_palindrome",
    "duplicate_characters",
    "duplicate_letters_bitwise",
    "is_anagram",
    "permutations",
    "permutations_by_swap",
    "to_lower",
    "toggle_case",
]

_CASE_OFFSET = ord("a") - ord("A")


def string_length(text: str) -> int:
    """Return the number of characters in text."""
    return sum(1 for _ in text)


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    chars = list(text)
    i, j = 0, len(chars) - 1
    while i < j:
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def compare_strings(first: str, second: str) -> int:
    """Compare two strings character by character.

    Returns -1 if first is smaller, 0 if equal, 1 if greater.
    """
    for a, b in zip(first, second):
        if a != b:
            return -1 if a < b else 1
    return (len(first) > len(second)) - (len(first) < len(second))


def is_palindrome(text: str) -> bool:
    """Return True if text reads the same forwards and backwards."""
    i, j = 0, len(text) - 1
    while i < j:
        if text[i] != text[j]:
            return False
        i += 1
        j -= 1
    return True


def duplicate_characters(text: str) -> dict[str, int]:
    """Map each character occurring more than once to its count."""
    return {ch: n for ch, n in Counter(text).items() if n > 1}


def duplicate_letters_bitwise(text: str) -> list[str]:
    """Report each repeated lowercase letter, using a bit mask as the seen set.

    A letter is reported every time it is met after its first occurrence.
    Only the letters a to z are accepted.
    """
    seen = 0
    repeats = []
    for ch in text:
        if not "a" <= ch <= "z":
            raise ValueError(f"only lowercase letters a-z are supported, got {ch!r}")
        bit = 1 << (ord(ch) - ord("a"))
        if seen & bit:
            repeats.append(ch)
        else:
            seen |= bit
    return repeats


def is_anagram(first: str, second: str) -> bool:
    """Return True if both strings use exactly the same characters."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of text's characters, choosing by position.

    Characters are picked in the order they appear, so for text with
    distinct characters in sorted order the results come out sorted.
    """
    used = [False] * len(text)
    result: list[str] = []

    def build() -> Iterator[str]:
        if len(result) == len(text):
            yield "".join(result)
            return
        for i, ch in enumerate(text):
            if not used[i]:
                used[i] = True
                result.append(ch)
                yield from build()
                result.pop()
                used[i] = False

    yield from build()


def permutations_by_swap(text: str) -> Iterator[str]:
    """Yield every arrangement of text's characters by swapping in place."""
    chars = list(text)

    def build(low: int) -> Iterator[str]:
        if low >= len(chars) - 1:
            yield "".join(chars)
            return
        for i in range(low, len(chars)):
            chars[low], chars[i] = chars[i], chars[low]
            yield from build(low + 1)
            chars[low], chars[i] = chars[i], chars[low]

    yield from build(0)


def to_lower(text: str) -> str:
    """Convert ASCII uppercase letters to lowercase, leaving the rest alone."""
    return "".join(
        chr(ord(ch) + _CASE_OFFSET) if "A" <= ch <= "Z" else ch for ch in text
    )


def toggle_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving other characters alone."""

    def toggle(ch: str) -> str:
        if "A" <= ch <= "Z":
            return chr(ord(ch) + _CASE_OFFSET)
        if "a" <= ch <= "z":
            return chr(ord(ch) - _CASE_OFFSET)
        return ch

    return "".join(toggle(ch) for ch in text)