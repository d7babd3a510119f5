"""Spelling-level helpers shared by the stress estimator and the scorer."""

from __future__ import annotations

import re
from typing import List

VOWELS = frozenset("aeiouy")

_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")
_TRAILING_CONSONANTS_PATTERN = re.compile(r"[bcdfghjklmnpqrstvwxz]+$", re.IGNORECASE)


def is_vowel(char: str) -> bool:
    return char.lower() in VOWELS


def vowel_groups(word: str) -> List[str]:
    """Return the maximal runs of vowel letters in ``word``, lowercased."""

    return _VOWEL_GROUP_PATTERN.findall((word or "").lower())


def trailing_consonants(word: str) -> str:
    """Return the consonant run that ends ``word`` (lowercased), or ``""``."""

    match = _TRAILING_CONSONANTS_PATTERN.search(word or "")
    return match.group(0).lower() if match else ""


def common_suffix_length(word_a: str, word_b: str) -> int:
    """Length of the longest shared ending of ``word_a`` and ``word_b``."""

    length = 0
    for char_a, char_b in zip(reversed(word_a), reversed(word_b)):
        if char_a != char_b:
            break
        length += 1
    return length


__all__ = [
    "VOWELS",
    "common_suffix_length",
    "is_vowel",
    "trailing_consonants",
    "vowel_groups",
]
