"""Utilities for shared syllable estimation logic."""

from __future__ import annotations

import re


__all__ = ["estimate_syllable_count", "resolve_syllable_count"]


_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` from its vowel groups.

    Silent trailing ``e`` and multi-letter vowel groups each knock one
    syllable off the raw group count. No decrement ever takes the running
    count below one.
    """

    normalized = (word or "").lower()
    vowel_groups = _VOWEL_GROUP_PATTERN.findall(normalized)
    syllable_count = len(vowel_groups)

    if normalized.endswith("e") and len(vowel_groups) > 1:
        syllable_count = max(1, syllable_count - 1)

    for group in vowel_groups:
        if len(group) > 1:
            syllable_count = max(1, syllable_count - 1)

    return max(1, syllable_count)


def resolve_syllable_count(word: str, known: object = None) -> int:
    """Return ``known`` when it is a usable count, otherwise estimate one."""

    if known is not None and not isinstance(known, bool):
        try:
            count = int(known)
        except (TypeError, ValueError, OverflowError):
            count = 0
        if count > 0:
            return count
    return estimate_syllable_count(word)
