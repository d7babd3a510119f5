"""Lookup tables driving the spelling-based stress heuristics.

Extending a table changes the estimator's behaviour without touching the
rules in :mod:`rhyme_scout.core.stress`.
"""

from __future__ import annotations

from typing import Dict, Tuple

PRIMARY = "ˈ"
UNSTRESSED = "-"

# Prefix -> mark the prefix syllable usually carries.
PREFIX_STRESS: Dict[str, str] = {
    "un": PRIMARY,
    "re": UNSTRESSED,
    "in": UNSTRESSED,
    "de": UNSTRESSED,
    "dis": UNSTRESSED,
    "pre": UNSTRESSED,
    "pro": UNSTRESSED,
    "con": UNSTRESSED,
    "sub": UNSTRESSED,
}

# Suffix -> whether it attracts stress (PRIMARY) or stays neutral.
SUFFIX_STRESS: Dict[str, str] = {
    "tion": PRIMARY,
    "sion": PRIMARY,
    "ity": PRIMARY,
    "ment": UNSTRESSED,
    "ness": UNSTRESSED,
    "ly": UNSTRESSED,
    "ful": UNSTRESSED,
    "less": UNSTRESSED,
    "ing": UNSTRESSED,
    "er": UNSTRESSED,
    "or": UNSTRESSED,
    "al": UNSTRESSED,
}

# Suffixes that pull stress onto the syllable before them in longer words.
PENULTIMATE_STRESS_SUFFIXES: Tuple[str, ...] = ("ity", "tion", "sion")


def _single_stress(length: int, index: int) -> str:
    return "".join(PRIMARY if i == index else UNSTRESSED for i in range(length))


# Syllable count -> plausible patterns, most common first.
CANONICAL_PATTERNS: Dict[int, Tuple[str, ...]] = {
    count: tuple(_single_stress(count, index) for index in range(count))
    for count in range(1, 7)
}


def first_syllable_pattern(count: int) -> str:
    """Pattern with only the first of ``count`` syllables stressed."""

    return _single_stress(max(1, count), 0)


def last_syllable_pattern(count: int) -> str:
    return _single_stress(max(1, count), max(1, count) - 1)


def penultimate_syllable_pattern(count: int) -> str:
    count = max(1, count)
    return _single_stress(count, max(0, count - 2))


__all__ = [
    "CANONICAL_PATTERNS",
    "PENULTIMATE_STRESS_SUFFIXES",
    "PREFIX_STRESS",
    "PRIMARY",
    "SUFFIX_STRESS",
    "UNSTRESSED",
    "first_syllable_pattern",
    "last_syllable_pattern",
    "penultimate_syllable_pattern",
]
