"""Spelling-based syllable and stress estimation.

Accurate stress needs a pronouncing dictionary; these heuristics only look
at letters. Every function here is total: odd input produces a degenerate
but well-formed answer instead of an exception.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from rhyme_scout.utils.syllables import resolve_syllable_count

from .orthography import is_vowel
from .stress_tables import (
    CANONICAL_PATTERNS,
    PENULTIMATE_STRESS_SUFFIXES,
    PREFIX_STRESS,
    PRIMARY,
    SUFFIX_STRESS,
    first_syllable_pattern,
    last_syllable_pattern,
    penultimate_syllable_pattern,
)


class StressEstimate(NamedTuple):
    """Stress marks and the matching approximate syllable chunks."""

    pattern: str
    breakdown: List[str]

    @property
    def syllable_count(self) -> int:
        return len(self.pattern)

    @property
    def display(self) -> str:
        return format_stress_pattern(self.pattern)


def generate_stress_pattern(word: str, syllables: Optional[int] = None) -> str:
    """Guess a stress pattern such as ``"ˈ--"`` for ``word``.

    ``syllables`` is trusted when it is a positive integer; otherwise the
    count is inferred from vowel groups.
    """

    count = resolve_syllable_count(word, syllables)
    lowered = (word or "").lower()

    if count == 1:
        return PRIMARY

    for prefix, mark in PREFIX_STRESS.items():
        if mark == PRIMARY and lowered.startswith(prefix):
            return first_syllable_pattern(count)

    for suffix, mark in SUFFIX_STRESS.items():
        if mark == PRIMARY and lowered.endswith(suffix):
            return last_syllable_pattern(count)

    # only reached when the suffix table marks these endings neutral
    if count > 2 and lowered.endswith(PENULTIMATE_STRESS_SUFFIXES):
        return penultimate_syllable_pattern(count)

    if count in (2, 3):
        return first_syllable_pattern(count)

    candidates = CANONICAL_PATTERNS.get(count)
    if candidates:
        return candidates[0]
    return first_syllable_pattern(count)


def _even_split(word: str, target: int) -> List[str]:
    pieces = max(1, min(target, len(word)))
    size, extra = divmod(len(word), pieces)
    chunks: List[str] = []
    start = 0
    for index in range(pieces):
        length = size + (1 if index < extra else 0)
        chunks.append(word[start : start + length])
        start += length
    return chunks


def _merge_shortest(chunks: List[str], target: int) -> List[str]:
    merged = list(chunks)
    while len(merged) > target:
        shortest = min(range(len(merged)), key=lambda idx: len(merged[idx]))
        if shortest < len(merged) - 1:
            merged[shortest : shortest + 2] = [merged[shortest] + merged[shortest + 1]]
        else:
            merged[shortest - 1 : shortest + 1] = [merged[shortest - 1] + merged[shortest]]
    return merged


def split_into_syllables(word: str, target: int) -> List[str]:
    """Split ``word`` into roughly ``target`` chunks that rebuild the word."""

    if target <= 1 or len(word) <= 1:
        return [word]

    chunks: List[str] = []
    current = ""
    pending = ""
    index = 0
    length = len(word)

    while index < length:
        char = word[index]
        if is_vowel(char):
            current += pending + char
            pending = ""
            if index + 1 == length or not is_vowel(word[index + 1]):
                # the consonant after a vowel run usually closes the syllable
                if index + 1 < length:
                    current += word[index + 1]
                    index += 1
                chunks.append(current)
                current = ""
        else:
            pending += char
            if len(pending) > 1 and chunks:
                current += pending[0]
                chunks.append(current)
                current = ""
                pending = pending[1:]
        index += 1

    if current or pending:
        chunks.append(current + pending)

    if len(chunks) < target:
        return _even_split(word, target)
    if len(chunks) > target:
        return _merge_shortest(chunks, target)
    return chunks


def estimate_stress(word: str, known_syllables: Optional[int] = None) -> StressEstimate:
    """Return the stress pattern and syllable breakdown for ``word``."""

    text = word or ""
    pattern = generate_stress_pattern(text, known_syllables)
    return StressEstimate(pattern, split_into_syllables(text, len(pattern)))


def format_stress_pattern(pattern: str) -> str:
    """Render ``"ˈ--"`` as ``"STR-un-un"``."""

    return "-".join("STR" if mark == PRIMARY else "un" for mark in pattern)


def primary_stress_index(pattern: str) -> Optional[int]:
    index = pattern.find(PRIMARY)
    return index if index >= 0 else None


def stress_patterns_compatible(pattern_a: str, pattern_b: str) -> bool:
    """Whether two patterns agree on their final one or two syllables."""

    window = min(2, len(pattern_a), len(pattern_b))
    if window == 0:
        return pattern_a == pattern_b
    return pattern_a[-window:] == pattern_b[-window:]


__all__ = [
    "StressEstimate",
    "estimate_stress",
    "format_stress_pattern",
    "generate_stress_pattern",
    "primary_stress_index",
    "split_into_syllables",
    "stress_patterns_compatible",
]
