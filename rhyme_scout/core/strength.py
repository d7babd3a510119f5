"""Rhyme strength scoring from spelling similarity and API relevance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .orthography import common_suffix_length, trailing_consonants, vowel_groups

_API_BASE = 40
_API_CAP = 70
_API_SCALE = 30
_API_REFERENCE = 1000.0
_SUFFIX_WEIGHT = 40
_LAST_VOWEL_BONUS = 15
_PENULTIMATE_VOWEL_BONUS = 5
_CONSONANT_BONUS = 10
_MAX_STRENGTH = 100
_STEP = 5

_LABEL_THRESHOLDS: Tuple[Tuple[str, int], ...] = (
    ("Strong", 80),
    ("Good", 60),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class RhymeStrengthBreakdown:
    """Individual contributions that make up a rhyme strength."""

    api: int
    suffix: int
    vowel: int
    consonant: int
    total: int
    exact_match: bool = False

    @classmethod
    def perfect(cls) -> "RhymeStrengthBreakdown":
        return cls(api=0, suffix=0, vowel=0, consonant=0, total=_MAX_STRENGTH, exact_match=True)

    @property
    def raw(self) -> int:
        return self.api + self.suffix + self.vowel + self.consonant


def api_contribution(external_score: Optional[float]) -> int:
    """Dampen the upstream relevance score into a capped contribution."""

    try:
        score = float(external_score or 0.0)
    except (TypeError, ValueError):
        score = 0.0
    if math.isnan(score):
        score = 0.0
    if math.isinf(score):
        # -inf must still drive the clamped total to zero
        return _API_CAP if score > 0 else -_MAX_STRENGTH
    return min(_API_CAP, _round_half_up(score / _API_REFERENCE * _API_SCALE) + _API_BASE)


def suffix_contribution(original: str, candidate: str) -> int:
    shortest = min(len(original), len(candidate))
    if shortest == 0:
        return 0
    shared = common_suffix_length(original, candidate)
    return _round_half_up(shared / shortest * _SUFFIX_WEIGHT)


def vowel_contribution(original: str, candidate: str) -> int:
    groups_a = vowel_groups(original)
    groups_b = vowel_groups(candidate)
    if not groups_a or not groups_b:
        return 0

    bonus = 0
    if groups_a[-1] == groups_b[-1]:
        bonus += _LAST_VOWEL_BONUS
    if len(groups_a) > 1 and len(groups_b) > 1 and groups_a[-2] == groups_b[-2]:
        bonus += _PENULTIMATE_VOWEL_BONUS
    return bonus


def consonant_contribution(original: str, candidate: str) -> int:
    tail_a = trailing_consonants(original)
    tail_b = trailing_consonants(candidate)
    if tail_a and tail_b and tail_a == tail_b:
        return _CONSONANT_BONUS
    return 0


def score_rhyme_breakdown(
    original: str,
    candidate: str,
    external_score: Optional[float] = 0.0,
) -> RhymeStrengthBreakdown:
    """Score ``candidate`` against ``original`` and keep the parts."""

    word_a = (original or "").lower()
    word_b = (candidate or "").lower()

    if word_a == word_b:
        return RhymeStrengthBreakdown.perfect()

    api = api_contribution(external_score)
    suffix = suffix_contribution(word_a, word_b)
    vowel = vowel_contribution(word_a, word_b)
    consonant = consonant_contribution(word_a, word_b)

    capped = max(0, min(_MAX_STRENGTH, api + suffix + vowel + consonant))
    total = _round_half_up(capped / _STEP) * _STEP

    return RhymeStrengthBreakdown(
        api=api,
        suffix=suffix,
        vowel=vowel,
        consonant=consonant,
        total=total,
    )


def score_rhyme(original: str, candidate: str, external_score: Optional[float] = 0.0) -> int:
    """Return a 0-100 rhyme strength, rounded to the nearest 5."""

    return score_rhyme_breakdown(original, candidate, external_score).total


def strength_label(strength: int) -> str:
    """Coarse label used when displaying a strength value."""

    for label, threshold in _LABEL_THRESHOLDS:
        if strength >= threshold:
            return label
    if strength <= 40:
        return "Weak"
    return "Medium"


__all__ = [
    "RhymeStrengthBreakdown",
    "api_contribution",
    "consonant_contribution",
    "score_rhyme",
    "score_rhyme_breakdown",
    "strength_label",
    "suffix_contribution",
    "vowel_contribution",
]
