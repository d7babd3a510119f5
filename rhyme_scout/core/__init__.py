"""Spelling-based phonetic heuristics for Rhyme Scout."""

from .categories import ALL_CATEGORIES, RelationCategory, parse_categories
from .models import RhymeWord, SearchResults
from .orthography import common_suffix_length, trailing_consonants, vowel_groups
from .strength import (
    RhymeStrengthBreakdown,
    score_rhyme,
    score_rhyme_breakdown,
    strength_label,
)
from .stress import (
    StressEstimate,
    estimate_stress,
    format_stress_pattern,
    generate_stress_pattern,
    primary_stress_index,
    split_into_syllables,
    stress_patterns_compatible,
)

__all__ = [
    "ALL_CATEGORIES",
    "RelationCategory",
    "RhymeStrengthBreakdown",
    "RhymeWord",
    "SearchResults",
    "StressEstimate",
    "common_suffix_length",
    "estimate_stress",
    "format_stress_pattern",
    "generate_stress_pattern",
    "parse_categories",
    "primary_stress_index",
    "score_rhyme",
    "score_rhyme_breakdown",
    "split_into_syllables",
    "strength_label",
    "stress_patterns_compatible",
    "trailing_consonants",
    "vowel_groups",
]
