"""Rhyme Scout: rhyme discovery with spelling-based stress and strength hints."""

from .core import (
    RelationCategory,
    RhymeWord,
    SearchResults,
    StressEstimate,
    estimate_stress,
    score_rhyme,
)

__version__ = "0.1.0"

__all__ = [
    "RelationCategory",
    "RhymeWord",
    "SearchResults",
    "StressEstimate",
    "__version__",
    "estimate_stress",
    "score_rhyme",
]
