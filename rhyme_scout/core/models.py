"""Dataclasses describing annotated search results."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .categories import ALL_CATEGORIES, RelationCategory
from .stress import format_stress_pattern


@dataclass
class RhymeWord:
    """A candidate word returned by the word-relations API plus annotations."""

    word: str
    score: float = 0.0
    num_syllables: Optional[int] = None
    category: Optional[RelationCategory] = None
    stress_pattern: str = ""
    syllable_breakdown: List[str] = field(default_factory=list)
    rhyme_strength: Optional[int] = None
    tags: List[str] = field(default_factory=list)

    @property
    def stress_display(self) -> str:
        return format_stress_pattern(self.stress_pattern)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "score": self.score,
            "num_syllables": self.num_syllables,
            "category": self.category.value if self.category else None,
            "stress_pattern": self.stress_pattern,
            "syllable_breakdown": list(self.syllable_breakdown),
            "rhyme_strength": self.rhyme_strength,
            "tags": list(self.tags),
        }


@dataclass
class SearchResults:
    """Annotated results for one query, keyed by relation category."""

    word: str
    groups: Dict[RelationCategory, List[RhymeWord]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(len(entries) for entries in self.groups.values())

    def for_category(self, category: "str | RelationCategory") -> List[RhymeWord]:
        return list(self.groups.get(RelationCategory.parse(category), []))

    def iter_groups(self):
        for category in ALL_CATEGORIES:
            if category in self.groups:
                yield category, self.groups[category]

    def syllable_counts(self) -> List[int]:
        """Sorted distinct syllable counts reported by the API."""

        counts = {
            int(entry.num_syllables)
            for entries in self.groups.values()
            for entry in entries
            if entry.num_syllables
        }
        return sorted(counts)

    def filter_by_syllables(self, syllables: Optional[int]) -> "SearchResults":
        if syllables is None:
            return self
        filtered = {
            category: [entry for entry in entries if entry.num_syllables == syllables]
            for category, entries in self.groups.items()
        }
        return replace(self, groups=filtered)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "results": {
                category.value: [entry.as_dict() for entry in entries]
                for category, entries in self.iter_groups()
            },
        }


__all__ = ["RhymeWord", "SearchResults"]
