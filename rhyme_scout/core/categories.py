"""Relation categories offered by the upstream word-relations API."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class RelationCategory(str, Enum):
    RHYME = "rhyme"
    NEAR_RHYME = "near_rhyme"
    SOUND_ALIKE = "sound_alike"
    RELATED = "related"

    @property
    def query_param(self) -> str:
        return _QUERY_PARAMS[self]

    @property
    def damping(self) -> Optional[float]:
        """Multiplier applied to the API score before scoring, if scored."""

        return _DAMPING[self]

    @property
    def is_scored(self) -> bool:
        return self.damping is not None

    @property
    def heading(self) -> str:
        return _TITLES[self]

    def damp(self, score: Optional[float]) -> Optional[float]:
        if self.damping is None:
            return None
        return float(score or 0.0) * self.damping

    @classmethod
    def parse(cls, value: "str | RelationCategory") -> "RelationCategory":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        aliases = {"perfect": cls.RHYME, "rhymes": cls.RHYME, "near": cls.NEAR_RHYME, "sounds_like": cls.SOUND_ALIKE}
        if normalized in aliases:
            return aliases[normalized]
        return cls(normalized)


_QUERY_PARAMS: Dict[RelationCategory, str] = {
    RelationCategory.RHYME: "rel_rhy",
    RelationCategory.NEAR_RHYME: "rel_nry",
    RelationCategory.SOUND_ALIKE: "sl",
    RelationCategory.RELATED: "ml",
}

_DAMPING: Dict[RelationCategory, Optional[float]] = {
    RelationCategory.RHYME: 1.0,
    RelationCategory.NEAR_RHYME: 0.9,
    RelationCategory.SOUND_ALIKE: 0.8,
    RelationCategory.RELATED: None,
}

_TITLES: Dict[RelationCategory, str] = {
    RelationCategory.RHYME: "Perfect Rhymes",
    RelationCategory.NEAR_RHYME: "Near Rhymes",
    RelationCategory.SOUND_ALIKE: "Sound-Alikes",
    RelationCategory.RELATED: "Related Words",
}

ALL_CATEGORIES: Tuple[RelationCategory, ...] = tuple(RelationCategory)


def parse_categories(values: Optional[Iterable["str | RelationCategory"]]) -> List[RelationCategory]:
    """Resolve user-supplied names, preserving display order and dropping repeats.

    ``None`` or an empty selection means every category.
    """

    if not values:
        return list(ALL_CATEGORIES)
    requested = {RelationCategory.parse(value) for value in values}
    return [category for category in ALL_CATEGORIES if category in requested]


__all__ = ["ALL_CATEGORIES", "RelationCategory", "parse_categories"]
