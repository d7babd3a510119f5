"""Result formatting helpers for rhyme discovery."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from rhyme_scout.core.categories import RelationCategory
from rhyme_scout.core.models import RhymeWord, SearchResults
from rhyme_scout.core.strength import strength_label

_UNKNOWN_SYLLABLES = 0

_CATEGORY_ICONS: Dict[RelationCategory, str] = {
    RelationCategory.RHYME: "🎯",
    RelationCategory.NEAR_RHYME: "🔁",
    RelationCategory.SOUND_ALIKE: "👂",
    RelationCategory.RELATED: "💡",
}


def group_by_syllables(words: Iterable[RhymeWord]) -> List[Tuple[int, List[RhymeWord]]]:
    """Group ``words`` by API syllable count, ascending, unknown counts last."""

    buckets: Dict[int, List[RhymeWord]] = {}
    for entry in words:
        key = int(entry.num_syllables) if entry.num_syllables else _UNKNOWN_SYLLABLES
        buckets.setdefault(key, []).append(entry)

    ordered = sorted(key for key in buckets if key != _UNKNOWN_SYLLABLES)
    if _UNKNOWN_SYLLABLES in buckets:
        ordered.append(_UNKNOWN_SYLLABLES)
    return [(key, buckets[key]) for key in ordered]


def syllable_heading(count: int) -> str:
    if count == _UNKNOWN_SYLLABLES:
        return "Other"
    return f"{count} syllable" if count == 1 else f"{count} syllables"


class RhymeResultFormatter:
    """Render grouped search results as markdown."""

    def format_entry(self, entry: RhymeWord, show_strength: bool = True) -> str:
        parts = [f"**{entry.word}**"]
        if entry.stress_pattern:
            parts.append(f"`{entry.stress_display}`")
        if len(entry.syllable_breakdown) > 1:
            parts.append("·".join(entry.syllable_breakdown))
        if show_strength and entry.rhyme_strength is not None:
            parts.append(f"{strength_label(entry.rhyme_strength)} ({entry.rhyme_strength}%)")
        return "- " + " | ".join(parts)

    def format_results(self, results: SearchResults, show_strength: bool = True) -> str:
        """Render one section per category, grouped by syllable count."""

        source_word = results.word
        if not results.total:
            return f"❌ No rhymes found for '{source_word}'. Try another word or adjust your filters."

        lines: List[str] = [f"## Results for **{source_word}**"]
        for category, entries in results.iter_groups():
            if not entries:
                continue
            icon = _CATEGORY_ICONS.get(category, "")
            lines.append("")
            lines.append(f"### {icon} {category.heading} ({len(entries)})".replace("  ", " "))
            for count, grouped in group_by_syllables(entries):
                lines.append("")
                lines.append(f"#### {syllable_heading(count)}")
                for entry in grouped:
                    lines.append(self.format_entry(entry, show_strength=show_strength))
        return "\n".join(lines)


__all__ = ["RhymeResultFormatter", "group_by_syllables", "syllable_heading"]
